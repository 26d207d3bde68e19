"""A two-dimensional N-body gravity simulation with a pygame viewer."""

__version__ = "0.1.0"