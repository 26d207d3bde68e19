# gravitysim

gravitysim is a small two-dimensional gravity simulation. It loads a set of
bodies from a JSON save file, optionally lets them attract one another, and
draws them as white circles in a pygame window that you can pan and zoom.

## Installation

```
pip install .
```

## Running

```
gravitysim
```

Options:

| Option            | Meaning                                              |
|-------------------|------------------------------------------------------|
| `--config PATH`   | configuration file to load (default: `config.json`)  |
| `--log-file PATH` | log file to write (default: `output.log`)            |

Log records of the `gravitysim` logger, from DEBUG up, go to stdout and to the
log file. If the log file cannot be opened, a message is printed and the
simulation runs without that logging setup.

The window runs at up to 60 frames per second and advances the simulation by
the real time elapsed between frames. Closing the window ends the program.

### Controls

| Key         | Action                                        |
|-------------|-----------------------------------------------|
| Arrow keys  | Move the camera by 20 screen units            |
| `Y`         | Zoom in (zoom multiplied by 4/3)              |
| `T`         | Zoom out (zoom multiplied by 3/4)             |

## Configuration

The configuration file names the save file and turns gravity on or off. Both
fields are required:

```json
{
  "is_gravity_enabled": true,
  "save_file_name": "save.json"
}
```

If the file is missing or cannot be parsed, a warning is logged and the
defaults apply: gravity is off and no save file is named, which gives an empty
universe.

## Save files

A save file holds the list of bodies. Each body has a position, a radius, a
mass and a velocity, all required:

```json
{
  "bodies": [
    {"position": [0.0, 0.0], "radius": 20.0, "mass": 1000.0, "velocity": [0.0, 0.0]},
    {"position": [150.0, 0.0], "radius": 5.0, "mass": 10.0, "velocity": [0.0, 2.0]}
  ]
}
```

A save that cannot be read or parsed gives an empty universe, with a warning
in the log.

## Using it as a library

```python
from gravitysim.model import Model
from gravitysim.camera import Camera

model = Model.from_config("config.json")
model.update(1 / 60)

camera = Camera(zoom=2.0)
for shape in model.shapes():
    position, radius = camera.world_to_camera(shape)
    print(position, radius)

model.save("snapshot.json")
```

The main pieces:

- `gravitysim.vector.Vec2` – immutable 2D vector with `+`, `-`, scalar `*`,
  negation, `length()`, `normalize_or_zero()`, `to_list()` and `from_list()`.
- `gravitysim.body.Body` – position, radius, mass and velocity, with
  `to_dict()` / `from_dict()`.
- `gravitysim.physics` – `delta_velocities()`, `update_positions()` and the
  `Physics` class with its `gravity_enabled` switch.
- `gravitysim.config.Config` and `gravitysim.save.Save` – loading from JSON
  with `from_file()`; `Save` also has `to_json()` and `write()`.
- `gravitysim.universe.Universe`, `gravitysim.model.Model` – the simulated
  bodies; `Model.save()` writes to `save.json` by default.
- `gravitysim.camera.Camera` – maps `(position, radius)` pairs to view
  coordinates as `(position - camera.position) * zoom, radius * zoom`.
- `gravitysim.app.App` – a model and a camera together; `handle_key()` takes a
  `Key` or one of the strings `"right"`, `"left"`, `"up"`, `"down"`, `"y"`,
  `"t"` and ignores anything else.

## Physics

When gravity is enabled, each pair of bodies attracts with a force of
`m1 * m2 / (d² + 300)`. Each body's change in speed per step,
`force / mass * dt`, is clamped to the range 0 to 400. Velocities are updated
first, and positions are then advanced by `velocity * dt`. With gravity off,
bodies simply move along their velocities.

## Limitations

- Bodies pass through one another: there is no collision handling.
- The window has no way to save the current state; saving is available only
  through `Model.save()` when the package is used as a library.

## Tests

```
pip install .[test]
pytest
```