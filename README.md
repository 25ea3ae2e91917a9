# kuruk

Building blocks for a small-size robot soccer simulator and strategy stack.
Pure Python, no third-party dependencies.

## Modules

- `kuruk.vector.Vector`: a mutable 2D vector dataclass. Supports `+`, `-`,
  `*` (by a number it scales, by another vector it gives the dot product),
  `/`, `+=`, `*=`, indexing with `0`/`1`, iteration, and `abs()` for a
  component-wise absolute value. Methods: `length`, `length_squared`,
  `distance`, `distance_sq`, `dot`, `perpendicular` (clockwise quarter turn),
  `normalized`, `angle` and the static `Vector.det(a, b, c)`.
- `kuruk.rng.Rng`: a combined Tausworthe generator. A fixed non-zero seed
  gives a reproducible sequence; seed `0` seeds from the clock. Draws:
  `uniform_int`, `uniform`, `uniform_positive`, `uniform_float`,
  `uniform_vector`, `uniform_vector_in`, `normal` and `normal_vector`
  (polar Box-Muller).
- `kuruk.fieldtransform.FieldTransform`: mirrors the field (`set_flip`) and
  applies a six-value affine transform (`set_transform`) to positions,
  speeds and angles, with `apply_inverse_x`, `apply_inverse_y` and
  `apply_inverse_position` going back.
- `kuruk.coordinates`: `from_vision`/`to_vision` convert positions between
  vision millimetres and internal metres (rotated by a quarter turn),
  `from_vision_velocity`/`to_vision_velocity` do the same for velocities,
  `from_vision_rotation`/`to_vision_rotation` shift angles, and
  `chip_vel_from_chip_distance`/`chip_distance_from_chip_vel` relate the
  speed and distance of a 45 degree chip kick. Inputs may be vectors,
  `(x, y)` pairs or objects with `x`/`y` (or `v_x`/`v_y`, `vx`/`vy`).
- `kuruk.scope.run_when_out_of_scope`: a context manager that calls a
  callback when the `with` block ends, also on an exception.
- `kuruk.timer.Timer`: an internal clock in nanoseconds whose speed can be
  changed with `set_scaling` without a jump in time. `add_scaling_listener`
  registers callables told of each new scaling; negative scaling raises
  `ValueError`.
- `kuruk.protobuffile`: `ProtobufFileSaver` writes a header (file prefix and
  version 0) on the first save, then one length-prefixed record per
  message; `save_message` takes a protobuf message or bytes and returns
  `False` if it cannot be serialized. `ProtobufFileReader.open` checks the
  prefix and version, `read_next` parses the next record into a message and
  returns `False` at the end, and iterating yields the raw record bytes.
  Problems raise `ProtobufFileError`. Both are context managers.
- `kuruk.geometry`: the `Geometry` dataclass (metres), the vision field
  description `GeometryFieldSize` with `FieldLineSegment` and
  `FieldCircularArc` (millimetres), `default_geometry(use_quad_field)`,
  `convert_to_ssl_geometry` (adds all field lines and arcs for the 2014 or
  2018 rule version) and `convert_from_ssl_geometry`.
- `kuruk.robot.default_robot_specs()`: a `RobotSpecs` with standard values
  and `LimitParameters` for acceleration and strategy.
- `kuruk.command`: `create_default_camera` and `default_simulator_setup`
  (large field, one camera 4 m above the centre).
- `kuruk.sslprotocols`: the standard league network addresses and ports,
  and `simulation_control_port(is_blue)`.
- `kuruk.referee`: `State`, `RefereeCommand`, `TeamInfo`, `GameState`,
  `RefereePacket`, `default_team_info`, `command_from_game_state`, and
  `SslRefereeExtractor`, which turns a stream of game states into referee
  packets, counting commands and stamping the time of each state change.

## Installation

```
pip install .
```

## Example

```python
from kuruk.vector import Vector
from kuruk.rng import Rng
from kuruk.geometry import default_geometry, convert_to_ssl_geometry

v = Vector(3.0, 4.0)
print(v.length())          # 5.0

rng = Rng(42)
print(rng.uniform())       # the same value for every run with seed 42

field = convert_to_ssl_geometry(default_geometry(True))
print(field.field_length)  # 12000
```

## What this package does not do

It is a library only. It has no command to run, no field display or
window, no network sending or receiving of vision, referee or robot
command packets (only the port numbers are provided), no strategy or path
planning, and no protobuf message definitions of its own: the message-log
classes work with whatever protobuf messages the caller supplies.

## Running the tests

```
pip install .[test]
pytest
```