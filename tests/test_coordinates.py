import math
from types import SimpleNamespace

import pytest

from kuruk import coordinates
from kuruk.vector import Vector


def test_from_vision_swaps_and_scales():
    result = coordinates.from_vision((1000.0, 2000.0))
    assert result.x == pytest.approx(-2.0)
    assert result.y == pytest.approx(1.0)


def test_from_vision_accepts_objects_with_xy():
    result = coordinates.from_vision(SimpleNamespace(x=1000.0, y=2000.0))
    assert result == coordinates.from_vision((1000.0, 2000.0))


@pytest.mark.parametrize("point", [(0.0, 0.0), (1.5, -2.0), (-3.25, 4.5)])
def test_position_round_trip(point):
    back = coordinates.from_vision(coordinates.to_vision(point))
    assert back.x == pytest.approx(point[0])
    assert back.y == pytest.approx(point[1])


def test_to_vision_of_vector():
    result = coordinates.to_vision(Vector(1.0, 2.0))
    assert result.x == pytest.approx(2000.0)
    assert result.y == pytest.approx(-1000.0)


def test_velocity_accepts_v_x_and_vx_fields():
    a = coordinates.from_vision_velocity(SimpleNamespace(v_x=500.0, v_y=-250.0))
    b = coordinates.from_vision_velocity(SimpleNamespace(vx=500.0, vy=-250.0))
    c = coordinates.from_vision_velocity((500.0, -250.0))
    assert a == b == c
    assert a == coordinates.from_vision((500.0, -250.0))


def test_velocity_round_trip():
    original = SimpleNamespace(vx=1.2, vy=-0.4)
    back = coordinates.from_vision_velocity(coordinates.to_vision_velocity(original))
    assert back.x == pytest.approx(1.2)
    assert back.y == pytest.approx(-0.4)


def test_rotation_offset_is_quarter_turn():
    assert coordinates.from_vision_rotation(0.0) == pytest.approx(math.pi / 2)


@pytest.mark.parametrize("angle", [-1.0, 0.0, 0.5, 3.0])
def test_rotation_round_trip(angle):
    assert coordinates.to_vision_rotation(
        coordinates.from_vision_rotation(angle)
    ) == pytest.approx(angle)


@pytest.mark.parametrize("distance", [0.5, 1.0, 4.0])
def test_chip_round_trip(distance):
    velocity = coordinates.chip_vel_from_chip_distance(distance)
    assert coordinates.chip_distance_from_chip_vel(velocity) == pytest.approx(distance)


def test_chip_zero_distance_needs_zero_speed():
    assert coordinates.chip_vel_from_chip_distance(0.0) == 0.0


def test_chip_speed_grows_with_distance():
    assert coordinates.chip_vel_from_chip_distance(
        2.0
    ) > coordinates.chip_vel_from_chip_distance(1.0)