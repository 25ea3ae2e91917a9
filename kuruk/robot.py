"""Default robot specifications, used when replaying vision logs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class GenerationType(IntEnum):
    REGULAR = 1


@dataclass
class LimitParameters:
    """Acceleration and braking limits (forward, sideways, rotation)."""

    a_speedup_f_max: float = 0.0
    a_speedup_s_max: float = 0.0
    a_speedup_phi_max: float = 0.0
    a_brake_f_max: float = 0.0
    a_brake_s_max: float = 0.0
    a_brake_phi_max: float = 0.0


@dataclass
class RobotSpecs:
    """Physical and control parameters of a robot."""

    radius: float = 0.0
    height: float = 0.0
    generation: int = 0
    year: int = 0
    id: int = 0
    type: GenerationType = GenerationType.REGULAR
    mass: float = 0.0
    angle: float = 0.0
    v_max: float = 0.0
    omega_max: float = 0.0
    shot_linear_max: float = 0.0
    shot_chip_max: float = 0.0
    dribbler_width: float = 0.0
    ir_param: float = 0.0
    shoot_radius: float = 0.0
    dribbler_height: float = 0.0
    acceleration: LimitParameters = field(default_factory=LimitParameters)
    strategy: LimitParameters = field(default_factory=LimitParameters)


def default_robot_specs() -> RobotSpecs:
    """Specifications of a standard robot."""
    return RobotSpecs(
        radius=0.09,
        height=0.15,
        generation=3,
        year=2014,
        id=0,
        type=GenerationType.REGULAR,
        mass=1.5,
        angle=0.982,
        v_max=3.5,
        omega_max=6,
        shot_linear_max=6.5,
        shot_chip_max=3,
        dribbler_width=0.07,
        ir_param=40,
        shoot_radius=0.067,
        dribbler_height=0.04,
        acceleration=LimitParameters(
            a_speedup_f_max=7,
            a_speedup_s_max=6,
            a_speedup_phi_max=60,
            a_brake_f_max=7,
            a_brake_s_max=6,
            a_brake_phi_max=60,
        ),
        strategy=LimitParameters(
            a_speedup_f_max=4,
            a_speedup_s_max=3,
            a_speedup_phi_max=45,
            a_brake_f_max=3,
            a_brake_s_max=3,
            a_brake_phi_max=45,
        ),
    )