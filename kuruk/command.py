"""Default simulator setup and camera calibration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from kuruk.geometry import Geometry, default_geometry


@dataclass
class CameraCalibration:
    """Camera parameters; the world position is in vision millimetres."""

    camera_id: int
    focal_length: float
    principal_point_x: float
    principal_point_y: float
    distortion: float
    q0: float
    q1: float
    q2: float
    q3: float
    tx: float
    ty: float
    tz: float
    derived_camera_world_tx: float = 0.0
    derived_camera_world_ty: float = 0.0
    derived_camera_world_tz: float = 0.0


@dataclass
class SimulatorSetup:
    geometry: Geometry = field(default_factory=default_geometry)
    camera_setup: List[CameraCalibration] = field(default_factory=list)


def create_default_camera(camera_id: int, x: float, y: float, z: float) -> CameraCalibration:
    """Camera with placeholder optics placed at (x, y, z) in internal metres."""
    return CameraCalibration(
        camera_id=camera_id,
        distortion=0.2,
        focal_length=390,
        principal_point_x=300,
        principal_point_y=300,
        q0=0.7,
        q1=0.7,
        q2=0.7,
        q3=0.7,
        tx=0,
        ty=0,
        tz=3500,
        derived_camera_world_tx=y * 1000,
        derived_camera_world_ty=-x * 1000,
        derived_camera_world_tz=z * 1000,
    )


def default_simulator_setup() -> SimulatorSetup:
    """Large field with one camera above its centre."""
    return SimulatorSetup(
        geometry=default_geometry(True),
        camera_setup=[create_default_camera(0, 0.0, 0.0, 4.0)],
    )