"""Field geometry in internal metres and conversion to and from vision format.

Internal geometry uses metres. The vision field description uses millimetres.
Its integer fields are rounded to whole millimetres.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

_FLOAT_MAX = 3.4028234663852886e38


class GeometryType(IntEnum):
    """Rule version the field markings follow."""

    TYPE_2014 = 1
    TYPE_2018 = 2


@dataclass
class Geometry:
    """Field dimensions in metres."""

    line_width: float = 0.0
    field_width: float = 0.0
    field_height: float = 0.0
    boundary_width: float = 0.0
    goal_width: float = 0.0
    goal_depth: float = 0.0
    goal_wall_width: float = 0.0
    center_circle_radius: float = 0.0
    defense_radius: Optional[float] = None
    defense_stretch: float = 0.0
    free_kick_from_defense_dist: float = 0.0
    penalty_spot_from_field_line_dist: float = 0.0
    penalty_line_from_spot_dist: float = 0.0
    defense_width: float = 0.0
    defense_height: float = 0.0
    goal_height: float = 0.0
    type: GeometryType = GeometryType.TYPE_2014


@dataclass
class Point2f:
    x: float = 0.0
    y: float = 0.0


@dataclass
class FieldLineSegment:
    """A straight field marking in millimetres."""

    name: str
    p1: Point2f
    p2: Point2f
    thickness: float


@dataclass
class FieldCircularArc:
    """A circular field marking in millimetres; angles in radians."""

    name: str
    center: Point2f
    radius: float
    a1: float
    a2: float
    thickness: float


@dataclass
class GeometryFieldSize:
    """Field description in the vision format (millimetres)."""

    field_length: int = 0
    field_width: int = 0
    goal_width: int = 0
    goal_depth: int = 0
    boundary_width: int = 0
    field_lines: List[FieldLineSegment] = dataclasses.field(default_factory=list)
    field_arcs: List[FieldCircularArc] = dataclasses.field(default_factory=list)


def default_geometry(use_quad_field: bool = True) -> Geometry:
    """Geometry of the standard field: the large field or the small 2014 one."""
    quad = use_quad_field
    return Geometry(
        line_width=0.01,
        field_width=9.00 if quad else 6.00,
        field_height=12.00 if quad else 9.00,
        boundary_width=0.30 if quad else 0.25,
        goal_width=1.20 if quad else 1.00,
        goal_depth=0.18,
        goal_wall_width=0.02,
        center_circle_radius=0.50,
        defense_radius=1.20 if quad else 1.00,
        defense_stretch=2.4 if quad else 0.50,
        free_kick_from_defense_dist=0.20,
        penalty_spot_from_field_line_dist=1.20 if quad else 1.00,
        penalty_line_from_spot_dist=0.40,
        defense_width=2.40 if quad else 2.00,
        defense_height=1.20 if quad else 1.00,
        goal_height=0.155,
        type=GeometryType.TYPE_2018 if quad else GeometryType.TYPE_2014,
    )


def convert_from_ssl_geometry(field: GeometryFieldSize) -> Geometry:
    """Build internal geometry from a vision field description.

    The description should be complete and follow a single rule version.
    """
    geometry = Geometry(
        field_width=field.field_width / 1000.0,
        field_height=field.field_length / 1000.0,
        goal_width=field.goal_width / 1000.0,
        goal_depth=field.goal_depth / 1000.0,
        boundary_width=field.boundary_width / 1000.0,
        goal_height=0.155,
        goal_wall_width=0.02,
        free_kick_from_defense_dist=0.20,
        penalty_line_from_spot_dist=0.40,
    )

    min_thickness = _FLOAT_MAX
    is_2014 = True
    for line in field.field_lines:
        min_thickness = min(min_thickness, line.thickness)
        if line.name == "LeftPenaltyStretch":
            span = abs(line.p1.y - line.p2.y) / 1000.0
            geometry.defense_stretch = span
            geometry.defense_width = span
        elif line.name == "LeftFieldLeftPenaltyStretch":
            geometry.defense_height = abs(line.p1.x - line.p2.x) / 1000.0
            is_2014 = False

    for arc in field.field_arcs:
        min_thickness = min(min_thickness, arc.thickness)
        if arc.name == "LeftFieldLeftPenaltyArc":
            is_2014 = True
            geometry.defense_radius = arc.radius / 1000.0
        elif arc.name == "CenterCircle":
            geometry.center_circle_radius = arc.radius / 1000.0

    geometry.line_width = min_thickness / 1000.0
    if is_2014:
        geometry.penalty_spot_from_field_line_dist = geometry.defense_radius or 0.0
    else:
        geometry.penalty_spot_from_field_line_dist = geometry.defense_height
    if geometry.defense_radius is None:
        geometry.defense_radius = geometry.defense_height
    geometry.type = GeometryType.TYPE_2014 if is_2014 else GeometryType.TYPE_2018
    return geometry


def convert_to_ssl_geometry(geometry: Geometry) -> GeometryFieldSize:
    """Describe internal geometry in the vision format with all field markings."""
    thickness = geometry.line_width * 1000.0
    result = GeometryFieldSize(
        field_width=round(geometry.field_width * 1000.0),
        field_length=round(geometry.field_height * 1000.0),
        boundary_width=round(geometry.boundary_width * 1000.0),
        goal_width=round(geometry.goal_width * 1000.0),
        goal_depth=round(geometry.goal_depth * 1000.0),
    )

    def add_line(name: str, x1: float, y1: float, x2: float, y2: float) -> None:
        result.field_lines.append(
            FieldLineSegment(name, Point2f(x1, y1), Point2f(x2, y2), thickness)
        )

    def add_arc(name: str, x: float, y: float, radius: float, a1: float, a2: float) -> None:
        result.field_arcs.append(
            FieldCircularArc(name, Point2f(x, y), radius, a1, a2, thickness)
        )

    length_half = geometry.field_height * 1000.0 / 2.0
    width_half = geometry.field_width * 1000.0 / 2.0
    add_line("TopTouchLine", -length_half, width_half, length_half, width_half)
    add_line("BottomTouchLine", -length_half, -width_half, length_half, -width_half)
    add_line("LeftGoalLine", -length_half, -width_half, -length_half, width_half)
    add_line("RightGoalLine", length_half, -width_half, length_half, width_half)
    add_line("HalfwayLine", 0.0, -width_half, 0.0, width_half)
    add_line("CenterLine", -length_half, 0.0, length_half, 0.0)
    add_arc(
        "CenterCircle", 0.0, 0.0, geometry.center_circle_radius * 1000.0, 0.0, 2.0 * math.pi
    )

    if geometry.type == GeometryType.TYPE_2018:
        distance = geometry.defense_height * 1000.0
        pos = -length_half + distance
        half = geometry.defense_width * 1000.0 / 2.0
        add_line("LeftPenaltyStretch", pos, -half, pos, half)
        add_line("RightPenaltyStretch", -pos, -half, -pos, half)
        add_line("LeftFieldLeftPenaltyStretch", -length_half, -half, pos, -half)
        add_line("LeftFieldRightPenaltyStretch", -length_half, half, pos, half)
        add_line("RightFieldRightPenaltyStretch", length_half, -half, -pos, -half)
        add_line("RightFieldLeftPenaltyStretch", length_half, half, -pos, half)
    else:
        distance = (geometry.defense_radius or 0.0) * 1000.0
        pos = -length_half + distance
        half = geometry.defense_stretch * 1000.0 / 2.0
        add_line("LeftPenaltyStretch", pos, -half, pos, half)
        add_line("RightPenaltyStretch", -pos, -half, -pos, half)
        add_arc("LeftFieldLeftPenaltyArc", -length_half, -half, distance, 0.0, 0.5 * math.pi)
        add_arc(
            "LeftFieldRightPenaltyArc", -length_half, half, distance, 1.5 * math.pi, 2.0 * math.pi
        )
        add_arc("RightFieldLeftPenaltyArc", length_half, -half, distance, math.pi, 1.5 * math.pi)
        add_arc("RightFieldRightPenaltyArc", length_half, half, distance, 0.5 * math.pi, math.pi)

    return result