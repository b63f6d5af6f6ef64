"""Spinner geometry: bearing positions and the scalloped outline path."""
import math
from typing import NamedTuple

from shared.types import Point, BearingPoint
from shared.geometry import polar_pt, ieee_div
from shared.path import PathBuilder
from spinner.constants import (
    SPINNER_RADIUS_FACTOR, WAIST_DIVISOR, CONTROL_DIVISOR, MARGIN,
)


class SchematicLayout(NamedTuple):
    """Computed spinner geometry for one parameter set."""
    branch_count: int
    internal_radius: float
    bearing_size: float
    center: Point
    bearing_radius: float
    spinner_radius: float
    angle_step: float
    bearing_points: tuple[BearingPoint, ...]
    # Closed path data, straight segments only
    outline: str


def bearing_points(center: Point, branch_count: int, internal_radius: float,
                   angle_step: float) -> tuple[BearingPoint, ...]:
    """Bearing-hole centers, one per branch, evenly spaced from angle 0."""
    pts = []
    for i in range(branch_count):
        angle = i * angle_step
        pts.append(BearingPoint(i, polar_pt(center, internal_radius, angle), angle))
    return tuple(pts)


def build_outline(center: Point, branch_count: int, spinner_radius: float,
                  angle_step: float) -> str:
    """Outline path: per branch, arm edge -> tip -> arm edge -> waist.

    The first branch opens the path with a move so the contour does not
    start with a line from the implicit origin.
    """
    path = PathBuilder()
    waist_r = spinner_radius / WAIST_DIVISOR
    for i in range(branch_count):
        angle = i * angle_step
        outer = polar_pt(center, spinner_radius, angle)
        control = polar_pt(center, spinner_radius, angle - angle_step / CONTROL_DIVISOR)
        next_control = polar_pt(center, spinner_radius, angle + angle_step / CONTROL_DIVISOR)
        inner = polar_pt(center, waist_r, angle + angle_step / 2)

        if i == 0:
            path.move_to(*control)
        else:
            path.line_to(*control)
        path.line_to(*outer)
        path.line_to(*next_control)
        path.line_to(*inner)
    path.close()
    return path.result


def compute_schematic_layout(branch_count: int, internal_radius: float,
                             bearing_size: float) -> SchematicLayout:
    """Compute the spinner layout from its three dimensional parameters.

    No input checks: zero branches gives an infinite angle step, no bearing
    points and an outline of just ``Z``; negative sizes give mirrored or
    overlapping geometry.
    """
    bearing_radius = bearing_size / 2
    spinner_radius = internal_radius + bearing_radius * SPINNER_RADIUS_FACTOR
    c = spinner_radius + MARGIN
    center = (c, c)
    angle_step = ieee_div(2 * math.pi, branch_count)

    return SchematicLayout(
        branch_count=branch_count, internal_radius=internal_radius,
        bearing_size=bearing_size,
        center=center, bearing_radius=bearing_radius,
        spinner_radius=spinner_radius, angle_step=angle_step,
        bearing_points=bearing_points(center, branch_count, internal_radius, angle_step),
        outline=build_outline(center, branch_count, spinner_radius, angle_step),
    )
