"""Shared types, geometry, path building, and SVG utilities."""

from .types import Point, BearingPoint
from .geometry import (
    GeometryError,
    fmt_num, polar_pt, angle_of, ieee_div,
    parse_path, path_vertices, poly_area,
)
from .path import PathBuilder
from .svg import svg_circle, svg_line, svg_text, svg_path, clip_defs, measure, clear
