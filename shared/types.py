"""Shared type definitions for the spinner schematic project."""
from typing import NamedTuple

Point = tuple[float, float]

class BearingPoint(NamedTuple):
    index: int; center: Point; angle: float
