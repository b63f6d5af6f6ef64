"""Pure geometry helpers: polar conversion, path parsing, areas, number formatting."""
import math
import re
from decimal import Decimal

import numpy as np

from .types import Point

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Number Formatting
# ============================================================
def fmt_num(v: float) -> str:
    """Coordinate text matching JavaScript Number#toString: 1 -> '1', 53.5 -> '53.5'.

    Shortest round-trip digits, no rounding.  Plain decimal for
    1e-7 <= |v| < 1e21, otherwise exponent form ('1e-7', '1.5e+21').
    Non-finite values print as NaN / Infinity / -Infinity.
    """
    v = float(v)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == 0:
        return "0"
    _, digits, exp = Decimal(repr(abs(v))).as_tuple()
    n = len(digits) + exp  # digits before the decimal point
    ds = "".join(map(str, digits)).rstrip("0")
    k = len(ds)
    if k <= n <= 21:
        s = ds + "0"*(n-k)
    elif 0 < n <= 21:
        s = ds[:n] + "." + ds[n:]
    elif -6 < n <= 0:
        s = "0." + "0"*(-n) + ds
    else:
        e = n - 1
        mant = ds[0] + ("." + ds[1:] if k > 1 else "")
        s = f"{mant}e{'+' if e >= 0 else '-'}{abs(e)}"
    return "-" + s if v < 0 else s

# ============================================================
# Polar Geometry
# ============================================================
def polar_pt(c: Point, r: float, angle: float) -> Point:
    """Point at radius r and angle (radians) around center c."""
    return (c[0] + r*math.cos(angle), c[1] + r*math.sin(angle))

def angle_of(c: Point, p: Point) -> float:
    """Angle (radians, in [0, 2pi)) of p as seen from c."""
    return math.atan2(p[1]-c[1], p[0]-c[0]) % (2*math.pi)

def ieee_div(a: float, b: float) -> float:
    """a / b with IEEE float semantics: division by zero gives +-inf or nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(a), np.float64(b)))

# ============================================================
# Path Parsing
# ============================================================
_TOKEN_RE = re.compile(r"[MmLlHhVvSsZz]|[-+]?(?:NaN|Infinity|\d*\.?\d+(?:[eE][-+]?\d+)?)")

def parse_path(d: str) -> list[tuple[str, list[float]]]:
    """Split path data into (command, args) pairs.

    Only the command letters the path builder emits are recognized.
    Raises GeometryError for numbers with no preceding command.
    """
    cmds: list[tuple[str, list[float]]] = []
    for tok in _TOKEN_RE.findall(d):
        if tok[-1].isalpha() and tok.lstrip("+-") not in ("NaN", "Infinity"):
            cmds.append((tok, []))
        elif not cmds:
            raise GeometryError(f"Path data starts with a number: {tok!r}")
        else:
            cmds[-1][1].append(float(tok.replace("Infinity", "inf")))
    return cmds

_ARITY = {"M": 2, "m": 2, "L": 2, "l": 2, "H": 1, "h": 1, "V": 1, "v": 1,
          "S": 4, "s": 4, "Z": 0, "z": 0}

def path_vertices(d: str) -> list[Point]:
    """Absolute vertex list of a path built from M/L/H/V and relative variants.

    A command followed by several argument groups ("L 1 2 3 4") yields one
    vertex per group.  Curve commands contribute their end point.  Close
    commands add nothing.  Raises GeometryError on a wrong argument count.
    """
    verts: list[Point] = []
    x = y = 0.0
    for cmd, args in parse_path(d):
        n = _ARITY[cmd]
        if n == 0:
            if args:
                raise GeometryError(f"{cmd} takes no arguments, got {len(args)}")
            continue
        if not args or len(args) % n:
            raise GeometryError(f"{cmd} needs a multiple of {n} arguments, got {len(args)}")
        for i in range(0, len(args), n):
            a = args[i:i+n]
            if cmd in "ML":
                x, y = a[0], a[1]
            elif cmd in "ml":
                x, y = x+a[0], y+a[1]
            elif cmd == "H":
                x = a[0]
            elif cmd == "h":
                x += a[0]
            elif cmd == "V":
                y = a[0]
            elif cmd == "v":
                y += a[0]
            elif cmd == "S":
                x, y = a[2], a[3]
            elif cmd == "s":
                x, y = x+a[2], y+a[3]
            verts.append((x, y))
    return verts

# ============================================================
# Polygon Utilities
# ============================================================
def poly_area(verts: list[Point]) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    if len(verts) < 3:
        return 0.0
    xy = np.asarray(verts, dtype=float)
    x, y = xy[:, 0], xy[:, 1]
    return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))) / 2)
