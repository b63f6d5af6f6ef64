"""Generate the spinner schematic SVG from branch count, internal radius and bearing size.

Geometry comes from spinner/layout.py; all dimensions in millimetres.
"""
import os, sys, argparse

from shared.geometry import GeometryError, fmt_num, path_vertices, poly_area
from shared.svg import (
    SVG_NS, svg_circle, svg_path, clip_defs, measure, clear,
)
from spinner.layout import compute_schematic_layout
from spinner.constants import (
    DEFAULT_BRANCHES, DEFAULT_INTERNAL_RADIUS, DEFAULT_BEARING_SIZE,
    MARGIN, DOT_RADIUS, CLIP_ID, CLIP_PAD, SURFACE_ID, HUB_FILL,
    RULER_X, RULER_Y, RULER_LENGTH,
)

_DEFAULT_OUTPUT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "spinner.svg")

# ============================================================
# Parameter checks (host boundary only)
# ============================================================

class SchematicParameterError(GeometryError):
    """Raised by check_parameters for parameters that cannot make a spinner."""


def check_parameters(branch_count, internal_radius, bearing_size):
    """Reject zero/negative parameters. The layout itself never checks."""
    if branch_count < 1:
        raise SchematicParameterError(f"branch count must be at least 1, got {branch_count}")
    if not internal_radius > 0:
        raise SchematicParameterError(f"internal radius must be positive, got {internal_radius}")
    if not bearing_size > 0:
        raise SchematicParameterError(f"bearing size must be positive, got {bearing_size}")

# ============================================================
# Geometry computation
# ============================================================

def build_schematic_data(branch_count=DEFAULT_BRANCHES,
                         internal_radius=DEFAULT_INTERNAL_RADIUS,
                         bearing_size=DEFAULT_BEARING_SIZE):
    """Compute everything the SVG needs."""
    layout = compute_schematic_layout(branch_count, internal_radius, bearing_size)
    size = 2 * (layout.spinner_radius + MARGIN)
    outline_area = poly_area(path_vertices(layout.outline))
    return {
        "layout": layout,
        "size": size,
        "outline_area": outline_area,
    }

# ============================================================
# SVG rendering
# ============================================================

def render_schematic_svg(data, out=None):
    """Render the schematic. Returns SVG string.

    ``out`` is the drawing surface; an existing list is cleared and redrawn.
    """
    if out is None:
        out = []
    clear(out)
    layout = data["layout"]
    cx, cy = layout.center
    size = fmt_num(data["size"])

    out.append(f'<svg xmlns="{SVG_NS}" id="{SURFACE_ID}" width="{size}mm" height="{size}mm"'
               f' viewBox="0 0 {size} {size}">')
    clip_defs(out, CLIP_ID, cx, cy, layout.spinner_radius + CLIP_PAD)

    # Central bearing and center mark
    svg_circle(out, cx, cy, layout.bearing_radius, "black", HUB_FILL)
    svg_circle(out, cx, cy, DOT_RADIUS, "black", "black")

    # Ball bearings
    for bp in layout.bearing_points:
        bx, by = bp.center
        svg_circle(out, bx, by, layout.bearing_radius)
        svg_circle(out, bx, by, DOT_RADIUS, "black", "black")

    svg_path(out, layout.outline)
    measure(out, RULER_X, RULER_Y, RULER_LENGTH)
    out.append('</svg>')

    return "\n".join(out)

# ============================================================
# Main entry point
# ============================================================

def _parser():
    ap = argparse.ArgumentParser(description="Render a fidget spinner schematic as SVG (mm).")
    ap.add_argument("--branches", type=int, default=DEFAULT_BRANCHES,
                    help=f"number of arms (default {DEFAULT_BRANCHES})")
    ap.add_argument("--internal-radius", type=float, default=DEFAULT_INTERNAL_RADIUS,
                    help="center to bearing-hole center, mm")
    ap.add_argument("--bearing-size", type=float, default=DEFAULT_BEARING_SIZE,
                    help="bearing diameter, mm")
    ap.add_argument("-o", "--output", default=_DEFAULT_OUTPUT, help="SVG file to write")
    ap.add_argument("--strict", action="store_true",
                    help="reject zero or negative parameters instead of drawing them")
    return ap


def main(argv=None):
    ap = _parser()
    args = ap.parse_args(argv)
    if args.strict:
        try:
            check_parameters(args.branches, args.internal_radius, args.bearing_size)
        except SchematicParameterError as e:
            ap.error(str(e))

    data = build_schematic_data(args.branches, args.internal_radius, args.bearing_size)
    svg_content = render_schematic_svg(data)
    with open(args.output, "w") as f:
        f.write(svg_content)

    layout = data["layout"]
    print(f"Schematic written to {args.output}")
    print(f"Bearing radius: {layout.bearing_radius:.2f} mm")
    print(f"Spinner radius: {layout.spinner_radius:.2f} mm")
    print(f"Center:         ({layout.center[0]:.2f}, {layout.center[1]:.2f})")
    print(f"Outline area:   {data['outline_area']:.2f} sq mm")
    print()
    for bp in layout.bearing_points:
        print(f"  B{bp.index:<3d} ({bp.center[0]:8.4f}, {bp.center[1]:8.4f})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
