"""SVG primitive helpers. Each appends one element's markup to an ``out`` list."""
from xml.sax.saxutils import escape, quoteattr

from .geometry import fmt_num

SVG_NS = "http://www.w3.org/2000/svg"
STROKE_WIDTH = 0.5
FONT_SIZE = 6


def svg_circle(out, cx, cy, r, stroke="black", fill="transparent", clip_path=None):
    clip = f' clip-path="url(#{clip_path})"' if clip_path is not None else ""
    out.append(f'<circle cx="{fmt_num(cx)}" cy="{fmt_num(cy)}" r="{fmt_num(r)}"'
               f' stroke-width="{STROKE_WIDTH}" stroke="{stroke}" fill="{fill}"{clip}/>')

def svg_line(out, x1, y1, x2, y2, stroke="black"):
    out.append(f'<line x1="{fmt_num(x1)}" y1="{fmt_num(y1)}" x2="{fmt_num(x2)}" y2="{fmt_num(y2)}"'
               f' stroke="{stroke}" stroke-width="{STROKE_WIDTH}"/>')

def svg_text(out, x, y, text):
    out.append(f'<text x="{fmt_num(x)}" y="{fmt_num(y)}" font-size="{FONT_SIZE}">{escape(text)}</text>')

def svg_path(out, d, stroke="black", fill="transparent"):
    """Path element for path data ``d`` (a string or anything whose str() is path data)."""
    out.append(f'<path d={quoteattr(str(d))} stroke="{stroke}" fill="{fill}"'
               f' stroke-width="{STROKE_WIDTH}"/>')

def clip_defs(out, clip_id, cx, cy, r):
    """<defs> block holding a circular clipPath named clip_id."""
    out.append('<defs>')
    out.append(f'  <clipPath id="{clip_id}">')
    inner = []
    svg_circle(inner, cx, cy, r)
    out.extend("    " + s for s in inner)
    out.append('  </clipPath>')
    out.append('</defs>')

def measure(out, x=10, y=10, value=10):
    """Reference ruler: label, a line ``value`` units long and two end ticks."""
    out.append('<g>')
    svg_text(out, x, y-3, f"{fmt_num(value)}mm")
    svg_line(out, x, y, x+value, y)
    svg_line(out, x, y-2, x, y+2)
    svg_line(out, x+value, y-2, x+value, y+2)
    out.append('</g>')

def clear(out):
    """Remove every element from the surface."""
    del out[:]
