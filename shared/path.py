"""SVG path-data builder: accumulates move/line/curve/close commands."""
from .geometry import fmt_num


class PathBuilder:
    """Ordered accumulator of SVG path command tokens.

    Each command appends exactly one token such as ``"L 3 4"``.  Tokens are
    never reordered or checked: commands appended after ``close()`` simply
    reopen the path.  Read the finished description from ``result``.
    """

    def __init__(self):
        self._tokens: list[str] = []

    def _emit(self, cmd: str, *args: float) -> None:
        self._tokens.append(" ".join([cmd, *(fmt_num(a) for a in args)]))

    # --- moves ---
    def move_to(self, x: float, y: float) -> None:
        self._emit("M", x, y)

    def move_delta(self, dx: float, dy: float) -> None:
        self._emit("m", dx, dy)

    # --- straight segments ---
    def line_to(self, x: float, y: float) -> None:
        self._emit("L", x, y)

    def line_delta(self, dx: float, dy: float) -> None:
        self._emit("l", dx, dy)

    def horizontal_to(self, x: float) -> None:
        self._emit("H", x)

    def horizontal_delta(self, dx: float) -> None:
        self._emit("h", dx)

    def vertical_to(self, y: float) -> None:
        self._emit("V", y)

    def vertical_delta(self, dy: float) -> None:
        self._emit("v", dy)

    # --- curves ---
    def spline_to(self, x2: float, y2: float, x: float, y: float) -> None:
        """Smooth cubic segment: control point (x2, y2), end point (x, y)."""
        self._emit("S", x2, y2, x, y)

    def quadratic_to(self, x1: float, y1: float, x: float, y: float) -> None:
        """Alias of spline_to; emits the same ``S`` command."""
        self._emit("S", x1, y1, x, y)

    def close(self) -> None:
        self._tokens.append("Z")

    # --- output ---
    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._tokens)

    @property
    def result(self) -> str:
        return " ".join(self._tokens)

    def __str__(self) -> str:
        return self.result

    def __repr__(self) -> str:
        return f"PathBuilder({self.result!r})"
