"""The linear and tangential curves whose intersections seed the digit map."""

from __future__ import annotations

import math
from dataclasses import dataclass

from curvepass.numconv import map_to_range

_SEPARATOR = "=" * 22 + " " + "=" * 22 + " " + "=" * 22


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


class LinearFunction:
    """f(x) = k*x + h, built from raw parameters in [0, 1)."""

    def __init__(self, raw_k: float, raw_h: float) -> None:
        self.k = map_to_range(raw_k, -5, 5)
        self.h = map_to_range(raw_h, -100, 100, True)

    def __call__(self, x: float) -> float:
        return self.k * x + self.h

    def x_intercept(self) -> float:
        """Argument at which the line crosses the X axis."""
        return -(self.h / self.k)

    def y_intercept(self) -> float:
        """Value at which the line crosses the Y axis."""
        return self.h

    def describe(self) -> str:
        return "\n".join(
            [
                "-" * 22 + " Linear Function Parameters " + "-" * 22,
                f"k = {self.k:g}",
                f"h = {self.h:g}",
                _SEPARATOR,
            ]
        )

    def __repr__(self) -> str:
        return f"LinearFunction(k={self.k!r}, h={self.h!r})"


class TangentialFunction:
    """f(x) = g * ((c * tan(a*x + b) + d) / f), built from raw parameters in [0, 1)."""

    def __init__(
        self,
        raw_a: float,
        raw_b: float,
        raw_c: float,
        raw_d: float,
        raw_f: float,
        raw_g: float,
    ) -> None:
        self.a = map_to_range(raw_a, -10.0, 10.0)
        self.b = map_to_range(raw_b, 0.0, math.pi, True)
        self.c = map_to_range(raw_c, -10.0, 10.0)
        self.d = map_to_range(raw_d, -5.0, 5.0)
        self.f = map_to_range(raw_f, -10.0, 10.0)
        self.g = map_to_range(raw_g, -10.0, 10.0)

    def __call__(self, x: float) -> float:
        return ((math.tan(self.a * x + self.b) * self.c + self.d) / self.f) * self.g

    def asymptote(self, n: int) -> float:
        """Position of the n-th vertical asymptote."""
        return ((math.pi / 2.0) + float(n - 1) * math.pi - self.b) / self.a

    def describe(self) -> str:
        lines = ["-" * 22 + " Tangential Function Parameters " + "-" * 22]
        lines.extend(
            f"{name} = {getattr(self, name):g}" for name in ("a", "b", "c", "d", "f", "g")
        )
        lines.append(_SEPARATOR)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TangentialFunction(a={self.a!r}, b={self.b!r}, c={self.c!r}, "
            f"d={self.d!r}, f={self.f!r}, g={self.g!r})"
        )