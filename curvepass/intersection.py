"""Root finding for the crossings of a tangential curve and a straight line."""

from __future__ import annotations

import logging
import math

from curvepass.functions import LinearFunction, Point, TangentialFunction

logger = logging.getLogger(__name__)


class NoSignChangeError(RuntimeError):
    """Raised when the difference of the curves keeps its sign over an interval."""


class IntersectionFinder:
    """Finds where a tangential function meets a linear one, branch by branch."""

    accuracy = 1e-8

    def __init__(self, tan_fun: TangentialFunction, lin_fun: LinearFunction) -> None:
        self.tan_fun = tan_fun
        self.lin_fun = lin_fun

    def difference(self, x: float) -> float:
        """Value of tan_fun(x) - lin_fun(x)."""
        return self.tan_fun(x) - self.lin_fun(x)

    def intersection_in_range(self, low: float, high: float) -> Point:
        """Bisect between two neighbouring asymptotes to find one crossing."""
        x_min = low + self.accuracy
        x_max = high - self.accuracy

        if self.difference(x_min) * self.difference(x_max) > 0:
            raise NoSignChangeError("Function does not change sign on interval")

        width = abs(x_max - x_min)
        if width > 0:
            repetitions = abs(int(math.log2(width / self.accuracy))) + 1
        else:
            repetitions = 1

        for _ in range(repetitions):
            middle = 0.5 * (x_min + x_max)
            value = self.difference(middle)
            if abs(value) < self.accuracy:
                return Point(middle, self.tan_fun(middle))
            if value > 0.0:
                x_max = middle
            else:
                x_min = middle

        middle = 0.5 * (x_min + x_max)
        return Point(middle, self.tan_fun(middle))

    def intersection_points(self, count_per_direction: int) -> list[Point]:
        """Return one crossing for each of the first ``count_per_direction`` branches."""
        if count_per_direction <= 0:
            return []

        points = []
        low, high = self.tan_fun.asymptote(1), self.tan_fun.asymptote(2)
        for number in range(2, count_per_direction + 2):
            points.append(self.intersection_in_range(low, high))
            low, high = high, self.tan_fun.asymptote(number + 1)
            logger.debug("bounds %d: %r | %r", number - 1, low, high)
        return points