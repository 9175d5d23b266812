"""Utilities for working with angles on the circle.

All angles are in radians. Canonical angles are in the range [-pi, pi).
"""

import math

TWO_PI = 2 * math.pi


def wrap_angle(angle: float) -> float:
    """Map an angle into the range [-pi, pi).

    Parameters
    ----------
    angle : float
        The angle to wrap in radians.

    Returns
    -------
    wrapped_angle : float
        The equivalent angle in the range [-pi, pi).
    """
    wrapped = (angle + math.pi) % TWO_PI - math.pi

    # floating point modulo can land exactly on pi
    if wrapped >= math.pi:
        wrapped -= TWO_PI
    return wrapped


def _split_interval(lower: float, upper: float) -> list[tuple[float, float]]:
    """Split an interval into segments that do not cross the seam at +/- pi.

    The interval runs counter-clockwise from lower to upper after both
    bounds are wrapped into [-pi, pi).
    """
    if upper - lower >= TWO_PI:
        return [(-math.pi, math.pi)]

    start = wrap_angle(lower)
    stop = wrap_angle(upper)
    if stop >= start:
        width = stop - start
    else:
        width = stop - start + TWO_PI

    if width <= 0:
        return []

    end = start + width
    if end <= math.pi:
        return [(start, end)]
    return [(start, math.pi), (-math.pi, end - TWO_PI)]


class AngleInterval:
    """Tally of the parts of a circle that have been claimed.

    The claimed parts are stored as sorted, disjoint segments
    within [-pi, pi]. Segments are merged as they are added, so the
    claimed measure only grows.

    Parameters
    ----------
    tolerance : float
        Segments closer than this are merged and the circle is
        considered complete once the claimed angle is within this
        of 2 * pi. Default value is 1e-12.
    """

    def __init__(self, tolerance: float = 1e-12):
        self.tolerance = tolerance
        self._segments: list[tuple[float, float]] = []
        self._claimed_angle = 0.0

    @property
    def segments(self) -> tuple[tuple[float, float], ...]:
        """Get the claimed segments."""
        return tuple(self._segments)

    @property
    def claimed_angle(self) -> float:
        """Get the total claimed angle in radians."""
        return self._claimed_angle

    def get_unvisited_angle(self, interval: tuple[float, float]) -> float:
        """Claim an interval and return the part that was not yet claimed.

        Parameters
        ----------
        interval : tuple[float, float]
            The (lower, upper) bounds of the interval. The interval goes
            counter-clockwise from lower to upper, so lower > upper means
            the interval crosses the seam at +/- pi.

        Returns
        -------
        unvisited_angle : float
            The angle in radians of the interval that had not been
            claimed before this call.
        """
        lower, upper = interval
        new_segments = _split_interval(float(lower), float(upper))
        if len(new_segments) == 0:
            return 0.0

        self._segments = self._merge(self._segments + new_segments)

        previous_angle = self._claimed_angle
        self._claimed_angle = sum(end - start for start, end in self._segments)

        return max(self._claimed_angle - previous_angle, 0.0)

    def is_circle_complete(self) -> bool:
        """Check if the whole circle has been claimed."""
        return self._claimed_angle >= TWO_PI - self.tolerance

    def _merge(self, segments: list[tuple[float, float]]) -> list[tuple[float, float]]:
        """Merge overlapping and adjacent segments."""
        merged: list[tuple[float, float]] = []
        for start, end in sorted(segments):
            if len(merged) > 0 and start <= merged[-1][1] + self.tolerance:
                merged[-1] = (merged[-1][0], max(merged[-1][1], end))
            else:
                merged.append((start, end))
        return merged
