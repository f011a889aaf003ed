from __future__ import annotations
from typing import Any, Iterable, Optional, Sequence, Tuple
import numpy as np


# Absolute tolerance for comparing coordinate deltas against zero.
EPSILON = 1e-9

Point = Tuple[float, ...]


def equals_zero(value: float) -> bool:
    """
    Returns True if the value is zero within EPSILON. Used for every
    direction and degeneracy decision so the two can never disagree.
    """
    return abs(value) <= EPSILON


def as_point(point: Sequence[float]) -> Point:
    return tuple(float(c) for c in point)


class Box:
    """
    An axis-aligned box of arbitrary dimension.

    The corners are stored as numpy float arrays. An "inverse" box has
    +inf as minimum and -inf as maximum, so the first call to combine()
    establishes real bounds.
    """

    def __init__(
        self, min_corner: Sequence[float], max_corner: Sequence[float]
    ) -> None:
        self.min_corner: np.ndarray = np.array(min_corner, dtype=float)
        self.max_corner: np.ndarray = np.array(max_corner, dtype=float)
        if self.min_corner.shape != self.max_corner.shape:
            raise ValueError(
                "Box corners must have the same number of dimensions."
            )
        if self.min_corner.ndim != 1:
            raise ValueError("Box corners must be flat coordinate lists.")
        is_inverse = bool(
            np.all(np.isposinf(self.min_corner))
            and np.all(np.isneginf(self.max_corner))
        )
        if not is_inverse and np.any(self.min_corner > self.max_corner):
            raise ValueError(
                f"Box minimum {tuple(self.min_corner)} exceeds maximum"
                f" {tuple(self.max_corner)}."
            )

    @classmethod
    def inverse(cls, dimension: int = 2) -> "Box":
        return cls(
            np.full(dimension, np.inf), np.full(dimension, -np.inf)
        )

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> "Box":
        box: Optional[Box] = None
        for point in points:
            if box is None:
                box = cls.inverse(len(point))
            box.combine(point)
        if box is None:
            raise ValueError("Cannot build a box from zero points.")
        return box

    @property
    def dimension(self) -> int:
        return int(self.min_corner.shape[0])

    def is_empty(self) -> bool:
        return bool(np.any(self.min_corner > self.max_corner))

    def combine(self, point: Sequence[float]) -> "Box":
        """Grows the box in place to include the point."""
        coords = np.asarray(point, dtype=float)[: self.dimension]
        np.minimum(self.min_corner, coords, out=self.min_corner)
        np.maximum(self.max_corner, coords, out=self.max_corner)
        return self

    def combine_box(self, other: "Box") -> "Box":
        if other.is_empty():
            return self
        np.minimum(self.min_corner, other.min_corner, out=self.min_corner)
        np.maximum(self.max_corner, other.max_corner, out=self.max_corner)
        return self

    def contains_point(self, point: Sequence[float]) -> bool:
        coords = np.asarray(point, dtype=float)[: self.dimension]
        return bool(
            np.all(coords >= self.min_corner)
            and np.all(coords <= self.max_corner)
        )

    def overlaps(self, other: "Box") -> bool:
        """
        Closed-interval overlap test. Boxes that only touch at an edge or
        corner overlap; an empty box overlaps nothing.
        """
        if self.is_empty() or other.is_empty():
            return False
        return bool(
            np.all(self.min_corner <= other.max_corner)
            and np.all(other.min_corner <= self.max_corner)
        )

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """
        Returns the four corners of a 2D box as
        (lower_left, lower_right, upper_left, upper_right).
        """
        assert self.dimension == 2, "corners() requires a 2D box"
        min_x, min_y = (float(c) for c in self.min_corner)
        max_x, max_y = (float(c) for c in self.max_corner)
        return (min_x, min_y), (max_x, min_y), (min_x, max_y), (max_x, max_y)

    def copy(self) -> "Box":
        return Box(self.min_corner.copy(), self.max_corner.copy())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Box):
            return False
        return bool(
            np.array_equal(self.min_corner, other.min_corner)
            and np.array_equal(self.max_corner, other.max_corner)
        )

    def __repr__(self) -> str:
        return (
            f"Box({tuple(self.min_corner.tolist())},"
            f" {tuple(self.max_corner.tolist())})"
        )


def line_segment_intersection(
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    p4: Sequence[float],
) -> Optional[Tuple[float, float]]:
    """
    Finds the intersection point of the 2D segments p1-p2 and p3-p4.

    Touching segments (an endpoint lying on the other segment) count as
    intersecting. Parallel and collinear segments return None.
    """
    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]
    x3, y3 = p3[0], p3[1]
    x4, y4 = p4[0], p4[1]

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(den) < 1e-12:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den

    if -EPSILON <= t <= 1 + EPSILON and -EPSILON <= u <= 1 + EPSILON:
        return (x1 + t * (x2 - x1), y1 + t * (y2 - y1))
    return None
