from __future__ import annotations
from typing import Iterable, Iterator, List, Sequence, TypeVar, overload

from .primitives import Point, as_point

T_PointSequence = TypeVar("T_PointSequence", bound="PointSequence")


class PointSequence:
    """Base for geometries that are an ordered run of points."""

    def __init__(self, points: Iterable[Sequence[float]] = ()) -> None:
        self.points: List[Point] = [as_point(p) for p in points]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> List[Point]: ...

    def __getitem__(self, index):
        return self.points[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.points == other.points  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.points!r})"

    def is_empty(self) -> bool:
        return not self.points


class LineString(PointSequence):
    """An open path."""

    pass


class Ring(PointSequence):
    """
    A closed loop of points, such as the boundary or a hole of a polygon.
    The points are taken as given; use from_points() to close an open
    point list.
    """

    @classmethod
    def from_points(
        cls: type[T_PointSequence],
        points: Iterable[Sequence[float]],
        close: bool = True,
    ) -> T_PointSequence:
        ring = cls(points)
        if close and len(ring) > 1 and ring.points[0] != ring.points[-1]:
            ring.points.append(ring.points[0])
        return ring

    def is_closed(self) -> bool:
        return len(self.points) > 1 and self.points[0] == self.points[-1]


class Polygon:
    """An exterior ring with an ordered list of interior rings (holes)."""

    def __init__(
        self, exterior: Ring, interiors: Iterable[Ring] = ()
    ) -> None:
        self.exterior = exterior
        self.interiors: List[Ring] = list(interiors)

    @classmethod
    def from_points(
        cls,
        exterior: Iterable[Sequence[float]],
        holes: Iterable[Iterable[Sequence[float]]] = (),
    ) -> "Polygon":
        return cls(
            Ring.from_points(exterior),
            [Ring.from_points(hole) for hole in holes],
        )

    def rings(self) -> List[Ring]:
        """Returns the exterior followed by the holes, in order."""
        return [self.exterior, *self.interiors]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return False
        return (
            self.exterior == other.exterior
            and self.interiors == other.interiors
        )

    def __repr__(self) -> str:
        return f"Polygon({self.exterior!r}, {self.interiors!r})"


class MultiLineString:
    def __init__(self, parts: Iterable[LineString] = ()) -> None:
        self.parts: List[LineString] = list(parts)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)


class MultiPolygon:
    def __init__(self, parts: Iterable[Polygon] = ()) -> None:
        self.parts: List[Polygon] = list(parts)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)
