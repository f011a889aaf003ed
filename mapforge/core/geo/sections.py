from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .primitives import Box


@dataclass
class Section:
    """
    A monotonic run of consecutive edges of one ring or path.

    Every edge in a section moves the same way along each tracked axis,
    so the section's bounding box can stand in for all of its edges in
    coarse rejection tests.

    Attributes:
        directions: One direction class per tracked axis: -1 (strictly
            decreasing), 0 (constant) or 1 (strictly increasing). A
            section of degenerate edges holds the duplicate sentinel on
            every axis instead.
        ring_index: -1 for an exterior ring or a path, otherwise the
            0-based index of the hole the section was cut from.
        multi_index: Index of the part in a multi-part geometry, or -1.
        bounding_box: Union of every point touched by the section's
            edges. Starts out as an inverse box.
        begin_index: Position of the first point of the section.
        end_index: Position one past the last edge, i.e. the index of the
            section's last point.
        count: Number of edges in the section.
        range_count: Number of points in the source ring or path.
        duplicate: Whether the section consists of degenerate edges.
        non_duplicate_index: Number of non-degenerate edges in the source
            ring before this section starts.
    """

    directions: Tuple[int, ...] = ()
    ring_index: int = -99
    multi_index: int = -99
    bounding_box: Optional[Box] = None
    begin_index: int = -1
    end_index: int = -1
    count: int = 0
    range_count: int = 0
    duplicate: bool = False
    non_duplicate_index: int = -1

    def __post_init__(self) -> None:
        if self.bounding_box is None:
            self.bounding_box = Box.inverse(max(len(self.directions), 1))

    def copy(self) -> "Section":
        assert self.bounding_box is not None
        return Section(
            directions=tuple(self.directions),
            ring_index=self.ring_index,
            multi_index=self.multi_index,
            bounding_box=self.bounding_box.copy(),
            begin_index=self.begin_index,
            end_index=self.end_index,
            count=self.count,
            range_count=self.range_count,
            duplicate=self.duplicate,
            non_duplicate_index=self.non_duplicate_index,
        )

    def is_empty(self) -> bool:
        return self.count == 0

    def overlaps(self, other: "Section") -> bool:
        assert self.bounding_box is not None
        assert other.bounding_box is not None
        return self.bounding_box.overlaps(other.bounding_box)


class Sections(list):
    """
    An ordered collection of sections produced by one sectionalize call.

    The number of axes that are tracked for direction classification is
    fixed per collection.
    """

    def __init__(
        self, sections: Iterable[Section] = (), dimension_count: int = 2
    ) -> None:
        if not 1 <= dimension_count <= 3:
            raise ValueError(
                f"dimension_count must be 1, 2 or 3, got {dimension_count}"
            )
        super().__init__(sections)
        self.dimension_count = dimension_count

    def __repr__(self) -> str:
        return (
            f"Sections({list.__repr__(self)},"
            f" dimension_count={self.dimension_count})"
        )
