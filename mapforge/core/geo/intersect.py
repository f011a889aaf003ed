import logging
from typing import Any, Dict, List, Optional, Tuple

from ... import config
from .primitives import line_segment_intersection
from .sections import Section, Sections
from .sectionalize import (
    get_section_range,
    iter_section_segments,
    sectionalize,
)

logger = logging.getLogger(__name__)

RangeKey = Tuple[int, int]


def _get_sections(
    geometry: Any, max_segments_per_section: Optional[int]
) -> Sections:
    if max_segments_per_section is None:
        max_segments_per_section = config.get_max_segments_per_section()
    sections = Sections(dimension_count=2)
    sectionalize(geometry, sections, max_segments_per_section)
    return sections


def _range_key(section: Section) -> RangeKey:
    return section.multi_index, section.ring_index


def _clean_edge_counts(
    geometry: Any, sections: Sections
) -> Dict[RangeKey, Tuple[int, bool]]:
    """
    Maps each ring or path to its number of non-degenerate edges and
    whether it is closed.
    """
    counts: Dict[RangeKey, Tuple[int, bool]] = {}
    for section in sections:
        key = _range_key(section)
        if key not in counts:
            points = get_section_range(
                geometry, section.ring_index, section.multi_index
            )
            closed = tuple(points[0]) == tuple(points[-1])
            counts[key] = (0, closed)
        total, closed = counts[key]
        if not section.duplicate:
            total = section.non_duplicate_index + section.count
        counts[key] = (total, closed)
    return counts


def _clean_index(section: Section, edge_index: int) -> int:
    return section.non_duplicate_index + edge_index - section.begin_index


def _is_shared_vertex(
    point: Tuple[float, float], vertex: Tuple[float, ...]
) -> bool:
    dist_sq = (point[0] - vertex[0]) ** 2 + (point[1] - vertex[1]) ** 2
    return dist_sq < 1e-12


def _section_pair_intersections(
    geometry1: Any,
    section1: Section,
    geometry2: Any,
    section2: Section,
    edge_counts: Optional[Dict[RangeKey, Tuple[int, bool]]],
) -> List[Tuple[float, float]]:
    """
    Compares every edge of section1 with every edge of section2.

    When edge_counts is given, both sections come from one geometry, and
    neighbouring edges of the same ring may meet at their shared vertex.
    Neighbours are found by non-degenerate edge index, so a run of
    degenerate edges between two edges keeps them adjacent.
    """
    found: List[Tuple[float, float]] = []
    same_range = (
        edge_counts is not None
        and _range_key(section1) == _range_key(section2)
    )
    if same_range:
        assert edge_counts is not None
        total, closed = edge_counts[_range_key(section1)]

    for i, p1, p2 in iter_section_segments(geometry1, section1):
        for j, p3, p4 in iter_section_segments(geometry2, section2):
            if same_range and j <= i:
                # Each unordered edge pair only once, never an edge with
                # itself
                continue
            intersection = line_segment_intersection(p1, p2, p3, p4)
            if not intersection:
                continue

            if same_range:
                ci = _clean_index(section1, i)
                cj = _clean_index(section2, j)
                if cj == ci + 1 and _is_shared_vertex(intersection, p2):
                    continue
                if (
                    closed
                    and total > 2
                    and ci == 0
                    and cj == total - 1
                    and _is_shared_vertex(intersection, p1)
                ):
                    continue
            found.append(intersection)
    return found


def _intersections(
    geometry1: Any,
    sections1: Sections,
    geometry2: Any,
    sections2: Sections,
    is_self_check: bool,
    first_only: bool,
) -> List[Tuple[float, float]]:
    edge_counts = (
        _clean_edge_counts(geometry1, sections1) if is_self_check else None
    )
    result: List[Tuple[float, float]] = []
    compared = 0
    for index1, section1 in enumerate(sections1):
        if section1.duplicate:
            continue
        start = index1 if is_self_check else 0
        for section2 in sections2[start:]:
            if section2.duplicate or not section1.overlaps(section2):
                continue
            compared += 1
            for point in _section_pair_intersections(
                geometry1, section1, geometry2, section2, edge_counts
            ):
                if not any(_is_shared_vertex(point, p) for p in result):
                    result.append(point)
                    if first_only:
                        return result

    logger.debug(
        f"Compared {compared} of {len(sections1) * len(sections2)}"
        f" section pairs, found {len(result)} intersections"
    )
    return result


def get_intersection_points(
    geometry1: Any,
    geometry2: Any,
    max_segments_per_section: Optional[int] = None,
) -> List[Tuple[float, float]]:
    """
    Returns the 2D points where the edges of two geometries cross or
    touch, in discovery order and without repeats.

    Both geometries are sectionalized first. Only sections with
    overlapping bounding boxes have their edges compared, and sections of
    degenerate edges are skipped entirely.
    """
    sections1 = _get_sections(geometry1, max_segments_per_section)
    sections2 = _get_sections(geometry2, max_segments_per_section)
    return _intersections(
        geometry1, sections1, geometry2, sections2,
        is_self_check=False, first_only=False,
    )


def check_intersection(
    geometry1: Any,
    geometry2: Any,
    max_segments_per_section: Optional[int] = None,
) -> bool:
    """Checks if the edges of two geometries intersect."""
    sections1 = _get_sections(geometry1, max_segments_per_section)
    sections2 = _get_sections(geometry2, max_segments_per_section)
    return bool(
        _intersections(
            geometry1, sections1, geometry2, sections2,
            is_self_check=False, first_only=True,
        )
    )


def check_self_intersection(
    geometry: Any, max_segments_per_section: Optional[int] = None
) -> bool:
    """
    Checks if a geometry intersects itself.

    Neighbouring edges of the same ring or path meeting at their shared
    vertex do not count. Distinct rings or parts that touch do.
    """
    sections = _get_sections(geometry, max_segments_per_section)
    return bool(
        _intersections(
            geometry, sections, geometry, sections,
            is_self_check=True, first_only=True,
        )
    )
