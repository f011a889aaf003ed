"""
Splits geometries into monotonic sections.

A section is a run of consecutive edges that all move the same way along
every tracked axis, capped in length, with its own bounding box. Later
algorithms (intersection, overlay, containment) compare section boxes
first and only look at the edges of sections whose boxes overlap.
"""
from __future__ import annotations
import itertools
import logging
from typing import Any, Iterator, List, Sequence, Tuple

from .geometry import (
    LineString,
    MultiLineString,
    MultiPolygon,
    Polygon,
    Ring,
)
from .primitives import Box, Point, equals_zero
from .sections import Section, Sections

logger = logging.getLogger(__name__)

# Direction value assigned to every axis of a degenerate edge. It is not
# one of -1, 0, 1, so a degenerate edge never joins a regular section.
DUPLICATE_DIRECTION = -99

# Default cap on the number of edges per section.
MAX_SEGMENTS_PER_SECTION = 10


class GeometryDimensionError(ValueError):
    """Raised when a geometry has the wrong number of dimensions."""

    pass


class UnsupportedGeometryError(TypeError):
    """Raised for geometry kinds that cannot be sectionalized."""

    pass


def get_direction_classes(
    p0: Sequence[float], p1: Sequence[float], dimension_count: int
) -> Tuple[int, ...]:
    """
    Returns the sign of the coordinate delta from p0 to p1 for each of
    the first `dimension_count` axes.
    """
    directions = []
    for axis in range(dimension_count):
        diff = p1[axis] - p0[axis]
        if equals_zero(diff):
            directions.append(0)
        else:
            directions.append(1 if diff > 0 else -1)
    return tuple(directions)


def is_duplicate_segment(p0: Sequence[float], p1: Sequence[float]) -> bool:
    """
    Checks whether the segment has zero length in every coordinate of the
    points, including axes beyond the ones used for sectionalizing.
    """
    return all(equals_zero(b - a) for a, b in zip(p0, p1))


def classify_segment(
    p0: Sequence[float], p1: Sequence[float], dimension_count: int
) -> Tuple[Tuple[int, ...], bool]:
    """
    Returns the direction classes of a segment and whether it is
    degenerate. Degenerate segments get DUPLICATE_DIRECTION on every axis.
    """
    directions = get_direction_classes(p0, p1, dimension_count)
    # A non-zero direction class rules out a degenerate segment.
    duplicate = not any(directions) and is_duplicate_segment(p0, p1)
    if duplicate:
        directions = (DUPLICATE_DIRECTION,) * dimension_count
    return directions, duplicate


def _check_max_segments(max_segments_per_section: int) -> None:
    if max_segments_per_section < 1:
        raise ValueError(
            "max_segments_per_section must be a positive integer,"
            f" got {max_segments_per_section}"
        )


def sectionalize_range(
    points: Sequence[Sequence[float]],
    sections: Sections,
    ring_index: int = -1,
    multi_index: int = -1,
    max_segments_per_section: int = MAX_SEGMENTS_PER_SECTION,
) -> None:
    """
    Appends the sections of one ring or path to `sections`.

    Edges are scanned in order. A new section starts when an edge's
    direction classes differ from the current section's, or when the
    current section already holds more than `max_segments_per_section`
    edges. The cap check runs before the next edge is added, so a section
    can end up with one edge more than the cap.

    Args:
        points: The ordered points of the ring or path.
        sections: The collection to append to. Its `dimension_count`
            decides how many axes are classified.
        ring_index: -1 for an exterior ring or a path, else the hole index.
        multi_index: The part index in a multi-part geometry, or -1.
        max_segments_per_section: The section length cap.
    """
    range_count = len(points)
    if range_count < 2:
        # Zero or one point, no edges, no sections
        return

    dimension_count = sections.dimension_count
    non_duplicate_index = 0
    section = Section()

    edges = zip(points, itertools.islice(points, 1, None))
    for i, (previous, current) in enumerate(edges):
        directions, duplicate = classify_segment(
            previous, current, dimension_count
        )

        if section.count > 0 and (
            directions != section.directions
            or section.count > max_segments_per_section
        ):
            sections.append(section)
            section = Section()

        if section.count == 0:
            section.begin_index = i
            section.ring_index = ring_index
            section.multi_index = multi_index
            section.duplicate = duplicate
            section.non_duplicate_index = non_duplicate_index
            section.range_count = range_count
            section.directions = directions
            section.bounding_box = Box.inverse(len(previous)).combine(
                previous
            )

        assert section.bounding_box is not None
        section.bounding_box.combine(current)
        section.end_index = i + 1
        section.count += 1
        if not duplicate:
            non_duplicate_index += 1

    if section.count > 0:
        sections.append(section)


def box_as_ring(box: Box) -> List[Point]:
    """
    Returns the closed 5-point ring around a 2D box: lower-left,
    upper-left, upper-right, lower-right and back to lower-left.
    """
    if box.dimension != 2:
        raise GeometryDimensionError(
            f"Only 2D boxes can be converted to a ring, got a"
            f" {box.dimension}D box"
        )
    lower_left, lower_right, upper_left, upper_right = box.corners()
    return [lower_left, upper_left, upper_right, lower_right, lower_left]


def sectionalize_box(
    box: Box,
    sections: Sections,
    multi_index: int = -1,
    max_segments_per_section: int = MAX_SEGMENTS_PER_SECTION,
) -> None:
    sectionalize_range(
        box_as_ring(box),
        sections,
        -1,
        multi_index,
        max_segments_per_section,
    )


def sectionalize_polygon(
    polygon: Polygon,
    sections: Sections,
    multi_index: int = -1,
    max_segments_per_section: int = MAX_SEGMENTS_PER_SECTION,
) -> None:
    """
    Sectionalizes the exterior ring (ring index -1) and then every hole,
    each with its 0-based position as ring index.
    """
    sectionalize_range(
        polygon.exterior,
        sections,
        -1,
        multi_index,
        max_segments_per_section,
    )
    for ring_index, interior in enumerate(polygon.interiors):
        sectionalize_range(
            interior,
            sections,
            ring_index,
            multi_index,
            max_segments_per_section,
        )


def sectionalize(
    geometry: Any,
    sections: Sections,
    max_segments_per_section: int = MAX_SEGMENTS_PER_SECTION,
) -> None:
    """
    Splits a geometry into monotonic sections.

    The `sections` collection is cleared first, also when the call fails
    afterwards.

    Args:
        geometry: A Box, LineString, Ring, Polygon, MultiLineString or
            MultiPolygon.
        sections: The output collection.
        max_segments_per_section: The section length cap.

    Raises:
        UnsupportedGeometryError: For any other geometry type.
        GeometryDimensionError: For a box that is not 2D.
        ValueError: If max_segments_per_section is not positive.
    """
    sections.clear()
    _check_max_segments(max_segments_per_section)

    if isinstance(geometry, Box):
        sectionalize_box(
            geometry, sections,
            max_segments_per_section=max_segments_per_section,
        )
    elif isinstance(geometry, (LineString, Ring)):
        sectionalize_range(
            geometry, sections,
            max_segments_per_section=max_segments_per_section,
        )
    elif isinstance(geometry, Polygon):
        sectionalize_polygon(
            geometry, sections,
            max_segments_per_section=max_segments_per_section,
        )
    elif isinstance(geometry, MultiLineString):
        for multi_index, line in enumerate(geometry.parts):
            sectionalize_range(
                line, sections, -1, multi_index, max_segments_per_section
            )
    elif isinstance(geometry, MultiPolygon):
        for multi_index, polygon in enumerate(geometry.parts):
            sectionalize_polygon(
                polygon, sections, multi_index, max_segments_per_section
            )
    else:
        raise UnsupportedGeometryError(
            f"Cannot sectionalize geometry of type"
            f" {type(geometry).__name__}"
        )

    logger.debug(
        f"Sectionalized {type(geometry).__name__} into {len(sections)}"
        f" sections (max {max_segments_per_section} segments each)"
    )


def get_section_range(
    geometry: Any, ring_index: int = -1, multi_index: int = -1
) -> Sequence[Point]:
    """
    Returns the ring or path of a geometry that sections with the given
    ring and multi index were cut from.
    """
    if isinstance(geometry, Box):
        return box_as_ring(geometry)
    if isinstance(geometry, (MultiLineString, MultiPolygon)):
        geometry = geometry.parts[multi_index]
    if isinstance(geometry, Polygon):
        if ring_index < 0:
            return geometry.exterior.points
        return geometry.interiors[ring_index].points
    if isinstance(geometry, (LineString, Ring)):
        return geometry.points
    raise UnsupportedGeometryError(
        f"Cannot resolve sections of geometry type"
        f" {type(geometry).__name__}"
    )


def get_section_points(geometry: Any, section: Section) -> List[Point]:
    """Returns the points from begin_index to end_index, inclusive."""
    points = get_section_range(
        geometry, section.ring_index, section.multi_index
    )
    return list(points[section.begin_index : section.end_index + 1])


def iter_section_segments(
    geometry: Any, section: Section
) -> Iterator[Tuple[int, Point, Point]]:
    """Yields (edge_index, start, end) for each edge of the section."""
    points = get_section_points(geometry, section)
    for offset, (p0, p1) in enumerate(zip(points, points[1:])):
        yield section.begin_index + offset, p0, p1
