from .primitives import Box, EPSILON, equals_zero, line_segment_intersection
from .geometry import (
    LineString,
    Ring,
    Polygon,
    MultiLineString,
    MultiPolygon,
)
from .sections import Section, Sections
from .sectionalize import (
    DUPLICATE_DIRECTION,
    MAX_SEGMENTS_PER_SECTION,
    GeometryDimensionError,
    UnsupportedGeometryError,
    box_as_ring,
    classify_segment,
    get_section_points,
    iter_section_segments,
    sectionalize,
    sectionalize_range,
)
from .intersect import (
    check_intersection,
    check_self_intersection,
    get_intersection_points,
)

__all__ = [
    "Box",
    "EPSILON",
    "equals_zero",
    "line_segment_intersection",
    "LineString",
    "Ring",
    "Polygon",
    "MultiLineString",
    "MultiPolygon",
    "Section",
    "Sections",
    "DUPLICATE_DIRECTION",
    "MAX_SEGMENTS_PER_SECTION",
    "GeometryDimensionError",
    "UnsupportedGeometryError",
    "box_as_ring",
    "classify_segment",
    "get_section_points",
    "iter_section_segments",
    "sectionalize",
    "sectionalize_range",
    "check_intersection",
    "check_self_intersection",
    "get_intersection_points",
]
