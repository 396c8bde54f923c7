from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class DataType(str, Enum):
    # String/Text
    TEXT = "text"  # analyzed full-text field
    KEYWORD = "keyword"  # exact match

    # Numeric
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    HALF_FLOAT = "half_float"
    SCALED_FLOAT = "scaled_float"
    DOUBLE = "double"

    # Other primitives
    BOOLEAN = "boolean"
    DATE = "date"
    IP = "ip"
    BINARY = "binary"

    # Spatial
    GEO_POINT = "geo_point"

    # Structures
    OBJECT = "object"
    NESTED = "nested"


@runtime_checkable
class AggregationResponseParser(Protocol):
    """Decodes the aggregations section of a search response into rows."""

    def parse(self, aggregations: dict[str, Any]) -> list[dict[str, Any]]: ...
