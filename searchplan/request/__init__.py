from ._helper import Helper
from ._models import (
    DOC_FIELD_NAME,
    Aggregation,
    FetchSource,
    FieldReference,
    HighlightField,
    HighlightSpec,
    IndexName,
    InnerHit,
    SortOrder,
    SortSpec,
)
from ._query import Bool, Leaf, MatchAll, Nested, QueryNode, ScoreMode
from .builder import BuilderState, RequestBuilder
from .request import QueryRequest, ScrollRequest, SearchRequest

__all__ = [
    "Aggregation",
    "Bool",
    "BuilderState",
    "DOC_FIELD_NAME",
    "FetchSource",
    "FieldReference",
    "Helper",
    "HighlightField",
    "HighlightSpec",
    "IndexName",
    "InnerHit",
    "Leaf",
    "MatchAll",
    "Nested",
    "QueryNode",
    "QueryRequest",
    "RequestBuilder",
    "ScoreMode",
    "ScrollRequest",
    "SearchRequest",
    "SortOrder",
    "SortSpec",
]
