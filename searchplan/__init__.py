from .core import Settings, SettingKey
from .core.exceptions import (
    BadRequestError,
    BaseError,
    DuplicateFieldError,
    NotFoundError,
    RequestFinalizedError,
    SemanticCheckError,
)
from .data import AggregationResponseParser, DataType, ExprValueFactory
from .request import (
    Aggregation,
    Bool,
    FieldReference,
    IndexName,
    Leaf,
    MatchAll,
    Nested,
    QueryRequest,
    RequestBuilder,
    ScrollRequest,
    SearchRequest,
    SortOrder,
    SortSpec,
)

__all__ = [
    "Aggregation",
    "AggregationResponseParser",
    "BadRequestError",
    "BaseError",
    "Bool",
    "DataType",
    "DuplicateFieldError",
    "ExprValueFactory",
    "FieldReference",
    "IndexName",
    "Leaf",
    "MatchAll",
    "Nested",
    "NotFoundError",
    "QueryRequest",
    "RequestBuilder",
    "RequestFinalizedError",
    "ScrollRequest",
    "SearchRequest",
    "SemanticCheckError",
    "SettingKey",
    "Settings",
    "SortOrder",
    "SortSpec",
]
