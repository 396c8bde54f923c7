from ._models import AggregationResponseParser, DataType
from .value_factory import ExprValueFactory

__all__ = [
    "AggregationResponseParser",
    "DataType",
    "ExprValueFactory",
]
