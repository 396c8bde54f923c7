from __future__ import annotations

__all__ = ["ExprValueFactory"]

from typing import Mapping

from ._models import AggregationResponseParser, DataType


class ExprValueFactory:
    """Holds the state that turns backend hits into typed values.

    The factory is owned by the caller and shared with a request builder.
    ``set_parser`` and ``extend_type_mapping`` are called during planning
    and their effects are visible to every holder of the factory.
    """

    type_mapping: dict[str, DataType | str]
    parser: AggregationResponseParser | None

    def __init__(
        self,
        type_mapping: Mapping[str, DataType | str] | None = None,
    ):
        """Initialize.

        Args:
            type_mapping:
                Field name to declared type. Types outside ``DataType``
                are kept as the backend names them.
        """
        self.type_mapping = {}
        self.parser = None
        if type_mapping:
            self.extend_type_mapping(type_mapping)

    def set_parser(self, parser: AggregationResponseParser) -> None:
        self.parser = parser

    def extend_type_mapping(
        self,
        type_mapping: Mapping[str, DataType | str],
    ) -> None:
        # Existing entries win, the aggregation planner may not know
        # the exact declared type of every field.
        for field, data_type in type_mapping.items():
            self.type_mapping.setdefault(field, self._to_type(data_type))

    def get_type(self, field: str) -> DataType | str | None:
        return self.type_mapping.get(field)

    @staticmethod
    def _to_type(data_type: DataType | str) -> DataType | str:
        if isinstance(data_type, DataType):
            return data_type
        if data_type in {t.value for t in DataType}:
            return DataType(data_type)
        return data_type
