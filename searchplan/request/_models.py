from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Literal

from ..core import DataModel, FrozenDataModel
from ..data import DataType

DOC_FIELD_NAME = "_doc"
"""Sort pseudo-field for index (document) order."""


class IndexName(FrozenDataModel):
    """Index name.

    Attributes:
        names: Individual index names or patterns.
    """

    names: list[str]

    def __str__(self) -> str:
        return ",".join(self.names)

    @staticmethod
    def parse(index_name: str | list[str] | IndexName) -> IndexName:
        if isinstance(index_name, IndexName):
            return index_name
        if isinstance(index_name, str):
            index_name = index_name.split(",")
        return IndexName(names=[name.strip() for name in index_name])


class FieldReference(DataModel):
    """Reference to a document field.

    Attributes:
        attr: Field path.
        type: Declared field type.
    """

    attr: str
    type: DataType | None = None

    def __str__(self) -> str:
        return self.attr


class SortOrder(str, Enum):
    """Sort order.

    Attributes:
        ASC: Ascending.
        DESC: Descending.
    """

    ASC = "asc"
    DESC = "desc"


class SortSpec(DataModel):
    """Sort spec.

    Attributes:
        field: Sort field or ``_doc`` for document order.
        order: Sort order.
        missing: Placement of documents missing the field.
        nested: Native nested sort options.
    """

    field: str
    order: SortOrder = SortOrder.ASC
    missing: str | None = None
    nested: dict[str, Any] | None = None

    def to_dsl(self) -> dict[str, Any]:
        spec: dict[str, Any] = {"order": self.order.value}
        if self.missing is not None:
            spec["missing"] = self.missing
        if self.nested is not None:
            spec["nested"] = copy.deepcopy(self.nested)
        return {self.field: spec}

    @staticmethod
    def doc_order() -> SortSpec:
        return SortSpec(field=DOC_FIELD_NAME, order=SortOrder.ASC)


class FetchSource(DataModel):
    """Source filtering.

    Attributes:
        includes: Fields to return, empty for all.
        excludes: Fields to leave out.
    """

    includes: list[str] = []
    excludes: list[str] = []

    def to_dsl(self) -> dict[str, Any]:
        return {
            "includes": list(self.includes),
            "excludes": list(self.excludes),
        }


class InnerHit(DataModel):
    """Inner hits of a nested query.

    Attributes:
        source: Source filtering of returned nested documents.
    """

    source: FetchSource = FetchSource()

    def to_dsl(self) -> dict[str, Any]:
        return {"_source": self.source.to_dsl()}


class HighlightField(DataModel):
    """Highlight field.

    Attributes:
        name: Field name.
        pre_tags: Tags inserted before a highlighted term.
        post_tags: Tags inserted after a highlighted term.
    """

    name: str
    pre_tags: list[str] | None = None
    post_tags: list[str] | None = None

    def to_dsl(self) -> dict[str, Any]:
        spec: dict[str, Any] = {}
        if self.pre_tags is not None:
            spec["pre_tags"] = list(self.pre_tags)
        if self.post_tags is not None:
            spec["post_tags"] = list(self.post_tags)
        return spec


class HighlightSpec(DataModel):
    """Highlight spec.

    Attributes:
        fields: Highlighted fields in registration order.
    """

    fields: list[HighlightField] = []

    def has_field(self, name: str) -> bool:
        return any(f.name == name for f in self.fields)

    def add_field(self, name: str) -> HighlightField:
        field = HighlightField(name=name)
        self.fields.append(field)
        return field

    def to_dsl(self) -> dict[str, Any]:
        return {"fields": {f.name: f.to_dsl() for f in self.fields}}


class Aggregation(DataModel):
    """Aggregation definition passed through to the backend.

    Attributes:
        name: Aggregation name.
        body: Native aggregation body.
    """

    name: str
    body: dict[str, Any]
    type: Literal["aggregation"] = "aggregation"

    def to_dsl(self) -> dict[str, Any]:
        return {self.name: copy.deepcopy(self.body)}
