"""
Query tree of a search request.

Nodes render to the backend query DSL through ``to_dsl``. ``Leaf``
carries a backend-native query that is passed through untouched.
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Literal, Union

from ..core import DataModel
from ._models import InnerHit


class ScoreMode(str, Enum):
    """How nested matches contribute to the parent score."""

    NONE = "none"
    AVG = "avg"
    MAX = "max"
    MIN = "min"
    SUM = "sum"


class MatchAll(DataModel):
    """Match all documents."""

    type: Literal["match_all"] = "match_all"

    def to_dsl(self) -> dict[str, Any]:
        return {"match_all": {}}


class Bool(DataModel):
    """Conjunctive bool query.

    Attributes:
        must: Scoring clauses that must match.
        filter: Non-scoring clauses that must match.
    """

    must: list[QueryNode] = []
    filter: list[QueryNode] = []
    type: Literal["bool"] = "bool"

    def add_must(self, query: QueryNode) -> Bool:
        self.must.append(query)
        return self

    def add_filter(self, query: QueryNode) -> Bool:
        self.filter.append(query)
        return self

    def to_dsl(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.must:
            body["must"] = [q.to_dsl() for q in self.must]
        if self.filter:
            body["filter"] = [q.to_dsl() for q in self.filter]
        return {"bool": body}


class Nested(DataModel):
    """Nested query.

    Attributes:
        path: Path of the nested documents.
        query: Query run against each nested document.
        score_mode: Score contribution of nested matches.
        inner_hits: Inner hits returned with the parent document.
    """

    path: str
    query: QueryNode = MatchAll()
    score_mode: ScoreMode = ScoreMode.NONE
    inner_hits: InnerHit | None = None
    type: Literal["nested"] = "nested"

    def to_dsl(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "path": self.path,
            "query": self.query.to_dsl(),
            "score_mode": self.score_mode.value,
        }
        if self.inner_hits is not None:
            body["inner_hits"] = self.inner_hits.to_dsl()
        return {"nested": body}


class Leaf(DataModel):
    """Backend-native query.

    Attributes:
        query: Native query DSL, e.g. ``{"term": {"state": "CA"}}``.
    """

    query: dict[str, Any]
    type: Literal["leaf"] = "leaf"

    def to_dsl(self) -> dict[str, Any]:
        return copy.deepcopy(self.query)


QueryNode = Union[MatchAll, Bool, Nested, Leaf]

Bool.model_rebuild()
Nested.model_rebuild()
