"""
Search request builder.
"""

from __future__ import annotations

__all__ = ["BuilderState", "RequestBuilder"]

import copy
from datetime import timedelta
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence

from ..core import SettingKey, Settings, debug, warn
from ..core.exceptions import DuplicateFieldError, RequestFinalizedError
from ..data import AggregationResponseParser, DataType, ExprValueFactory
from ._helper import Helper
from ._models import (
    Aggregation,
    FetchSource,
    FieldReference,
    HighlightSpec,
    IndexName,
    InnerHit,
    SortSpec,
)
from ._query import Bool, Leaf, MatchAll, Nested, QueryNode, ScoreMode
from .request import (
    DEFAULT_QUERY_TIMEOUT,
    QueryRequest,
    ScrollRequest,
    SearchRequest,
)


class BuilderState(str, Enum):
    BUILDING = "building"
    FINALIZED = "finalized"


class RequestBuilder:
    """Accumulates push-down operations into one search request.

    Push-downs are applied in plan order and mutate the builder.
    ``build`` finalizes the builder and returns an immutable
    ``QueryRequest`` or ``ScrollRequest``.
    """

    index_name: IndexName
    max_result_window: int
    value_factory: ExprValueFactory
    settings: Settings

    offset: int
    size: int
    query: QueryNode | None
    sorts: list[SortSpec] | None
    aggregations: list[Aggregation]
    fetch_source: FetchSource | None
    highlight: HighlightSpec | None
    track_scores: bool
    timeout: timedelta

    _state: BuilderState
    _request: SearchRequest | None
    _nested_root: Bool | None
    _nested_clause: Bool | None
    _nested_queries: dict[str, Nested]

    def __init__(
        self,
        index_name: str | list[str] | IndexName,
        max_result_window: int,
        settings: Settings,
        value_factory: ExprValueFactory,
    ):
        """Initialize.

        Args:
            index_name:
                Target index name.
            max_result_window:
                Max number of documents the index returns
                in one response (``index.max_result_window``).
            settings:
                Settings providing the default query size.
            value_factory:
                Value factory shared with the response decoder.
        """
        self.index_name = IndexName.parse(index_name)
        self.max_result_window = max_result_window
        self.settings = settings
        self.value_factory = value_factory

        self.offset = 0
        self.size = settings.get_setting_value(SettingKey.QUERY_SIZE_LIMIT)
        self.query = None
        self.sorts = None
        self.aggregations = []
        self.fetch_source = None
        self.highlight = None
        self.track_scores = False
        self.timeout = DEFAULT_QUERY_TIMEOUT

        self._state = BuilderState.BUILDING
        self._request = None
        self._nested_root = None
        self._nested_clause = None
        self._nested_queries = {}

    @property
    def state(self) -> BuilderState:
        return self._state

    def build(self) -> SearchRequest:
        """Build the search request.

        Returns:
            Query request, or scroll request when the window
            goes past the max result window.
        """
        if self._request is not None:
            return self._request

        args = dict(
            index_name=self.index_name,
            offset=self.offset,
            size=self.size,
            query=copy.deepcopy(self.query),
            sorts=copy.deepcopy(self.sorts),
            fetch_source=copy.deepcopy(self.fetch_source),
            aggregations=copy.deepcopy(self.aggregations),
            highlight=copy.deepcopy(self.highlight),
            track_scores=self.track_scores,
            timeout=self.timeout,
            value_factory=self.value_factory,
        )
        request: SearchRequest
        if self.offset + self.size <= self.max_result_window:
            request = QueryRequest(**args)
        else:
            args["size"] = self.max_result_window - self.offset
            warn(
                "Window [%s, %s) of %s exceeds max result window %s, "
                "using scroll request",
                self.offset,
                self.offset + self.size,
                self.index_name,
                self.max_result_window,
            )
            request = ScrollRequest(
                scroll_timeout=self.settings.get_setting_value(
                    SettingKey.SQL_CURSOR_KEEP_ALIVE
                ),
                **args,
            )
        self._request = request
        self._state = BuilderState.FINALIZED
        return request

    def push_down_filter(self, query: QueryNode | dict[str, Any]) -> None:
        """Push down a filter, AND-ed with any existing filter.

        Args:
            query:
                Query node or native query dict.
        """
        self._check_building()
        if isinstance(query, dict):
            query = Leaf(query=query)
        else:
            query = query.copy(deep=True)

        current = self.query
        if current is None:
            self.query = query
        elif isinstance(current, Bool):
            current.add_filter(query)
        else:
            self.query = Bool(filter=[current, query])

        if self.sorts is None:
            # Filtered results need a stable order to be paged.
            self.sorts = [SortSpec.doc_order()]
        debug("Pushed down filter on %s", self.index_name)

    def push_down_aggregation(
        self,
        aggregations: (
            Sequence[Aggregation]
            | tuple[Sequence[Aggregation], AggregationResponseParser]
        ),
        parser: AggregationResponseParser | None = None,
    ) -> None:
        """Push down aggregations.

        Args:
            aggregations:
                Aggregation definitions, or a tuple of
                definitions and response parser.
            parser:
                Response parser installed in the value factory.
        """
        self._check_building()
        if parser is None and self._is_aggregation_pair(aggregations):
            aggregations, parser = aggregations
        self.aggregations.extend(aggregations)
        self.size = 0
        if parser is not None:
            self.value_factory.set_parser(parser)
        debug(
            "Pushed down aggregations %s",
            [a.name for a in self.aggregations],
        )

    def push_down_sort(self, sorts: Iterable[SortSpec]) -> None:
        self._check_building()
        # A requested sort supersedes the document order
        # installed by filter push-down.
        if self.sorts is None or self._is_sort_by_doc_only():
            self.sorts = []
        self.sorts.extend(sorts)
        debug("Pushed down sort %s", self.sorts)

    def push_down_limit(self, limit: int, offset: int) -> None:
        self._check_building()
        self.size = limit
        self.offset = offset

    def push_down_tracked_score(self, track_scores: bool) -> None:
        self._check_building()
        self.track_scores = track_scores

    def push_down_highlight(
        self,
        field: str,
        arguments: Mapping[str, Any] | None = None,
    ) -> None:
        """Push down highlight of a field.

        Args:
            field:
                Field name, possibly quoted.
            arguments:
                Highlight arguments. ``pre_tags`` and ``post_tags``
                apply to this field only, other keys are ignored.

        Raises:
            DuplicateFieldError:
                Field is already highlighted.
        """
        self._check_building()
        arguments = arguments or {}
        unquoted = Helper.unquote_text(field)
        if self.highlight is None:
            self.highlight = HighlightSpec()
        elif self.highlight.has_field(unquoted):
            raise DuplicateFieldError(field, "highlight")

        highlight_field = self.highlight.add_field(unquoted)
        if "pre_tags" in arguments:
            highlight_field.pre_tags = [str(arguments["pre_tags"])]
        if "post_tags" in arguments:
            highlight_field.post_tags = [str(arguments["post_tags"])]

    def push_down_projects(
        self,
        projects: Iterable[str | FieldReference],
    ) -> None:
        self._check_building()
        self.fetch_source = FetchSource(
            includes=Helper.dedup_field_names(projects)
        )

    def push_type_mapping(
        self,
        type_mapping: Mapping[str, DataType | str],
    ) -> None:
        self._check_building()
        self.value_factory.extend_type_mapping(type_mapping)

    def push_down_nested(
        self,
        nested_args: Iterable[Mapping[str, str | FieldReference]],
    ) -> None:
        """Push down nested fields as inner hits.

        Each path gets a match-all nested query whose inner hits
        return the requested fields of that path. Nested queries
        do not change the parent score.

        Args:
            nested_args:
                Mappings with ``path`` and ``field`` entries.
        """
        self._check_building()
        clause = self._get_nested_clause()
        groups = Helper.group_field_names_by_path(nested_args)
        for path, field_names in groups.items():
            # Only inner-hit queries added here are extended, never a
            # nested filter that came with the wrapped query.
            nested = self._nested_queries.get(path)
            if nested is None:
                nested = Nested(
                    path=path,
                    query=MatchAll(),
                    score_mode=ScoreMode.NONE,
                    inner_hits=InnerHit(
                        source=FetchSource(includes=list(field_names))
                    ),
                )
                clause.add_must(nested)
                self._nested_queries[path] = nested
                continue
            if nested.inner_hits is None:
                nested.inner_hits = InnerHit()
            includes = nested.inner_hits.source.includes
            includes.extend(f for f in field_names if f not in includes)
        debug("Pushed down nested paths %s", list(groups))

    def _get_nested_clause(self) -> Bool:
        # The clause lives at filter[0] of the root. Filters pushed down
        # later are appended after it, so it stays in place.
        if (
            self._nested_clause is not None
            and self.query is self._nested_root
        ):
            return self._nested_clause

        if self.query is None:
            clause = Bool()
        else:
            clause = Bool(must=[self.query])
        root = Bool(filter=[clause])
        self.query = root
        self._nested_root = root
        self._nested_clause = clause
        self._nested_queries = {}
        return clause

    @staticmethod
    def _is_aggregation_pair(value: Any) -> bool:
        return (
            isinstance(value, tuple)
            and len(value) == 2
            and not isinstance(value[0], Aggregation)
        )

    def _is_sort_by_doc_only(self) -> bool:
        return self.sorts == [SortSpec.doc_order()]

    def _check_building(self) -> None:
        if self._state != BuilderState.BUILDING:
            raise RequestFinalizedError(
                f"Request on {self.index_name} is already built"
            )
