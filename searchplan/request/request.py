"""
Finalized search requests.
"""

from __future__ import annotations

__all__ = ["QueryRequest", "ScrollRequest", "SearchRequest"]

from datetime import timedelta
from typing import Any, Callable

from elasticsearch import ApiError
from elasticsearch import Elasticsearch as SyncElasticsearch
from elasticsearch.exceptions import NotFoundError as ESNotFoundError
from pydantic import Field

from ..core import FrozenDataModel, Time, debug
from ..core.exceptions import BadRequestError, NotFoundError
from ..data import ExprValueFactory
from ._models import Aggregation, FetchSource, HighlightSpec, IndexName, SortSpec
from ._query import QueryNode

DEFAULT_QUERY_TIMEOUT = Time.minutes(1)
DEFAULT_SCROLL_TIMEOUT = Time.minutes(1)


class SearchRequest(FrozenDataModel):
    """Immutable snapshot of a planned search request."""

    index_name: IndexName
    offset: int
    size: int
    query: QueryNode | None = None
    sorts: list[SortSpec] | None = None
    fetch_source: FetchSource | None = None
    aggregations: list[Aggregation] = []
    highlight: HighlightSpec | None = None
    track_scores: bool = False
    timeout: timedelta = DEFAULT_QUERY_TIMEOUT
    value_factory: ExprValueFactory = Field(exclude=True, repr=False)

    def to_source(self) -> dict[str, Any]:
        """Render the search body."""
        source: dict[str, Any] = {
            "from": self.offset,
            "size": self.size,
            "timeout": Time.format(self.timeout),
            "track_scores": self.track_scores,
        }
        if self.query is not None:
            source["query"] = self.query.to_dsl()
        if self.sorts:
            source["sort"] = [s.to_dsl() for s in self.sorts]
        if self.fetch_source is not None:
            source["_source"] = self.fetch_source.to_dsl()
        if self.aggregations:
            aggs: dict[str, Any] = {}
            for aggregation in self.aggregations:
                aggs.update(aggregation.to_dsl())
            source["aggs"] = aggs
        if self.highlight is not None:
            source["highlight"] = self.highlight.to_dsl()
        return source

    def to_search_args(self) -> dict[str, Any]:
        return {"index": str(self.index_name), "body": self.to_source()}

    def search(self, client: SyncElasticsearch) -> Any:
        """Send the request and return the native response."""
        args = self.to_search_args()
        debug("Search on %s: %s", args["index"], args["body"])
        return self._call(client.search, **args)

    def _call(self, method: Callable[..., Any], **kwargs: Any) -> Any:
        try:
            return method(**kwargs)
        except ESNotFoundError as e:
            raise NotFoundError(str(e)) from e
        except ApiError as e:
            raise BadRequestError(str(e)) from e


class QueryRequest(SearchRequest):
    """Request whose window fits in the max result window."""


class ScrollRequest(SearchRequest):
    """Request whose window is retrieved through a scroll context.

    The first page comes from ``search``. Later pages come from ``scroll``
    with the scroll id of the previous response. ``clean`` releases the
    scroll context.
    """

    scroll_timeout: timedelta = DEFAULT_SCROLL_TIMEOUT

    def to_search_args(self) -> dict[str, Any]:
        args = super().to_search_args()
        args["scroll"] = Time.format(self.scroll_timeout)
        return args

    def scroll(self, client: SyncElasticsearch, scroll_id: str) -> Any:
        return self._call(
            client.scroll,
            scroll_id=scroll_id,
            scroll=Time.format(self.scroll_timeout),
        )

    def clean(self, client: SyncElasticsearch, scroll_id: str) -> None:
        self._call(client.clear_scroll, scroll_id=scroll_id)
