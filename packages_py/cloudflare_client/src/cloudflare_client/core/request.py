"""
Request builder helper.
"""
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from ..types import HttpMethod, RequestOptions
from .query import QueryBuilder, QueryNaming, build_headers, build_path


class RequestBuilder:
    """Fluent builder for RequestOptions."""

    def __init__(self, path: str = "", method: HttpMethod = "GET"):
        self._path = path
        self._method: HttpMethod = method
        self._query = QueryBuilder()
        self._headers: dict = {}
        self._json: Any = None
        self._has_body = False

    @classmethod
    def for_path(cls, method: HttpMethod, template: str, **segments: Any) -> "RequestBuilder":
        """Start a request whose path segments are percent-encoded individually."""
        return cls(build_path(template, **segments), method)

    def method(self, method: HttpMethod) -> "RequestBuilder":
        self._method = method
        return self

    def header(self, key: str, value: Optional[Any]) -> "RequestBuilder":
        self._headers.update(build_headers({key: value}))
        return self

    def headers(self, headers: Mapping[str, Optional[Any]]) -> "RequestBuilder":
        self._headers.update(build_headers(headers))
        return self

    def param(self, key: str, value: Any) -> "RequestBuilder":
        self._query.add(key, value)
        return self

    def filters(
        self,
        filters: Optional[BaseModel],
        convention: QueryNaming = QueryNaming.UNDERSCORE,
    ) -> "RequestBuilder":
        self._query.add_filters(filters, convention)
        return self

    def json(self, data: Any) -> "RequestBuilder":
        """Set the JSON body. Pydantic models are dumped by alias without None fields."""
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json", by_alias=True, exclude_none=True)
        self._json = data
        self._has_body = True
        return self

    def build(self) -> RequestOptions:
        """Get the constructed options."""
        options: RequestOptions = {
            "method": self._method,
            "url": self._path,
            "headers": dict(self._headers),
            "query": self._query.pairs,
        }
        if self._has_body:
            options["json"] = self._json
        return options
