"""Request executor using bound endpoint actions and response adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from functools import lru_cache
from time import perf_counter
from typing import Any
from urllib.parse import quote

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..config import LINK_HEADER
from ..core.enums import ParamLocation, Shape
from ..core.exceptions import ConstructionError, ResponseDecodeError
from .context import ExecutionContext
from .endpoint import Action
from .links import ContinuationSet, parse_link_header
from .rest.transport import HTTPRequest, HTTPResponse
from .telemetry import log_request_completed


@dataclass
class PageResult:
    """Items and continuation of one paginated fetch.

    Attributes:
        items: Decoded items of the page, in response order
        links: Parsed Link header, None when the response carried none
        page: Page number that was requested
    """

    items: list[Any] = field(default_factory=list)
    links: ContinuationSet | None = None
    page: int = 1


class ResponseAdapter:
    def parse(self, body: Any, action: Action) -> Any:
        return body


@lru_cache(maxsize=None)
def _type_adapter(model: Any, many: bool) -> TypeAdapter:
    return TypeAdapter(list[model] if many else model)


class ModelAdapter(ResponseAdapter):
    """Validates the JSON body into the endpoint's payload model."""

    def __init__(self, model: Any, *, many: bool) -> None:
        self._model = model
        self._many = many

    def parse(self, body: Any, action: Action) -> Any:
        try:
            return _type_adapter(self._model, self._many).validate_python(body)
        except PydanticValidationError as e:
            raise ResponseDecodeError(
                f"{action.id}: response does not match {_model_name(self._model)}: "
                f"{e.error_count()} validation error(s)"
            ) from e


def _model_name(model: Any) -> str:
    return getattr(model, "__name__", repr(model))


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        # Naive datetimes are taken as UTC so the offset is always explicit
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def render_path(action: Action) -> str:
    values = {
        p.name: quote(str(action.arguments[p.name]), safe=p.safe)
        for p in action.endpoint.params
        if p.location is ParamLocation.PATH
    }
    return action.endpoint.path.format(**values)


class RequestExecutor:
    """Performs one HTTP call per invocation against an ExecutionContext.

    Headers are injected in fixed order (User-Agent, then Authorization when
    a token is present); paginated shapes additionally get ``page`` and
    ``per_page`` query parameters after the declared ones, and their Link
    header is captured. The executor never retries.
    """

    def __init__(self, adapters: dict[str, ResponseAdapter] | None = None) -> None:
        self._adapters = dict(adapters or {})

    def register_adapter(self, endpoint_id: str, adapter: ResponseAdapter) -> None:
        self._adapters[endpoint_id] = adapter

    def adapter_for(self, action: Action) -> ResponseAdapter:
        adapter = self._adapters.get(action.id)
        if adapter is not None:
            return adapter
        if action.endpoint.model is not None:
            return ModelAdapter(action.endpoint.model, many=action.shape.is_paginated)
        return ResponseAdapter()

    def build_request(
        self,
        context: ExecutionContext,
        action: Action,
        *,
        page: int | None = None,
        per_page: int | None = None,
    ) -> HTTPRequest:
        query = {k: _query_value(v) for k, v in action.values(ParamLocation.QUERY).items()}
        body = action.values(ParamLocation.BODY) or None

        headers = {"User-Agent": context.user_agent}
        if context.token is not None:
            headers["Authorization"] = context.token.header_value

        if action.shape is Shape.PAGINATED:
            query["page"] = str(page if page is not None else context.page)
            query["per_page"] = str(per_page if per_page is not None else context.page_size)

        return HTTPRequest(
            method=action.endpoint.method.upper(),
            path=render_path(action),
            params=query,
            headers=headers,
            body=body,
        )

    async def _send(
        self, context: ExecutionContext, action: Action, request: HTTPRequest
    ) -> HTTPResponse:
        start = perf_counter()
        response = await context.transport.send(request)
        log_request_completed(
            endpoint_id=action.id,
            method=request.method,
            path=request.path,
            status=response.status,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return response

    async def execute_single(self, context: ExecutionContext, action: Action) -> Any:
        """Run a single-resource action and return its decoded payload."""
        if action.shape is not Shape.SINGLE:
            raise ConstructionError(f"{action.id}: not a single-resource endpoint", action.id)
        request = self.build_request(context, action)
        response = await self._send(context, action, request)
        return self.adapter_for(action).parse(response.body, action)

    async def execute_page(
        self, context: ExecutionContext, action: Action, page: int, per_page: int
    ) -> PageResult:
        """Fetch one page of a paginated action.

        Args:
            context: Session execution context
            action: Bound paginated action
            page: 1-based page number
            per_page: Requested page size

        Returns:
            PageResult with the decoded items and the parsed Link header
        """
        if action.shape is not Shape.PAGINATED:
            raise ConstructionError(f"{action.id}: not a paginated endpoint", action.id)
        request = self.build_request(context, action, page=page, per_page=per_page)
        response = await self._send(context, action, request)

        body = response.body if response.body is not None else []
        if not isinstance(body, list):
            raise ResponseDecodeError(
                f"{action.id}: expected a JSON array, got {type(body).__name__}",
                status_code=response.status,
            )
        items = list(self.adapter_for(action).parse(body, action))

        link_value = response.header(LINK_HEADER)
        links = parse_link_header(link_value) if link_value is not None else None
        return PageResult(items=items, links=links, page=page)

    async def execute(self, context: ExecutionContext, action: Action) -> Any:
        """Run one call; paginated actions fetch the context's current page only."""
        if action.shape is Shape.SINGLE:
            return await self.execute_single(context, action)
        return await self.execute_page(context, action, context.page, context.page_size)
