"""Page accumulation for paginated endpoints.

This module provides the PaginationAccumulator, which drives the request
executor page after page, following the ``next`` relation of each
response's Link header and concatenating the items.

Architecture:
    START       reset pagination when recursion is on
    FETCHING    fetch context.page, append items, replace context.links
    CONTINUING  loop iff recursion is on and a ``next`` link is present
    DONE        return the accumulated items
    FAILED      the error propagates; accumulated items are discarded

Pages are fetched strictly one after another: page N+1 is requested only
after page N's response, including its Link header, has been processed.
"""

from __future__ import annotations

from typing import Any

from ..core.enums import PaginationState, Shape
from ..core.exceptions import ConstructionError
from .context import ExecutionContext
from .endpoint import Action
from .executor import RequestExecutor
from .links import has_next
from .telemetry import log_page_fetched, log_pagination_complete, log_pagination_error


class PaginationAccumulator:
    """Accumulates every page of a paginated action into one list."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor
        self.state = PaginationState.START

    async def accumulate(self, context: ExecutionContext, action: Action) -> list[Any]:
        """Fetch one or all pages of a paginated action.

        Args:
            context: Session execution context, updated in place
            action: Bound paginated action

        Returns:
            Items of every fetched page, in page order

        Raises:
            ConstructionError: Action is not paginated
            TransportError: Any page failed; earlier pages are discarded
        """
        if action.shape is not Shape.PAGINATED:
            raise ConstructionError(f"{action.id}: not a paginated endpoint", action.id)

        self.state = PaginationState.START
        if context.recurse:
            context.reset_pagination()

        accumulated: list[Any] = []
        pages_used = 0

        while True:
            self.state = PaginationState.FETCHING
            try:
                result = await self._executor.execute_page(
                    context, action, context.page, context.page_size
                )
            except Exception as e:
                self.state = PaginationState.FAILED
                log_pagination_error(
                    endpoint_id=action.id,
                    page=context.page,
                    pages_completed=pages_used,
                    items_discarded=len(accumulated),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            pages_used += 1
            accumulated.extend(result.items)
            context.links = result.links
            log_page_fetched(
                endpoint_id=action.id,
                page=result.page,
                per_page=context.page_size,
                items=len(result.items),
                has_next=has_next(result.links),
            )

            self.state = PaginationState.CONTINUING
            if context.recurse and has_next(context.links):
                context.page += 1
                continue
            break

        self.state = PaginationState.DONE
        log_pagination_complete(
            endpoint_id=action.id,
            pages_used=pages_used,
            total_items=len(accumulated),
            recurse=context.recurse,
        )
        return accumulated
