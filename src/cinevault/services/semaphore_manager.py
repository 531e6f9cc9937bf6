"""Semaphore Manager for concurrency control.

This module provides an asyncio semaphore manager that bounds the number of
TMDb calls in flight at the same time. Waiters are resumed in FIFO order as
permits are released.
"""

from __future__ import annotations

import asyncio
import logging
import types

from typing_extensions import Self

from cinevault.shared.constants import NetworkConfig
from cinevault.shared.errors import (
    ApplicationError,
    ErrorCode,
    ErrorContext,
    create_precondition_error,
)
from cinevault.shared.logging import log_operation_error

logger = logging.getLogger(__name__)


class AsyncSemaphoreManager:
    """Semaphore manager for controlling concurrent API requests.

    Use it as an async context manager around every dispatched call; the
    permit is released on exit whatever the outcome of the call.

    Args:
        concurrency_limit: Maximum number of concurrent requests (default: 30)

    Example:
        >>> gate = AsyncSemaphoreManager(4)
        >>> async with gate:
        ...     await wrapper.get_movie(550)
    """

    def __init__(
        self,
        concurrency_limit: int = NetworkConfig.DEFAULT_CONCURRENT_REQUESTS,
    ) -> None:
        """Initialize the semaphore manager.

        Args:
            concurrency_limit: Maximum number of concurrent requests allowed

        Raises:
            PreconditionError: If concurrency_limit is below 1
        """
        if concurrency_limit < 1:
            raise create_precondition_error(
                f"Concurrency limit must be at least 1, got: {concurrency_limit}",
                operation="semaphore_manager_init",
                field="concurrency_limit",
            )

        self.concurrency_limit = concurrency_limit
        self._semaphore = asyncio.Semaphore(concurrency_limit)
        self._active_count = 0
        self._peak_count = 0

        logger.debug("Semaphore manager created (limit=%d)", concurrency_limit)

    async def acquire(self) -> None:
        """Wait for a free permit and take it."""
        await self._semaphore.acquire()
        self._active_count += 1
        self._peak_count = max(self._peak_count, self._active_count)

    def release(self) -> None:
        """Give a permit back.

        Raises:
            ApplicationError: If no permit is currently held
        """
        if self._active_count == 0:
            context = ErrorContext(
                operation="semaphore_release",
                additional_data={"concurrency_limit": self.concurrency_limit},
            )
            error = ApplicationError(
                code=ErrorCode.CONCURRENCY_ERROR,
                message="Semaphore released more times than it was acquired",
                context=context,
            )
            log_operation_error(
                logger=logger,
                operation="semaphore_release",
                error=error,
                additional_context=context.additional_data,
            )
            raise error

        self._active_count -= 1
        self._semaphore.release()

    async def __aenter__(self) -> Self:
        await self.acquire()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Release the permit.

        Args:
            exc_type: Exception type if an exception occurred
            exc_val: Exception value if an exception occurred
            exc_tb: Exception traceback if an exception occurred
        """
        self.release()

    def get_active_count(self) -> int:
        """Number of permits currently held."""
        return self._active_count

    def get_available_count(self) -> int:
        """Number of permits that can be taken without waiting."""
        return self.concurrency_limit - self._active_count

    def get_peak_count(self) -> int:
        """Highest number of permits held at the same time so far."""
        return self._peak_count
