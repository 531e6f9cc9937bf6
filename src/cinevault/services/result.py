"""Result envelope returned by every API wrapper call."""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

from cinevault.shared.errors import TmdbError
from cinevault.shared.models.status import TmdbStatusResponse

T = TypeVar("T")


@dataclass(frozen=True)
class TmdbResult(Generic[T]):
    """Typed value or captured error of one TMDb call.

    A successful call with an empty body has neither a result nor an error.

    Attributes:
        result: Deserialized payload
        error: Error raised or reported while performing the call
        api_error_response: Status payload TMDb sent with a failed call
    """

    result: T | None = None
    error: BaseException | None = None
    api_error_response: TmdbStatusResponse | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T | None:
        """Return the result, or None if the call failed."""
        if self.error is not None:
            return None
        return self.result

    def unwrap_or_throw(self) -> T | None:
        """Return the result.

        Raises:
            TmdbError: If the call failed
        """
        if self.error is not None:
            message = str(self.error)
            if self.api_error_response is not None:
                message = (
                    f"{self.api_error_response.status_message} "
                    f"(status {self.api_error_response.status_code})"
                )
            raise TmdbError(
                message,
                self.error,
                self.api_error_response,
            ) from self.error
        return self.result


async def unwrap_async(pending: Awaitable[TmdbResult[T]]) -> T | None:
    """Await a pending call and unwrap it."""
    return (await pending).unwrap()


async def unwrap_or_throw_async(pending: Awaitable[TmdbResult[T]]) -> T | None:
    """Await a pending call and unwrap it, raising TmdbError on failure."""
    return (await pending).unwrap_or_throw()
