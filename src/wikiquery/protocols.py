"""Core protocols for transports and paginated readers."""

from collections.abc import AsyncIterator
from typing import Protocol, Self, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)
Ctx = TypeVar("Ctx")  # Invariant: used in both parameter and return positions
Q_contra = TypeVar("Q_contra", contravariant=True)
Params_contra = TypeVar("Params_contra", contravariant=True)


@runtime_checkable
class Transport(Protocol):
    """Protocol for sending a request target and receiving raw bytes."""

    async def get(self, target: str) -> bytes:
        """Send a GET for `target` and return the response body."""
        ...


@runtime_checkable
class DataInput(Protocol[Q_contra, T_co, Ctx]):
    """Protocol for reading paginated results from a remote API."""

    def read(self, query: Q_contra) -> AsyncIterator[tuple[T_co, Ctx | None]]:
        """Yield (result, context) tuples, one per round.

        The context is the continuation state returned with that round, or
        None once the result set is complete.
        """
        ...


@runtime_checkable
class Provider(Protocol[Params_contra]):
    """Protocol for provider lifecycle management."""

    @classmethod
    async def connect(cls, params: Params_contra) -> Self:
        """Establish connection to the remote API."""
        ...

    async def disconnect(self) -> None:
        """Release resources and close connections."""
        ...
