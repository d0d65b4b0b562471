from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence, Tuple, TypeVar

from ..core.enums import Collection

T = TypeVar("T")

Mutation = Callable[[Optional[Any]], Tuple[Any, T]]


class KeyValueStore(Protocol):
    """Durable mapping of (collection, key) to a JSON-compatible value.

    Note (DIP): repositories depend on this interface, not on a concrete backend.
    Values handed out are copies; mutating them never touches stored state.
    """

    def get(self, collection: Collection, key: str) -> Optional[Any]:
        raise NotImplementedError

    def items(self, collection: Collection) -> Sequence[Tuple[str, Any]]:
        """All entries of a collection in insertion order."""

        raise NotImplementedError

    def put(self, collection: Collection, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, collection: Collection, key: str) -> bool:
        raise NotImplementedError

    def mutate(self, collection: Collection, key: str, fn: Mutation[T]) -> T:
        """Atomic read-modify-write of one key.

        ``fn`` receives the current value (None when absent) and returns
        ``(new_value, outcome)``. Concurrent mutations of the same key are
        serialised. If ``fn`` raises, nothing is written. When ``new_value``
        equals the current value the store is not written at all.
        """

        raise NotImplementedError
