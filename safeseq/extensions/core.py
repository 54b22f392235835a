from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


def _require_callable(func: Any, name: str) -> None:
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")


class _CoreOperations(Generic[T]):
    def find(self: 'Sequence[T]', predicate: Predicate[T]) -> Maybe[T]:
        """first element satisfying predicate, or ABSENT. stops at the first match."""
        _require_callable(predicate, "predicate")
        for item in self._get_data():
            if predicate(item):
                return Maybe.some(item)
        return ABSENT

    def find_index(self: 'Sequence[T]', predicate: Predicate[T]) -> Maybe[int]:
        """position of the first element satisfying predicate, or ABSENT"""
        _require_callable(predicate, "predicate")
        for index, item in enumerate(self._get_data()):
            if predicate(item):
                return Maybe.some(index)
        return ABSENT

    def each(self: 'Sequence[T]', action: Action[T]) -> None:
        """
        calls action on every element, in order, for its side effects.
        there is no early exit. if action raises, the error propagates and the
        effects already applied to earlier elements are not undone.
        """
        _require_callable(action, "action")
        for item in self._get_data():
            action(item)

    def map(self: 'Sequence[T]', transform: Transformer[T, U]) -> 'Sequence[U]':
        """
        new sequence of transform(element, index) for every element.
        built in full before returning, so a failing transform yields no result at all.
        """
        from ..sequence import Sequence
        _require_callable(transform, "transform")
        return Sequence([transform(item, index) for index, item in enumerate(self._get_data())])

    def filter(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """elements satisfying predicate in original order; empty, never absent, when nothing matches"""
        from ..sequence import Sequence
        _require_callable(predicate, "predicate")
        return Sequence([item for item in self._get_data() if predicate(item)])
