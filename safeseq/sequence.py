from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- operation mixins ---
from .extensions.access import _AccessOperations
from .extensions.concat import _ConcatOperations
from .extensions.core import _CoreOperations
from .extensions.text import _TextOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Tuple[T, ...]:
        """get the underlying elements as a tuple"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, items: Iterable[T] = ()):
        """snapshot the items; the sequence never changes after this"""
        self._data: Tuple[T, ...] = items if isinstance(items, tuple) else tuple(items)

    def _get_data(self) -> Tuple[T, ...]:
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        """
        plain python indexing, IndexError and all. use safe_get for lookups
        that may fall outside the sequence.
        """
        if isinstance(index, slice):
            return Sequence(self._data[index])
        return self._data[index]

    def __repr__(self) -> str:
        return f"Sequence({list(self._data)!r})"

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _AccessOperations[T],
    _ConcatOperations[T],
    _CoreOperations[T],
    _TextOperations[T]
):
    """an immutable ordered sequence with bounds-safe and functional operations."""
    def __init__(self, items: Iterable[T] = ()):
        super().__init__(items)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
