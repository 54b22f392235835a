from __future__ import annotations
import logging
import typing
from numbers import Integral
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


def _as_index(value: Any, name: str) -> int:
    """accept any integral (python or numpy) except bool"""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


class _AccessOperations(Generic[T]):
    def safe_get(self: 'Sequence[T]', index: int) -> Maybe[T]:
        """
        element at index, or ABSENT when index is outside [0, len).
        negative indices do not count from the end; they are out of range.
        """
        i = _as_index(index, "index")
        data = self._get_data()
        if 0 <= i < len(data):
            return Maybe.some(data[i])
        logger.debug("safe_get: index %d outside sequence of length %d", i, len(data))
        return ABSENT

    def subrange(self: 'Sequence[T]', from_index: int, to_index: int) -> 'Sequence[T]':
        """
        elements from from_index through to_index, both inclusive.
        an invalid range (reversed, out of bounds, empty source) gives an empty sequence.
        """
        from ..sequence import Sequence
        start = _as_index(from_index, "from_index")
        end = _as_index(to_index, "to_index")
        data = self._get_data()
        if not 0 <= start <= end < len(data):
            logger.debug("subrange: [%d, %d] invalid for length %d", start, end, len(data))
            return Sequence()
        return Sequence(data[start:end + 1])

    def slice(self: 'Sequence[T]', start: int, stop: int) -> 'Sequence[T]':
        """half-open [start, stop) companion to subrange, same empty-on-invalid policy"""
        from ..sequence import Sequence
        lo = _as_index(start, "start")
        hi = _as_index(stop, "stop")
        data = self._get_data()
        if not 0 <= lo <= hi <= len(data):
            logger.debug("slice: [%d, %d) invalid for length %d", lo, hi, len(data))
            return Sequence()
        return Sequence(data[lo:hi])
