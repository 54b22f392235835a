from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


def _is_spliceable(item: Any) -> bool:
    """sequences, lists and tuples get spread into the result; everything else is one element"""
    from ..sequence import Sequence
    if isinstance(item, tuple) and hasattr(item, "_fields"):
        # namedtuples are records
        return False
    return isinstance(item, (Sequence, list, tuple))


def _flatten_once(items: Iterable[Any]) -> Iterator[Any]:
    # one level only: a list inside a spliced list stays a list
    for item in items:
        if isinstance(item, Atom):
            yield item.value
        elif _is_spliceable(item):
            yield from item
        else:
            yield item


class _ConcatOperations(Generic[T]):
    def concat(self: 'Sequence[T]', *items: Any) -> 'Sequence[Any]':
        """
        receiver's elements followed by each item in order. a Sequence, list or
        tuple item is spliced in element by element (one level deep); wrap it in
        Atom to append it whole. namedtuples count as records and are appended
        whole. anything else, None included, is appended as is.
        """
        from ..sequence import Sequence
        return Sequence(chain(self._get_data(), _flatten_once(items)))

    def concat_sequence(self: 'Sequence[T]', other: Union['Sequence[Any]', List[Any], Tuple[Any, ...]]) -> 'Sequence[Any]':
        """
        receiver's elements followed by the elements of other, where any element
        of other that is itself a sequence is spliced one level.
        """
        from ..sequence import Sequence
        if not _is_spliceable(other):
            raise TypeError(f"concat_sequence expects a Sequence, list or tuple, got {type(other).__name__}")
        return Sequence(chain(self._get_data(), _flatten_once(other)))
