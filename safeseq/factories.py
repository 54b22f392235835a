import typing
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence

def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """create sequence from iterable (taken as a snapshot)"""
    from .sequence import Sequence
    return Sequence(data)

def of(*elements: T) -> 'Sequence[T]':
    """create sequence from the given elements, nothing is flattened"""
    from .sequence import Sequence
    return Sequence(elements)

def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence from range"""
    from .sequence import Sequence
    return Sequence(range(start, start + count))

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence()

# --- aliases ---
S = from_iterable
