import numpy as np
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Type
)

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Action = Callable[[T], Any]
Transformer = Callable[[T, int], R]
Formatter = Callable[[T], str]


class Maybe(Generic[T]):
    """
    an element or nothing. returned by the lookups that can come up empty
    (safe_get, find) so that "no element" never collides with an element
    whose value happens to be None.
    """

    _absent: Optional['Maybe[Any]'] = None

    def __init__(self, value: Optional[T], is_present: bool):
        self._value = value
        self._is_present = is_present

    @classmethod
    def some(cls, value: T) -> 'Maybe[T]':
        return cls(value, True)

    @classmethod
    def absent(cls) -> 'Maybe[Any]':
        if cls._absent is None:
            cls._absent = cls(None, False)
        return cls._absent

    @property
    def is_present(self) -> bool: return self._is_present

    @property
    def is_absent(self) -> bool: return not self._is_present

    @property
    def value(self) -> T:
        """the wrapped element, raising if there is none"""
        if not self._is_present:
            raise ValueError("no value present")
        return self._value

    def value_or(self, default: U) -> Union[T, U]:
        return self._value if self._is_present else default

    def map(self, selector: Callable[[T], U]) -> 'Maybe[U]':
        """apply selector to a present value, absent stays absent"""
        if not self._is_present:
            return self
        return Maybe.some(selector(self._value))

    def __bool__(self) -> bool:
        # a present 0 or None is still truthy here
        return self._is_present

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self._is_present != other._is_present:
            return False
        if not self._is_present or self._value is other._value:
            return True
        if isinstance(self._value, np.ndarray) or isinstance(other._value, np.ndarray):
            # elementwise == on arrays has no single truth value
            return bool(np.array_equal(self._value, other._value))
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_present, self._value)) if self._is_present else hash(Maybe)

    def __repr__(self) -> str:
        return f"Maybe.some({self._value!r})" if self._is_present else "Maybe.absent()"


ABSENT: Maybe[Any] = Maybe.absent()


class Atom(Generic[T]):
    """marks a value that concat should append whole, even when it is a list"""

    def __init__(self, value: T):
        self.value = value

    def __repr__(self) -> str:
        return f"Atom({self.value!r})"
