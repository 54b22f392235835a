from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class TerminalAccessor(Generic[T]):
    """conversions out of a sequence"""

    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """the backing tuple itself; it is immutable so no copy is needed"""
        return self._sequence._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._sequence._get_data()))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self._sequence._get_data()))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._sequence._get_data())
        return sum(1 for x in self._sequence._get_data() if predicate(x))
