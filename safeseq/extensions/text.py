from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class _TextOperations(Generic[T]):
    def join_with(self: 'Sequence[T]', separator: str, formatter: Formatter[T] = str) -> str:
        """
        format every element and join the results with separator between
        neighbours (never leading or trailing). the default formatter is str,
        which makes this a plain join for elements that already print well.
        """
        if not isinstance(separator, str):
            raise TypeError(f"separator must be a string, got {type(separator).__name__}")
        if not callable(formatter):
            raise TypeError(f"formatter must be callable, got {type(formatter).__name__}")

        parts = []
        for index, item in enumerate(self._get_data()):
            text = formatter(item)
            if not isinstance(text, str):
                raise TypeError(f"formatter returned {type(text).__name__} for element {index}, expected str")
            parts.append(text)
        return separator.join(parts)
