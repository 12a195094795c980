"""Key/value pair ordered and compared by its integer key."""

from __future__ import annotations

VAL_SIZE = 6
_VAL_LIMIT = VAL_SIZE - 1


class Pair:
    """An integer priority with a short text value.

    The value is cut at the first NUL and to at most five characters.
    Equality and ordering look only at the key.
    """

    __slots__ = ("key", "_val")

    def __init__(self, key: int = 0, val: str = "") -> None:
        self.key = key
        self.val = val

    @property
    def val(self) -> str:
        return self._val

    @val.setter
    def val(self, value: str) -> None:
        self._val = value.split("\0", 1)[0][:_VAL_LIMIT]

    @staticmethod
    def _key_of(other: object, allow_int: bool) -> int | None:
        if isinstance(other, Pair):
            return other.key
        if allow_int and isinstance(other, int):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        key = self._key_of(other, allow_int=True)
        if key is None:
            return NotImplemented
        return self.key == key

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        key = self._key_of(other, allow_int=False)
        if key is None:
            return NotImplemented
        return self.key < key

    def __gt__(self, other: object) -> bool:
        key = self._key_of(other, allow_int=False)
        if key is None:
            return NotImplemented
        return self.key > key

    def __le__(self, other: object) -> bool:
        result = self.__gt__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __ge__(self, other: object) -> bool:
        result = self.__lt__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __str__(self) -> str:
        return f"({self.key}|{self.val})"

    def __repr__(self) -> str:
        return f"Pair({self.key!r}, {self.val!r})"