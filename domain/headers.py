# domain/headers.py
from __future__ import annotations

from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union

HeaderPairs = Iterable[Tuple[str, str]]


class HttpHeaders:
    """
    Immutable, case-insensitive, multi-valued header collection.
    Insertion order of the (name, value) pairs is preserved.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Union[HeaderPairs, Mapping[str, str], None] = None):
        if items is None:
            pairs: List[Tuple[str, str]] = []
        elif isinstance(items, Mapping):
            pairs = [(str(k), str(v)) for k, v in items.items()]
        else:
            pairs = [(str(k), str(v)) for k, v in items]
        object.__setattr__(self, "_items", tuple(pairs))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("HttpHeaders is immutable")

    def get_first(self, name: str, default: Optional[str] = None) -> Optional[str]:
        key = name.lower()
        for k, v in self._items:
            if k.lower() == key:
                return v
        return default

    def get_all(self, name: str) -> List[str]:
        key = name.lower()
        return [v for k, v in self._items if k.lower() == key]

    def items(self) -> Tuple[Tuple[str, str], ...]:
        return self._items

    def to_dict(self) -> dict:
        # last value wins for repeated names
        return {k: v for k, v in self._items}

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.get_first(name) is not None

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpHeaders):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"HttpHeaders({list(self._items)!r})"


EMPTY_HEADERS = HttpHeaders()
