"""Case-insensitive, name-keyed mapping used by the catalog and the aggregator."""
from typing import Dict, Generic, Iterator, Optional, Tuple, TypeVar

V = TypeVar("V")


def normalize_name(name) -> str:
    """Lookup key for a user-facing name (trimmed, lower-cased)."""
    if not isinstance(name, str):
        return ""
    return name.strip().lower()


class NameIndex(Generic[V]):
    '''
    Owns values keyed by a normalized name while remembering the spelling
    they were stored under. Two names that differ only by case or
    surrounding whitespace map to the same slot.
    '''

    def __init__(self):
        self._items: Dict[str, Tuple[str, V]] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name) -> bool:
        return normalize_name(name) in self._items

    def __iter__(self) -> Iterator[str]:
        return (display for display, _ in self._items.values())

    def get(self, name, default: Optional[V] = None) -> Optional[V]:
        entry = self._items.get(normalize_name(name))
        return entry[1] if entry else default

    def add(self, name: str, value: V) -> bool:
        '''Stores value under name unless the slot is taken. Returns False on conflict.'''
        key = normalize_name(name)
        if not key or key in self._items:
            return False
        self._items[key] = (name.strip(), value)
        return True

    def set(self, name: str, value: V) -> None:
        key = normalize_name(name)
        display = self._items[key][0] if key in self._items else name.strip()
        self._items[key] = (display, value)

    def remove(self, name) -> bool:
        return self._items.pop(normalize_name(name), None) is not None

    def items(self):
        return [(display, value) for display, value in self._items.values()]

    def values(self):
        return [value for _, value in self._items.values()]
