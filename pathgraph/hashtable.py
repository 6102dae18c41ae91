import logging
from typing import Any, Generic, Hashable, Iterator, List, Optional, TypeVar

from .config import get_settings
from .errors import DuplicateKeyError, NotFoundError, NullKeyError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

LOAD_FACTOR_THRESHOLD = 0.8


class _Entry(Generic[K, V]):
    """A key/value pair stored in a bucket chain."""

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value


class HashtableMap(Generic[K, V]):
    """
    A hash table map with unique keys and separate chaining.

    Keys may be any object implementing ``__hash__`` and ``__eq__``. The bucket
    array doubles and every entry is rehashed as soon as the load factor
    (size / capacity) reaches 0.8 after an insert.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        """
        Creates an empty map.

        Args:
            capacity: Initial number of buckets. Defaults to the configured
                default capacity (64 unless overridden by the environment).

        Raises:
            ValueError: If capacity is not a positive integer.
        """
        if capacity is None:
            capacity = get_settings().default_capacity
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}.")
        self._capacity = capacity
        self._size = 0
        self._table: List[Optional[List[_Entry[K, V]]]] = [None] * capacity

    def put(self, key: K, value: V) -> None:
        """
        Adds a new mapping. A value of None is allowed.

        Args:
            key: The key of the mapping.
            value: The value the key maps to.

        Raises:
            NullKeyError: If key is None.
            DuplicateKeyError: If key already maps to a value.
        """
        if key is None:
            raise NullKeyError("Key cannot be None.")
        if self.contains_key(key):
            raise DuplicateKeyError(f"Key {key} already exists.")

        index = self._find_index(key)
        if self._table[index] is None:
            self._table[index] = []
        self._table[index].append(_Entry(key, value))
        self._size += 1

        if self._size / self._capacity >= LOAD_FACTOR_THRESHOLD:
            self._resize()

    def contains_key(self, key: K) -> bool:
        """Checks whether key maps to a value."""
        return self._find_entry(key) is not None

    def get(self, key: K) -> V:
        """
        Retrieves the value that key maps to.

        Raises:
            NullKeyError: If key is None.
            NotFoundError: If key is not stored in the map.
        """
        if key is None:
            raise NullKeyError("Key cannot be None.")
        entry = self._find_entry(key)
        if entry is None:
            raise NotFoundError(f"Key {key} does not exist.")
        return entry.value

    def remove(self, key: K) -> V:
        """
        Removes the mapping for key.

        Returns:
            The value the removed key mapped to.

        Raises:
            NullKeyError: If key is None.
            NotFoundError: If key is not stored in the map.
        """
        if key is None:
            raise NullKeyError("Key cannot be None.")
        chain = self._table[self._find_index(key)]
        if chain is not None:
            for position, entry in enumerate(chain):
                if entry.key == key:
                    del chain[position]
                    self._size -= 1
                    return entry.value
        raise NotFoundError(f"Key {key} does not exist.")

    def clear(self) -> None:
        """Removes every mapping. The capacity is left unchanged."""
        self._table = [None] * self._capacity
        self._size = 0

    def get_size(self) -> int:
        """Returns the number of stored keys."""
        return self._size

    def get_capacity(self) -> int:
        """Returns the length of the bucket array."""
        return self._capacity

    def get_keys(self) -> List[K]:
        """Returns every stored key in bucket order (not insertion order)."""
        return list(self)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[K]:
        for chain in self._table:
            if chain is not None:
                for entry in chain:
                    yield entry.key

    def __repr__(self) -> str:
        return f"HashtableMap(size={self._size}, capacity={self._capacity})"

    def _find_index(self, key: K) -> int:
        return abs(hash(key)) % self._capacity

    def _find_entry(self, key: K) -> Optional[_Entry[K, V]]:
        if key is None:
            return None
        chain = self._table[self._find_index(key)]
        if chain is None:
            return None
        for entry in chain:
            if entry.key == key:
                return entry
        return None

    def _resize(self) -> None:
        old_table = self._table
        self._capacity *= 2
        self._table = [None] * self._capacity

        # Indices are recomputed against the new capacity.
        for chain in old_table:
            if chain is None:
                continue
            for entry in chain:
                index = self._find_index(entry.key)
                if self._table[index] is None:
                    self._table[index] = []
                self._table[index].append(entry)

        logger.debug("Resized hash table to %d buckets (%d entries)", self._capacity, self._size)
