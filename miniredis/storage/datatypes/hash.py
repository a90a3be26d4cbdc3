"""
MiniRedis Hash Operations Module

Implements Redis HSET and HGET on top of the storage engine.
A hash payload is a dict mapping field to value.
"""

from miniredis.storage.engine import HashEntry


class HashType:
    """
    Redis Hash operations.

    All methods are static to avoid instance overhead.
    Storage engine integration via storage parameter.
    """

    __slots__ = ()

    @staticmethod
    def _get_hash(storage, key):
        """
        Get hash payload from storage.

        Returns:
            dict | None: hash data or None if key doesn't exist

        Raises:
            WrongTypeError: if key exists but is not a hash
        """
        entry = storage._get_entry(key, HashEntry)
        return entry.value if entry is not None else None

    @staticmethod
    def hset(storage, key, *pairs):
        """
        Set field-value pairs in a hash, creating it if needed.

        Pairs are applied in order, so a field given twice keeps its last
        value but is counted once.

        Args:
            storage: Storage instance
            key: str - hash key
            *pairs: tuple[str, str] - (field, value) pairs

        Returns:
            int: number of fields that did not exist before the call
        """
        data = HashType._get_hash(storage, key)

        if data is None:
            data = {}
            storage._set_entry(key, HashEntry(data))

        created = 0
        for field, value in pairs:
            if field not in data:
                created += 1
            data[field] = value

        return created

    @staticmethod
    def hget(storage, key, field):
        """
        Get value of a hash field.

        Returns:
            str | None: field value or None if key or field doesn't exist
        """
        data = HashType._get_hash(storage, key)
        if data is None:
            return None
        return data.get(field)
