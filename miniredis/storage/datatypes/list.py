"""
MiniRedis List Operations

Implements Redis-compatible LPUSH, LPOP and LRANGE on top of the storage
engine. A list payload is a plain Python list kept head first, so index 0 is
always the most recently pushed element.

A list emptied by LPOP is removed from the keyspace, as Redis does.
"""

from miniredis.storage.engine import ListEntry


class ListOps:
    """
    Redis-compatible list operations.
    All methods are static to avoid instance overhead.
    """

    __slots__ = ()

    @staticmethod
    def _get_list(storage, key):
        """
        Get list payload from storage, validating type.

        Returns:
            list instance or None if key doesn't exist

        Raises:
            WrongTypeError: If key exists but is not a list
        """
        entry = storage._get_entry(key, ListEntry)
        return entry.value if entry is not None else None

    @staticmethod
    def lpush(storage, key, *values):
        """
        Insert values at the head of the list.

        Args:
            storage: Storage engine instance
            key: List key
            values: Values to insert (inserted left-to-right, so the last
                one given becomes the new head)

        Returns:
            Length of list after push
        """
        lst = ListOps._get_list(storage, key)

        if lst is None:
            lst = []
            storage._set_entry(key, ListEntry(lst))

        lst[:0] = reversed(values)
        return len(lst)

    @staticmethod
    def lpop(storage, key, count=1):
        """
        Remove and return elements from the head of the list.

        Args:
            storage: Storage engine instance
            key: List key
            count: Maximum number of elements to pop

        Returns:
            list of popped values head first, or None if the key is missing
            or nothing was removed
        """
        lst = ListOps._get_list(storage, key)

        if lst is None or count <= 0 or not lst:
            return None

        result = lst[:count]
        del lst[:count]

        if not lst:
            storage._remove(key)

        return result

    @staticmethod
    def lrange(storage, key, start, stop):
        """
        Get an inclusive range of elements, counted from the head.

        Negative indices are offsets from the tail (-1 is the last element).
        Out of range indices follow Redis: an empty range yields an empty
        list, a stop past the tail is clamped to it.

        Returns:
            list of values head first, or None if the key is missing
        """
        lst = ListOps._get_list(storage, key)

        if lst is None:
            return None

        length = len(lst)
        if start < 0:
            start += length
        if stop < 0:
            stop += length

        if start >= length or start > stop:
            return []

        if start < 0:
            start = 0
        if stop >= length:
            stop = length - 1

        return lst[start:stop + 1]
