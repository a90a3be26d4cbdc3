"""
MiniRedis Storage Engine Module

Dict-based storage engine implementing Redis-like keyspace semantics:
typed entries, optional TTL per key and lazy expiry.

Design:
- One dict maps each key to an Entry; the entry carries its own kind,
  payload and expiration timestamp
- Lazy expiry only: an expired entry is removed by the first operation
  that touches its key, there is no background sweep
- Time comes from an injectable millisecond clock so TTL behaviour can be
  driven deterministically
"""

import logging
import time

from miniredis.core.constants import (
    OK, KIND_STRING, KIND_LIST, KIND_HASH, KIND_NONE,
    TTL_NOT_EXISTS, TTL_NO_EXPIRY, MS_PER_SECOND,
)
from miniredis.exceptions import WrongTypeError

log = logging.getLogger(__name__)


def monotonic_ms():
    """Default engine clock: monotonic time in milliseconds."""
    return time.monotonic_ns() // 1_000_000


class Entry:
    """
    Value stored under one key.

    Subclasses fix the kind; the payload type follows from it:
    str for strings, list (head first) for lists, dict for hashes.

    Attributes:
        value: payload
        expires_at: int | None - absolute expiry in clock milliseconds
    """

    __slots__ = ('value', 'expires_at')

    kind = None

    def __init__(self, value, expires_at=None):
        self.value = value
        self.expires_at = expires_at

    def __repr__(self):
        return f'{type(self).__name__}({self.value!r}, expires_at={self.expires_at!r})'


class StringEntry(Entry):
    __slots__ = ()
    kind = KIND_STRING


class ListEntry(Entry):
    __slots__ = ()
    kind = KIND_LIST


class HashEntry(Entry):
    __slots__ = ()
    kind = KIND_HASH


class Storage:
    """
    Main storage engine for MiniRedis.

    Owns every entry; callers never keep references to payloads across
    commands. Datatype modules (list, hash) reach entries through
    ``_get_entry`` and ``_set_entry`` so type checks and expiry stay here.
    """

    __slots__ = ('_data', '_clock')

    def __init__(self, clock=None):
        """
        Initialize empty storage engine.

        Args:
            clock: callable | None - returns current time in milliseconds,
                defaults to a monotonic clock
        """
        self._data = {}
        self._clock = clock or monotonic_ms

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return self._lookup(key) is not None

    # =========================================================================
    # Internal Helper Methods
    # =========================================================================

    def _now(self):
        return self._clock()

    def _is_expired(self, entry):
        return entry.expires_at is not None and entry.expires_at <= self._now()

    def _delete_if_expired(self, key):
        """
        Delete key if it's expired (lazy expiry).

        Args:
            key: str - key to check and potentially delete

        Returns:
            bool: True if key was expired and deleted, False otherwise
        """
        entry = self._data.get(key)
        if entry is not None and self._is_expired(entry):
            del self._data[key]
            log.debug('expired key %r', key)
            return True
        return False

    def _lookup(self, key):
        """Return the live entry for key, or None."""
        self._delete_if_expired(key)
        return self._data.get(key)

    def _get_entry(self, key, entry_type):
        """
        Get the live entry for key, validating its kind.

        Args:
            key: str - key to retrieve
            entry_type: Entry subclass - required kind

        Returns:
            Entry | None: the entry, or None if key doesn't exist

        Raises:
            WrongTypeError: if key exists with a different kind
        """
        entry = self._lookup(key)
        if entry is not None and not isinstance(entry, entry_type):
            raise WrongTypeError(entry_type.kind)
        return entry

    def _set_entry(self, key, entry):
        self._data[key] = entry

    def _remove(self, key):
        del self._data[key]

    # =========================================================================
    # String Operations
    # =========================================================================

    def get(self, key):
        """
        Get value of a string key.

        Args:
            key: str - key to retrieve

        Returns:
            str | None: value, or None if key doesn't exist

        Raises:
            WrongTypeError: if key holds a list or hash
        """
        entry = self._get_entry(key, StringEntry)
        return entry.value if entry is not None else None

    def set(self, key, value, nx=False, xx=False, get=False, ttl=None, keep_ttl=False):
        """
        Set string value with optional TTL and conditions.

        Overwrites the key whatever kind it held before.

        Args:
            key: str - key to set
            value: str - value to store
            nx: bool - only set if key does NOT exist
            xx: bool - only set if key DOES exist
            get: bool - return the previous string value instead of OK
            ttl: int | None - expire after this many milliseconds
            keep_ttl: bool - retain the expiration of the previous entry

        Returns:
            str | None: OK, or the previous value when get is set;
            None when NX/XX prevented the write
        """
        previous = self._lookup(key)

        if nx and previous is not None:
            return None
        if xx and previous is None:
            return None

        old_value = None
        if get and isinstance(previous, StringEntry):
            old_value = previous.value

        expires_at = None
        if keep_ttl and previous is not None:
            expires_at = previous.expires_at
        if ttl is not None:
            expires_at = self._now() + ttl

        self._set_entry(key, StringEntry(value, expires_at))

        return old_value if get else OK

    # =========================================================================
    # Key Operations
    # =========================================================================

    def delete(self, *keys):
        """
        Delete one or more keys.

        Args:
            *keys: str - keys to delete, duplicates are processed independently

        Returns:
            int: number of keys that were deleted
        """
        count = 0
        for key in keys:
            if self._lookup(key) is not None:
                self._remove(key)
                count += 1
        return count

    def exists(self, *keys):
        """
        Check how many keys exist.

        Args:
            *keys: str - keys to check, duplicates are counted each time

        Returns:
            int: number of keys that exist
        """
        return sum(1 for key in keys if self._lookup(key) is not None)

    def type(self, key):
        """
        Get type of key.

        Returns:
            str: string, list, hash or none
        """
        entry = self._lookup(key)
        return entry.kind if entry is not None else KIND_NONE

    # =========================================================================
    # TTL Operations
    # =========================================================================

    def pttl(self, key):
        """
        Get time to live in milliseconds.

        Returns:
            int: -2 if key doesn't exist, -1 if no expiry, >0 for TTL in milliseconds
        """
        entry = self._lookup(key)
        if entry is None:
            return TTL_NOT_EXISTS
        if entry.expires_at is None:
            return TTL_NO_EXPIRY
        return entry.expires_at - self._now()

    def ttl(self, key):
        """
        Get time to live in seconds.

        Returns:
            int: -2 if key doesn't exist, -1 if no expiry, >=0 for TTL in seconds
        """
        remaining = self.pttl(key)
        if remaining < 0:
            return remaining
        # Floor, same as Redis
        return remaining // MS_PER_SECOND

    def persist(self, key):
        """
        Remove TTL from a key.

        Returns:
            int: 1 if TTL was removed, 0 if key doesn't exist or has no TTL
        """
        entry = self._lookup(key)
        if entry is None or entry.expires_at is None:
            return 0
        entry.expires_at = None
        return 1
