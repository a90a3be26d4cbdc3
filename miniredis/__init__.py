"""
MiniRedis - An in-memory Redis-like key-value store with a command shell.

MiniRedis keeps strings, lists and hashes in memory, each with an optional
time-to-live, and answers a subset of the Redis command surface
(SET, GET, DEL, LPUSH, LPOP, LRANGE, HSET, HGET, EXISTS, TYPE, TTL, PTTL,
PERSIST) typed one per line. Expired keys are removed lazily, on access.

Usage:
    from miniredis.storage.engine import Storage
    from miniredis.router import CommandRouter

    router = CommandRouter(Storage())
    router.execute(['SET', 'greeting', 'hello'])
"""

__version__ = '1.0.0'
__all__ = ['__version__']
