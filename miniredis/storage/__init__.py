"""
Storage backend for MiniRedis.

The engine owns the keyspace and the generic key, string and TTL
operations; ``datatypes`` adds the list and hash commands.
"""
