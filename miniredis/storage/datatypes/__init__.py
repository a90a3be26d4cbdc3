"""
MiniRedis Data Types Module

Redis-compatible operations for the non-string data types. Strings live in
the storage engine itself.

Supported Data Types:
- List: head-first plain list for LPUSH/LPOP/LRANGE
- Hash: dict of field-value mappings for HSET/HGET
"""

from .hash import HashType
from .list import ListOps as ListOperations

__all__ = [
    'HashType',
    'ListOperations',
]
