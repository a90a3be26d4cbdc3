"""
MiniRedis Core Module

Command-level building blocks that do not depend on the storage engine.

Available submodules:
- constants: reply tokens, kind names and TTL sentinels
- params: parameter records produced by the parser
- parser: one validation function per command
- response: reply rendering
- help: banner and HELP text
"""

from .constants import (
    OK,
    NULL_REPLY,
    KIND_STRING,
    KIND_LIST,
    KIND_HASH,
    KIND_NONE,
    TTL_NOT_EXISTS,
    TTL_NO_EXPIRY,
)

from .response import encode_value, render
