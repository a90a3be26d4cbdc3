"""
MiniRedis Constants Module

Reply tokens, entry kind names and TTL sentinels shared by the
storage engine, the command router and the reply formatter.
"""

# =============================================================================
# Replies
# =============================================================================

OK = 'OK'                # Acknowledgment returned by SET without GET
NULL_REPLY = 'null'      # Rendered in place of an absent value

# =============================================================================
# Entry kinds
# =============================================================================
# Names double as the TYPE reply and as the WrongTypeError message suffix

KIND_STRING = 'string'
KIND_LIST = 'list'
KIND_HASH = 'hash'
KIND_NONE = 'none'       # TYPE reply for a missing key

# =============================================================================
# TTL
# =============================================================================

TTL_NOT_EXISTS = -2      # TTL/PTTL reply when the key is missing
TTL_NO_EXPIRY = -1       # TTL/PTTL reply when the key has no expiration

MS_PER_SECOND = 1000
