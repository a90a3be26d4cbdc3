"""
MiniRedis Command Parser

One pure function per command. Each takes the full token list (the command
name first, as typed) and returns a parameter object from
``miniredis.core.params`` or raises a ``RedisError`` subclass describing what
is wrong. Nothing here touches the storage engine.
"""

from miniredis.core.constants import MS_PER_SECOND
from miniredis.core.params import (
    SetParams, KeyParams, KeysParams, LPushParams, LPopParams,
    LRangeParams, HSetParams, HGetParams,
)
from miniredis.exceptions import (
    WrongArityError, InvalidArgumentError, MutuallyExclusiveError,
)


def _to_int(token, message):
    """
    Parse a decimal integer token.

    Args:
        token: str - token to parse
        message: str - InvalidArgumentError message on failure

    Returns:
        int: parsed value

    Raises:
        InvalidArgumentError: if token is not an optionally signed run of digits
    """
    # int() also accepts '1_000'; the command surface does not
    if '_' in token:
        raise InvalidArgumentError(message)
    try:
        return int(token)
    except ValueError:
        raise InvalidArgumentError(message) from None


def _parse_ttl(command, i):
    """Return the positive integer following an EX/PX flag at index i."""
    if i + 1 >= len(command):
        raise InvalidArgumentError('Invalid expiration time')
    ttl = _to_int(command[i + 1], 'Invalid expiration time')
    if ttl <= 0:
        raise InvalidArgumentError('Invalid expiration time')
    return ttl


def parse_set(command):
    """
    SET key value [NX|XX] [GET] [EX seconds|PX milliseconds] [KEEPTTL]

    Flags are case-insensitive and may appear in any order. A later EX/PX
    replaces an earlier one.
    """
    if len(command) < 3:
        raise WrongArityError('SET requires at least 2 arguments')

    params = SetParams(command[1], command[2])

    i = 3
    while i < len(command):
        flag = command[i].upper()
        if flag == 'NX':
            params.nx = True
        elif flag == 'XX':
            params.xx = True
        elif flag == 'GET':
            params.get = True
        elif flag == 'EX':
            params.ttl = _parse_ttl(command, i) * MS_PER_SECOND
            i += 1
        elif flag == 'PX':
            params.ttl = _parse_ttl(command, i)
            i += 1
        elif flag == 'KEEPTTL':
            params.keep_ttl = True
        else:
            raise InvalidArgumentError(f'Invalid argument: {command[i]}')
        i += 1

    if params.nx and params.xx:
        raise MutuallyExclusiveError('NX and XX cannot be used together')

    if params.keep_ttl and params.ttl is not None:
        raise MutuallyExclusiveError('EX/PX and KEEPTTL cannot be used together')

    return params


def parse_get(command):
    """GET key"""
    if len(command) != 2:
        raise WrongArityError('GET requires 1 argument')
    return KeyParams(command[1])


def parse_del(command):
    """DEL key [key ...]"""
    if len(command) < 2:
        raise WrongArityError('DEL requires at least 1 argument')
    return KeysParams(command[1:])


def parse_lpush(command):
    """LPUSH key value [value ...]"""
    if len(command) < 3:
        raise WrongArityError('LPUSH requires at least 2 arguments')
    return LPushParams(command[1], command[2:])


def parse_lpop(command):
    """LPOP key [count]"""
    if len(command) < 2:
        raise WrongArityError('LPOP requires at least 1 argument')
    if len(command) > 3:
        raise WrongArityError('LPOP cannot have more than 2 arguments')

    params = LPopParams(command[1])
    if len(command) == 3:
        params.count = _to_int(command[2], 'Invalid count argument')
    return params


def parse_lrange(command):
    """LRANGE key start stop"""
    if len(command) != 4:
        raise WrongArityError('LRANGE requires 3 arguments')

    start = _to_int(command[2], 'Invalid start or stop argument')
    stop = _to_int(command[3], 'Invalid start or stop argument')
    return LRangeParams(command[1], start, stop)


def parse_hset(command):
    """HSET key field value [field value ...]

    Duplicate fields are kept; the engine applies pairs in order so the last
    value wins.
    """
    if len(command) < 4 or len(command) % 2 != 0:
        raise WrongArityError('HSET requires field-value pairs')

    pairs = [(command[i], command[i + 1]) for i in range(2, len(command), 2)]
    return HSetParams(command[1], pairs)


def parse_hget(command):
    """HGET key field"""
    if len(command) != 3:
        raise WrongArityError('HGET requires 2 arguments')
    return HGetParams(command[1], command[2])


def parse_exists(command):
    """EXISTS key [key ...]"""
    if len(command) < 2:
        raise WrongArityError('EXISTS requires at least 1 argument')
    return KeysParams(command[1:])


def single_key(name):
    """
    Build a parser for a command taking exactly one key.

    Args:
        name: str - command name used in the arity message

    Returns:
        callable: parser returning KeyParams
    """
    def parse(command):
        if len(command) != 2:
            raise WrongArityError(f'{name} requires 1 argument')
        return KeyParams(command[1])

    parse.__name__ = f'parse_{name.lower()}'
    return parse


parse_type = single_key('TYPE')
parse_ttl = single_key('TTL')
parse_pttl = single_key('PTTL')
parse_persist = single_key('PERSIST')
