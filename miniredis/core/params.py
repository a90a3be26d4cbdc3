"""
Parameter shapes produced by the command parser and consumed by the router.

Each class is a plain record; equality compares every slot so parsed
commands can be checked directly in tests.
"""


class Params:
    """Base record with slot-wise equality and repr."""

    __slots__ = ()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __repr__(self):
        fields = ', '.join(f'{name}={getattr(self, name)!r}' for name in self.__slots__)
        return f'{type(self).__name__}({fields})'


class SetParams(Params):
    """SET key value [NX|XX] [GET] [EX seconds|PX milliseconds] [KEEPTTL]

    Attributes:
        ttl: int | None - expiration in milliseconds (EX is converted)
    """
    __slots__ = ('key', 'value', 'nx', 'xx', 'get', 'ttl', 'keep_ttl')

    def __init__(self, key, value, nx=False, xx=False, get=False, ttl=None, keep_ttl=False):
        self.key = key
        self.value = value
        self.nx = nx
        self.xx = xx
        self.get = get
        self.ttl = ttl
        self.keep_ttl = keep_ttl


class KeyParams(Params):
    """Single-key commands: GET, TYPE, TTL, PTTL, PERSIST."""
    __slots__ = ('key',)

    def __init__(self, key):
        self.key = key


class KeysParams(Params):
    """Multi-key commands: DEL, EXISTS. Duplicates are preserved."""
    __slots__ = ('keys',)

    def __init__(self, keys):
        self.keys = keys


class LPushParams(Params):
    __slots__ = ('key', 'values')

    def __init__(self, key, values):
        self.key = key
        self.values = values


class LPopParams(Params):
    __slots__ = ('key', 'count')

    def __init__(self, key, count=1):
        self.key = key
        self.count = count


class LRangeParams(Params):
    __slots__ = ('key', 'start', 'stop')

    def __init__(self, key, start, stop):
        self.key = key
        self.start = start
        self.stop = stop


class HSetParams(Params):
    """HSET key field value [field value ...]

    Attributes:
        pairs: list[tuple[str, str]] - field/value pairs in input order
    """
    __slots__ = ('key', 'pairs')

    def __init__(self, key, pairs):
        self.key = key
        self.pairs = pairs


class HGetParams(Params):
    __slots__ = ('key', 'field')

    def __init__(self, key, field):
        self.key = key
        self.field = field
