"""Command router for MiniRedis.

Provides the command dispatch table: each verb maps to a parser from
``miniredis.core.parser`` and a handler that applies the parsed parameters to
the storage engine. ``execute`` is the single place where command errors are
recovered and turned into replies.
"""

import logging

from miniredis.core import parser
from miniredis.core.response import render
from miniredis.exceptions import RedisError, UnknownCommandError
from miniredis.storage.datatypes import HashType, ListOperations

log = logging.getLogger(__name__)


class CommandInfo:
    """Metadata about a command.

    Attributes:
        name: Command name, uppercase
        parser: Callable(tokens) -> params
        handler: Callable(storage, params) -> result
        flags: Command flags (readonly, write)
    """
    __slots__ = ('name', 'parser', 'handler', 'flags')

    def __init__(self, name, parser, handler, flags=()):
        self.name = name
        self.parser = parser
        self.handler = handler
        self.flags = flags


class CommandRouter:
    """Command dispatch table for MiniRedis.

    Routes commands to parser and handler pairs. Uses dict for O(1) lookup.
    """
    __slots__ = ('_commands', '_storage')

    def __init__(self, storage):
        """Initialize router with storage engine.

        Args:
            storage: Storage engine instance
        """
        self._storage = storage
        self._commands = {}
        self._register_all_commands()

    def register(self, name, parser, handler, flags=()):
        """Register a command with the router.

        Args:
            name: Command name (any case)
            parser: Callable(tokens) -> params, raises RedisError
            handler: Callable(storage, params) -> result
            flags: Tuple of flag strings
        """
        name = name.upper()
        self._commands[name] = CommandInfo(name, parser, handler, flags)

    def get_command_info(self, name):
        """Get command metadata, or None for an unknown command."""
        return self._commands.get(name.upper())

    def get_commands(self):
        """Get all registered commands as a dict of name -> CommandInfo."""
        return self._commands.copy()

    def dispatch(self, tokens):
        """Parse and run one command.

        Args:
            tokens: list[str] - command name followed by its arguments

        Returns:
            Raw engine result (str, int, list or None)

        Raises:
            RedisError: on unknown command, bad arguments or wrong type
        """
        cmd_info = self._commands.get(tokens[0].upper())
        if cmd_info is None:
            raise UnknownCommandError(tokens[0])

        params = cmd_info.parser(tokens)
        log.debug('dispatch %s %r', cmd_info.name, params)
        return cmd_info.handler(self._storage, params)

    def execute(self, tokens):
        """Run one command and render its reply.

        Args:
            tokens: list[str] - command name followed by its arguments

        Returns:
            str: rendered reply, or the error message if the command failed
        """
        try:
            return render(self.dispatch(tokens))
        except RedisError as e:
            log.debug('%s failed: %s', tokens[0].upper(), e.message)
            return e.to_reply()

    def _register_all_commands(self):
        """Register every supported command."""
        # String commands
        self.register('SET', parser.parse_set, self._cmd_set, ('write',))
        self.register('GET', parser.parse_get, self._cmd_get, ('readonly',))

        # Key commands
        self.register('DEL', parser.parse_del, self._cmd_del, ('write',))
        self.register('EXISTS', parser.parse_exists, self._cmd_exists, ('readonly',))
        self.register('TYPE', parser.parse_type, self._cmd_type, ('readonly',))
        self.register('TTL', parser.parse_ttl, self._cmd_ttl, ('readonly',))
        self.register('PTTL', parser.parse_pttl, self._cmd_pttl, ('readonly',))
        self.register('PERSIST', parser.parse_persist, self._cmd_persist, ('write',))

        # List commands
        self.register('LPUSH', parser.parse_lpush, self._cmd_lpush, ('write',))
        self.register('LPOP', parser.parse_lpop, self._cmd_lpop, ('write',))
        self.register('LRANGE', parser.parse_lrange, self._cmd_lrange, ('readonly',))

        # Hash commands
        self.register('HSET', parser.parse_hset, self._cmd_hset, ('write',))
        self.register('HGET', parser.parse_hget, self._cmd_hget, ('readonly',))

    # String command handlers

    @staticmethod
    def _cmd_set(storage, params):
        """SET key value [NX|XX] [GET] [EX seconds|PX milliseconds] [KEEPTTL]"""
        return storage.set(
            params.key, params.value,
            nx=params.nx, xx=params.xx, get=params.get,
            ttl=params.ttl, keep_ttl=params.keep_ttl,
        )

    @staticmethod
    def _cmd_get(storage, params):
        return storage.get(params.key)

    # Key command handlers

    @staticmethod
    def _cmd_del(storage, params):
        return storage.delete(*params.keys)

    @staticmethod
    def _cmd_exists(storage, params):
        return storage.exists(*params.keys)

    @staticmethod
    def _cmd_type(storage, params):
        return storage.type(params.key)

    @staticmethod
    def _cmd_ttl(storage, params):
        return storage.ttl(params.key)

    @staticmethod
    def _cmd_pttl(storage, params):
        return storage.pttl(params.key)

    @staticmethod
    def _cmd_persist(storage, params):
        return storage.persist(params.key)

    # List command handlers

    @staticmethod
    def _cmd_lpush(storage, params):
        return ListOperations.lpush(storage, params.key, *params.values)

    @staticmethod
    def _cmd_lpop(storage, params):
        return ListOperations.lpop(storage, params.key, params.count)

    @staticmethod
    def _cmd_lrange(storage, params):
        return ListOperations.lrange(storage, params.key, params.start, params.stop)

    # Hash command handlers

    @staticmethod
    def _cmd_hset(storage, params):
        return HashType.hset(storage, params.key, *params.pairs)

    @staticmethod
    def _cmd_hget(storage, params):
        return HashType.hget(storage, params.key, params.field)
