"""
MiniRedis Exceptions Module

Defines the exception hierarchy for MiniRedis error handling.
Every error carries a human-readable message that the shell prints verbatim.
"""


class RedisError(Exception):
    """
    Base exception for all MiniRedis errors.

    Attributes:
        message: str - Message shown to the operator
    """

    default_message = 'Unknown error'

    def __init__(self, message=None):
        """
        Initialize error.

        Args:
            message: str - Error message, defaults to the class default
        """
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_reply(self):
        """
        Convert to the reply printed by the shell.

        Returns:
            str: the error message
        """
        return self.message


class WrongArityError(RedisError):
    """
    Raised when a command has the wrong number of arguments.

    Example: GET with no key, LRANGE with two arguments.
    """

    default_message = 'wrong number of arguments'


class InvalidArgumentError(RedisError):
    """
    Raised when an argument cannot be parsed (non-numeric count, unknown flag).
    """

    default_message = 'invalid argument'


class MutuallyExclusiveError(RedisError):
    """
    Raised when two flags that cannot be combined are both given.

    Example: SET key value NX XX.
    """

    default_message = 'conflicting options'


class WrongTypeError(RedisError):
    """
    Raised when a command is executed against a key of the wrong type.

    Example: GET on a hash key, LPUSH on a string key.
    """

    def __init__(self, expected):
        self.expected = expected
        super().__init__(f'Value is not a {expected}')


class UnknownCommandError(RedisError):
    """
    Raised when an unknown command is received.
    """

    default_message = 'Command not found'

    def __init__(self, command_name):
        self.command_name = command_name
        super().__init__()
