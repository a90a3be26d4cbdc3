"""
Text shown by the shell: the start-up banner and the HELP command.
"""

INSTRUCTIONS = """
Welcome to MiniRedis.

Commands:
SET key value [NX|XX] [GET] [EX seconds | PX milliseconds | KEEPTTL]
GET key
DEL key [key ...]
LPUSH key value [value ...]
LPOP key [count]
LRANGE key start stop
HSET key field value [field value ...]
HGET key field
EXISTS key [key ...]
TYPE key
TTL key
PTTL key
PERSIST key

Type 'HELP' to see more details about command options.
"""

COMMAND_DESCRIPTIONS = """
Redis Commands:
SET key value [NX|XX] [GET] [EX seconds | PX milliseconds | KEEPTTL]
    Description: Set the string value of a key.
    Returns: OK if successful, or the previous value if GET.
    Options:
        - NX: Only set the key if it does not already exist.
        - XX: Only set the key if it already exists.
        - GET: Return the previous string value of the key.
        - EX seconds: Set the specified expire time, in seconds.
        - PX milliseconds: Set the specified expire time, in milliseconds.
        - KEEPTTL: Retain the time to live already associated with the key.
GET key
    Description: Get the string value of a key.
    Returns: The value of the key or null if it doesn't exist.
DEL key [key ...]
    Description: Delete all specified keys.
    Returns: Number of removed keys.
LPUSH key value [value ...]
    Description: Insert all the specified values at the head of the list stored at key.
    Returns: The length of the list after the push operation.
LPOP key [count]
    Description: Remove and return the first [count] (defaults to 1) elements.
    Returns: The removed elements, or null if none were removed.
LRANGE key start stop
    Description: Get a range of elements from a list, negative indices count from the tail.
    Returns: A list of elements in the specified range, inclusive of stop.
HSET key field value [field value ...]
    Description: Set the string value of one or more hash fields.
    Returns: Number of fields that were newly created.
HGET key field
    Description: Get the value of a hash field.
    Returns: The value of the field, or null when the field does not exist.
EXISTS key [key ...]
    Description: Count how many of the given keys exist.
TYPE key
    Description: Get the type of the value stored at key (string, list, hash or none).
TTL key / PTTL key
    Description: Remaining time to live in seconds / milliseconds.
    Returns: -2 if the key does not exist, -1 if it has no expiration.
PERSIST key
    Description: Remove the expiration from a key.
    Returns: 1 if the expiration was removed, otherwise 0.

CLI Commands:
HELP - Show this help message.
EXIT - Exit the CLI. Warning: Data will not persist.
"""
