"""
MiniRedis Main Entry Point

Interactive shell for the MiniRedis store: reads one command per line,
runs it through the command router and prints the reply.

Usage:
    python -m miniredis [--prompt PROMPT] [--no-banner] [--loglevel LEVEL]

    # Or embedded
    from miniredis.main import MiniRedisShell
    shell = MiniRedisShell()
    shell.handle_line('SET greeting hello')
"""

import argparse
import logging
import sys

from miniredis import __version__
from miniredis.config import Config
from miniredis.core.help import INSTRUCTIONS, COMMAND_DESCRIPTIONS
from miniredis.router import CommandRouter
from miniredis.storage.engine import Storage

log = logging.getLogger(__name__)


class MiniRedisShell:
    """
    Main MiniRedis shell implementation.

    Owns the storage engine for its whole lifetime; state is volatile and
    disappears with the shell.
    """

    __slots__ = (
        'storage',   # Storage: storage engine instance
        '_router',   # CommandRouter: command dispatch bound to storage
        '_config',   # Config: shell configuration
        '_stdin',    # text stream commands are read from
        '_stdout',   # text stream replies are written to
        '_running',  # bool: loop flag, cleared by EXIT
    )

    def __init__(self, config=None, storage=None, stdin=None, stdout=None):
        """
        Initialize MiniRedis shell.

        Args:
            config: dict | Config - Optional configuration overrides
            storage: Storage - Optional engine, a fresh one is created otherwise
            stdin: text stream to read commands from (default sys.stdin)
            stdout: text stream to write replies to (default sys.stdout)
        """
        self._config = config if isinstance(config, Config) else Config(config)
        self.storage = storage if storage is not None else Storage()
        self._router = CommandRouter(self.storage)
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._running = False

    def _print(self, text):
        print(text, file=self._stdout)

    def handle_line(self, line):
        """
        Process one input line.

        Args:
            line: str - raw command line

        Returns:
            bool: False if the shell should stop, True otherwise
        """
        tokens = line.split()
        if not tokens:
            return True

        verb = tokens[0].upper()

        if verb == 'EXIT':
            return False

        if verb == 'HELP':
            self._print(COMMAND_DESCRIPTIONS)
            return True

        reply = self._router.execute(tokens)
        if reply:
            self._print(reply)
        return True

    def run(self):
        """
        Run the read-eval-print loop until EXIT or end of input.
        """
        if self._config.get('banner'):
            self._print(INSTRUCTIONS)

        prompt = self._config.get('prompt')
        self._running = True
        log.info('MiniRedis %s shell started', __version__)

        while self._running:
            self._stdout.write(prompt)
            self._stdout.flush()

            line = self._stdin.readline()
            if not line:
                # End of input behaves like EXIT
                self._stdout.write('\n')
                break

            self._running = self.handle_line(line)

        self._running = False
        self._print('Exiting...')


def parse_args(argv=None):
    """Parse command-line options into a config dict."""
    parser = argparse.ArgumentParser(
        prog='miniredis',
        description='In-memory Redis-like key-value store shell',
    )
    parser.add_argument('--prompt', default=None, help="Prompt string (default '>> ')")
    parser.add_argument('--no-banner', dest='banner', action='store_false', default=None,
                        help='Do not print the command summary at start')
    parser.add_argument('--loglevel', default=None,
                        choices=['debug', 'info', 'warning', 'error'],
                        help='Logging level (default warning)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return vars(parser.parse_args(argv))


def run(argv=None):
    """
    Convenience function to configure logging and run the shell.

    Args:
        argv: list[str] | None - command-line arguments, sys.argv[1:] by default

    Returns:
        int: process exit status
    """
    config = Config(parse_args(argv))
    logging.basicConfig(
        level=config.log_level(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    shell = MiniRedisShell(config)
    try:
        shell.run()
    except KeyboardInterrupt:
        print('\nExiting...')
    return 0


if __name__ == '__main__':
    sys.exit(run())
