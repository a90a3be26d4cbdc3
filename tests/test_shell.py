"""
Tests for the interactive shell and its command-line options.
"""

import io
import logging

from miniredis.config import Config
from miniredis.core.help import COMMAND_DESCRIPTIONS, INSTRUCTIONS
from miniredis.main import MiniRedisShell, parse_args


def make_shell(commands, **config):
    stdin = io.StringIO(''.join(line + '\n' for line in commands))
    stdout = io.StringIO()
    shell = MiniRedisShell(config or None, stdin=stdin, stdout=stdout)
    return shell, stdout


class TestShell:

    def test_session(self):
        shell, out = make_shell(['SET greeting hello', 'GET greeting', 'EXIT'], banner=False)
        shell.run()
        lines = out.getvalue().splitlines()
        assert lines == ['>> OK', '>> hello', '>> Exiting...']

    def test_banner(self):
        shell, out = make_shell(['EXIT'])
        shell.run()
        assert INSTRUCTIONS in out.getvalue()

    def test_custom_prompt(self):
        shell, out = make_shell(['EXIT'], banner=False, prompt='$ ')
        shell.run()
        assert out.getvalue() == '$ Exiting...\n'

    def test_end_of_input_exits(self):
        shell, out = make_shell(['SET k v'], banner=False)
        shell.run()
        assert out.getvalue().endswith('Exiting...\n')

    def test_commands_after_exit_are_ignored(self):
        shell, out = make_shell(['EXIT', 'SET k v'], banner=False)
        shell.run()
        assert shell.storage.get('k') is None

    def test_help(self, capsys):
        shell = MiniRedisShell({'banner': False})
        assert shell.handle_line('help') is True
        assert COMMAND_DESCRIPTIONS in capsys.readouterr().out

    def test_blank_line(self, capsys):
        shell = MiniRedisShell()
        assert shell.handle_line('   ') is True
        assert capsys.readouterr().out == ''

    def test_errors_do_not_stop_the_shell(self, capsys):
        shell = MiniRedisShell()
        assert shell.handle_line('INVALID') is True
        assert shell.handle_line('GET') is True
        assert shell.handle_line('SET k v') is True
        out = capsys.readouterr().out.splitlines()
        assert out == ['Command not found', 'GET requires 1 argument', 'OK']

    def test_empty_range_prints_nothing(self, capsys):
        shell = MiniRedisShell()
        shell.handle_line('LPUSH k a b c')
        capsys.readouterr()
        shell.handle_line('LRANGE k 3 4')
        assert capsys.readouterr().out == ''

    def test_exit_is_case_insensitive(self):
        shell = MiniRedisShell()
        assert shell.handle_line('exit') is False


class TestOptions:

    def test_defaults(self):
        config = Config(parse_args([]))
        assert config.get('prompt') == '>> '
        assert config.get('banner') is True
        assert config.log_level() == logging.WARNING

    def test_overrides(self):
        config = Config(parse_args(['--prompt', '> ', '--no-banner', '--loglevel', 'debug']))
        assert config.get('prompt') == '> '
        assert config.get('banner') is False
        assert config.log_level() == logging.DEBUG

    def test_unknown_keys_ignored(self):
        config = Config({'port': 6379})
        assert 'port' not in config.get_all()
        assert config.set('port', 1) is False
        assert config.set('prompt', '# ') is True
        assert config.get('prompt') == '# '
