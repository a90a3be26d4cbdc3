"""
Tests for the command router: dispatch, reply rendering and error recovery.
"""

import pytest

from miniredis.core.response import encode_value, render
from miniredis.exceptions import UnknownCommandError, WrongArityError


def run(router, line):
    return router.execute(line.split())


class TestDispatch:

    def test_every_command_registered(self, router):
        names = set(router.get_commands())
        assert names == {
            'SET', 'GET', 'DEL', 'EXISTS', 'TYPE', 'TTL', 'PTTL', 'PERSIST',
            'LPUSH', 'LPOP', 'LRANGE', 'HSET', 'HGET',
        }

    def test_command_info(self, router):
        info = router.get_command_info('lpush')
        assert info.name == 'LPUSH'
        assert 'write' in info.flags
        assert 'readonly' in router.get_command_info('GET').flags
        assert router.get_command_info('NOPE') is None

    def test_dispatch_returns_raw_result(self, router):
        assert router.dispatch(['LPUSH', 'k', 'a', 'b']) == 2
        assert router.dispatch(['lrange', 'k', '0', '-1']) == ['b', 'a']

    def test_dispatch_raises(self, router):
        with pytest.raises(UnknownCommandError):
            router.dispatch(['NOPE'])
        with pytest.raises(WrongArityError):
            router.dispatch(['GET'])


class TestExecute:

    def test_set_and_get(self, router, storage):
        assert run(router, 'SET key value') == 'OK'
        assert run(router, 'GET key') == 'value'
        assert storage.get('key') == 'value'

    def test_set_get_option(self, router, storage):
        assert run(router, 'SET key value1 GET') == 'null'
        assert run(router, 'SET key value2 GET') == 'value1'
        assert storage.get('key') == 'value2'

    def test_ex_expiry(self, router, clock):
        run(router, 'SET key value EX 1')
        clock.advance(2000)
        assert run(router, 'GET key') == 'null'

    def test_keepttl(self, router, clock):
        run(router, 'SET key value PX 4999')
        run(router, 'SET key value1 KEEPTTL')
        assert run(router, 'GET key') == 'value1'
        clock.advance(5000)
        assert run(router, 'GET key') == 'null'

    def test_unknown_command(self, router):
        assert run(router, 'INVALID') == 'Command not found'

    def test_parse_error_does_not_touch_store(self, router, storage):
        assert run(router, 'SET') == 'SET requires at least 2 arguments'
        assert run(router, 'SET k v NX XX') == 'NX and XX cannot be used together'
        assert len(storage) == 0

    def test_wrong_type_message(self, router, storage):
        run(router, 'SET key value')
        assert run(router, 'LPUSH key x') == 'Value is not a list'
        assert run(router, 'HSET key f v') == 'Value is not a hash'
        assert storage.get('key') == 'value'
        run(router, 'HSET h f v')
        assert run(router, 'GET h') == 'Value is not a string'

    def test_del(self, router):
        run(router, 'SET key1 value1')
        run(router, 'SET key2 value2')
        assert run(router, 'DEL key1 key2 key3') == '2'
        assert run(router, 'DEL key1') == '0'

    def test_list_replies(self, router):
        assert run(router, 'LPUSH key value1 value2 value3') == '3'
        assert run(router, 'LRANGE key 0 2') == '1) value3\n2) value2\n3) value1'
        assert run(router, 'LRANGE key 1 0') == ''
        assert run(router, 'LPOP key') == '1) value3'
        assert run(router, 'LPOP key 5') == '1) value2\n2) value1'
        assert run(router, 'LPOP key') == 'null'

    def test_lrange_invalid_index(self, router):
        run(router, 'LPUSH key a')
        assert run(router, 'LRANGE key a 1') == 'Invalid start or stop argument'

    def test_hash_replies(self, router):
        assert run(router, 'HSET key field1 value1 field2 value2') == '2'
        assert run(router, 'HSET key field1 value3') == '0'
        assert run(router, 'HGET key field1') == 'value3'
        assert run(router, 'HGET key nope') == 'null'

    def test_key_commands(self, router, clock):
        run(router, 'SET s v PX 1500')
        run(router, 'LPUSH l a')
        assert run(router, 'EXISTS s l s missing') == '3'
        assert run(router, 'TYPE l') == 'list'
        assert run(router, 'TYPE missing') == 'none'
        assert run(router, 'PTTL s') == '1500'
        assert run(router, 'TTL s') == '1'
        assert run(router, 'TTL l') == '-1'
        assert run(router, 'PERSIST s') == '1'
        clock.advance(2000)
        assert run(router, 'GET s') == 'v'

    def test_verbs_are_case_insensitive(self, router):
        assert run(router, 'set k v') == 'OK'
        assert run(router, 'gEt k') == 'v'


class TestRender:

    def test_null(self):
        assert encode_value(None) == ['null']

    def test_scalar(self):
        assert encode_value(3) == ['3']
        assert render('OK') == 'OK'

    def test_sequence(self):
        assert encode_value(['a', 'b']) == ['1) a', '2) b']

    def test_empty_sequence(self):
        assert encode_value([]) == []
        assert render([]) == ''
