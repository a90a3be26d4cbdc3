"""
Test importing the public modules of the miniredis package.
"""


def test_core_exports():
    from miniredis.core import OK, NULL_REPLY, TTL_NOT_EXISTS, render

    assert OK == 'OK'
    assert NULL_REPLY == 'null'
    assert TTL_NOT_EXISTS == -2
    assert render(None) == 'null'


def test_package_version():
    import miniredis

    assert miniredis.__version__ == '1.0.0'


def test_datatypes_exports():
    from miniredis.storage.datatypes import HashType, ListOperations

    assert hasattr(ListOperations, 'lpush')
    assert hasattr(HashType, 'hset')
