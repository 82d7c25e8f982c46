import pytest

from genobj.config.registry import Setting, all_registered, lookup, register


def test_builtin_settings_are_registered():
    keys = {entry.key for entry in all_registered()}
    assert {'purge_on_declare', 'strict_args'} <= keys
    assert lookup('strict_args').default is False
    assert lookup('purge_on_declare').expected_type is bool


def test_register_returns_entry_and_replaces_same_key():
    entry = register(Setting('test_only', int, 1))
    try:
        assert entry is lookup('test_only')

        replacement = register(Setting('test_only', int, 2))
        assert lookup('test_only') is replacement
        assert sum(1 for e in all_registered() if e.key == 'test_only') == 1
    finally:
        import genobj.config.registry as registry

        registry._REGISTRY.pop('test_only', None)  # pyright: ignore[reportPrivateUsage]


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup('nope')
