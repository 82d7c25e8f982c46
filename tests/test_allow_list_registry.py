import threading

from genobj import AllowListRegistry, get_registry
from genobj.container import container


class A:
    pass


class B(A):
    pass


def test_open_by_default():
    registry = AllowListRegistry()
    assert A not in registry
    assert registry.is_allowed(A, 'anything')
    assert registry.allowed_keys(A) is None


def test_declare_closes_and_accumulates():
    registry = AllowListRegistry()
    registry.declare(A, ['color'])
    assert A in registry
    assert registry.is_allowed(A, 'color')
    assert not registry.is_allowed(A, 'height')

    registry.declare(A, ('height',))
    assert registry.allowed_keys(A) == frozenset({'color', 'height'})


def test_entries_are_per_class():
    registry = AllowListRegistry()
    registry.declare(B, ['color'])
    assert registry.is_allowed(A, 'weight')
    assert not registry.is_allowed(B, 'weight')


def test_same_name_classes_are_independent():
    first = type('Thing', (), {})
    second = type('Thing', (), {})
    registry = AllowListRegistry()
    registry.declare(first, ['color'])
    assert not registry.is_allowed(first, 'size')
    assert registry.is_allowed(second, 'size')


def test_empty_declaration_keeps_class_open():
    registry = AllowListRegistry()
    registry.declare(A, [])
    assert A not in registry
    assert registry.is_allowed(A, 'anything')


def test_allowed_keys_is_a_copy():
    registry = AllowListRegistry()
    registry.declare(A, ['color'])
    keys = registry.allowed_keys(A)
    registry.declare(A, ['height'])
    assert keys == frozenset({'color'})


def test_concurrent_declarations_are_all_kept():
    registry = AllowListRegistry()
    keys = [f'key{i}' for i in range(200)]

    def declare(chunk: list[str]) -> None:
        for key in chunk:
            registry.declare(A, [key])

    threads = [threading.Thread(target=declare, args=(keys[i::4],)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert registry.allowed_keys(A) == frozenset(keys)


def test_container_provides_one_registry_until_reset():
    registry = get_registry()
    assert get_registry() is registry

    container.registry.reset()
    assert get_registry() is not registry


def test_container_provider_can_be_overridden():
    custom = AllowListRegistry()
    with container.registry.override(custom):
        assert get_registry() is custom
    assert get_registry() is not custom
