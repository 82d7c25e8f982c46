"""Synthesis of ``get_<key>``, ``set_<key>`` and ``<key>`` accessors on first use."""

from enum import Enum
from functools import partial
from logging import getLogger
from threading import RLock
from types import MethodType
from typing import Any, Callable, Generic, TypeVar, overload

from genobj.sentinel import FalseType, false

_logger = getLogger(__name__)

# Guards the check-then-install of accessors on a class.
_SYNTHESIS_LOCK = RLock()


class AccessorKind(Enum):
    SETTER = 'set'
    GETTER = 'get'
    COMBINED = 'combined'


def classify(name: str) -> tuple[AccessorKind, str]:
    """Split a method name into its access pattern and key.

    >>> classify('set_color')
    (<AccessorKind.SETTER: 'set'>, 'color')
    >>> classify('color')
    (<AccessorKind.COMBINED: 'combined'>, 'color')
    """
    if name.startswith('set_'):
        return AccessorKind.SETTER, name[4:]
    if name.startswith('get_'):
        return AccessorKind.GETTER, name[4:]
    return AccessorKind.COMBINED, name


def build_accessor(kind: AccessorKind, key: str) -> Callable[..., Any]:
    """Return the plain function implementing ``kind`` for ``key``.

    The functions only talk to storage through ``self.get`` and ``self.set``.
    Surplus positional arguments are ignored.
    """
    if kind is AccessorKind.SETTER:

        def accessor(self: Any, *args: Any) -> Any:
            if not args:
                return false
            self.set(key, args[0])
            return args[0]

    elif kind is AccessorKind.GETTER:

        def accessor(self: Any, *args: Any) -> Any:
            return self.get(key)

    else:

        def accessor(self: Any, *args: Any) -> Any:
            if args:
                self.set(key, args[0])
                return args[0]
            return self.get(key)

    accessor.__doc__ = f'{kind.value} accessor for key {key!r}'
    return accessor


class Accessor:
    """Descriptor holding one synthesized accessor of one class.

    Installed on the class under the method name that triggered synthesis,
    after which ordinary attribute lookup finds it and interception is no
    longer involved. Looked up on the class itself it yields `false`.
    Looked up through an instance of a subclass it does not apply: the
    subclass goes through its own allow-list check and receives its own
    accessor.
    """

    def __init__(self, owner: type, name: str, kind: AccessorKind, key: str) -> None:
        self.owner = owner
        self.name = name
        self.kind = kind
        self.key = key
        self.func = build_accessor(kind, key)
        self.func.__name__ = name
        self.func.__qualname__ = f'{owner.__qualname__}.{name}'

    def __repr__(self) -> str:
        return f'<Accessor {self.owner.__qualname__}.{self.name} ({self.kind.value} {self.key!r})>'

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> FalseType: ...
    @overload
    def __get__(self, instance: object, owner: type | None = None) -> Any: ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return false
        if type(instance) is not self.owner:
            return resolve(instance, self.name)
        return MethodType(self.func, instance)


def resolve(instance: Any, name: str) -> Any:
    """Resolve an undefined method name on ``instance``.

    Returns the bound accessor, synthesizing and installing it on the
    instance's class first if needed, or `false` when the class does not
    allow the key. Nothing is installed for a rejected key.
    """
    owner = type(instance)
    kind, key = classify(name)
    if not owner.is_key_allowed(key):
        _logger.debug('Key %r is not allowed for %s', key, owner.__qualname__)
        return false

    with _SYNTHESIS_LOCK:
        accessor = owner.__dict__.get(name)
        if not isinstance(accessor, Accessor):
            accessor = Accessor(owner, name, kind, key)
            setattr(owner, name, accessor)
            _logger.debug('Synthesized %s', accessor)

    return MethodType(accessor.func, instance)


def synthesized(owner: type) -> dict[str, Accessor]:
    """Return the accessors synthesized on ``owner`` itself."""
    return {name: attr for name, attr in vars(owner).items() if isinstance(attr, Accessor)}


def purge(owner: type, keep: Callable[[str], bool]) -> list[str]:
    """Remove the accessors of ``owner`` whose key ``keep`` rejects.

    Returns the removed method names.
    """
    removed: list[str] = []
    with _SYNTHESIS_LOCK:
        for name, accessor in synthesized(owner).items():
            if not keep(accessor.key):
                delattr(owner, name)
                removed.append(name)

    if removed:
        _logger.info('Purged accessors of %s: %s', owner.__qualname__, ', '.join(removed))
    return removed


F = TypeVar('F', bound=Callable[..., Any])


class instancemethod(Generic[F]):
    """Method decorator that answers class-level lookups with `false`.

    >>> class Thing:
    ...     @instancemethod
    ...     def size(self):
    ...         return 3
    >>> Thing().size()
    3
    >>> Thing.size() is false
    True
    """

    def __init__(self, func: F) -> None:
        self.__func__ = func
        self.__doc__ = func.__doc__
        self.__name__ = func.__name__

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return false
        return MethodType(self.__func__, instance)


class classonlymethod(Generic[F]):
    """Method decorator for class-level operations.

    Bound to the class when looked up on the class. Looked up through an
    instance it returns a callable answering ``False`` without running the
    wrapped function.
    """

    def __init__(self, func: F) -> None:
        self.__func__ = func
        self.__doc__ = func.__doc__
        self.__name__ = func.__name__

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is not None:
            return partial(_reject_instance_call, type(instance), self.__name__)
        return MethodType(self.__func__, owner)


def _reject_instance_call(owner: type, name: str, *args: Any, **kwargs: Any) -> bool:
    _logger.warning('%s.%s() must be called on the class, not on an instance', owner.__qualname__, name)
    return False
