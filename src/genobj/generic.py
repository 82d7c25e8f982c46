import warnings
from logging import getLogger
from typing import Any, Iterable

from genobj import accessor
from genobj.accessor import classonlymethod, instancemethod
from genobj.config.settings import PURGE_ON_DECLARE, STRICT_ARGS
from genobj.config.validation import resolve_setting
from genobj.container import get_registry
from genobj.sentinel import false

_logger = getLogger(__name__)


class GenericType(type):
    """Metaclass answering undefined class-level names with `false`.

    Accessors are only synthesized for instances, so ``Shape.color()`` on a
    class that never defined ``color`` yields `false` instead of raising.
    """

    def __getattr__(cls, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(f"type object '{cls.__name__}' has no attribute '{name}'")
        _logger.debug('Class-level access to %s.%s', cls.__qualname__, name)
        return false


class GenericObject(metaclass=GenericType):
    """
    Open key/value container with accessors synthesized on first use.

    Values are stored per instance under string keys and can be reached in
    three equivalent ways::

        thing = GenericObject(color='red')

        thing.get('color')        thing.set('color', 'blue')
        thing.get_color()         thing.set_color('blue')
        thing.color()             thing.color('blue')

    Any method name the class does not define is read as a key: ``set_<key>``
    writes, ``get_<key>`` reads, and a bare ``<key>`` reads when called
    without an argument and writes when called with one. The accessor is
    installed on the class the first time the name is used, so later calls
    skip interception altogether.

    Subclasses may restrict the keys their accessors accept with
    :meth:`declare_allowed` or the ``allowed_keys`` class keyword. A class
    without a declaration accepts every key. Rejected and missing accesses
    return `false` rather than raising, and `false` itself accepts any further
    chained access.

    Parameters
    ----------
    *pairs : Any
        Alternating keys and values, stored with :meth:`args`.
    **kwargs : Any
        Further key/value pairs, stored after ``pairs``.

    Notes
    -----
    - :meth:`get` and :meth:`set` are the only methods touching storage.
      A subclass can change the storage by overriding them together with
      :meth:`exists` and :meth:`keys`.
    - Construction and :meth:`set` are not filtered by the allow-list; only
      the synthesized accessors and attribute assignment are.
    - Names starting with an underscore are never treated as keys.
    - Keys are read by calling: ``obj.color`` is the accessor and
      ``obj.color()`` the value. Chains through missing keys use the call
      form, ``obj.owner().address().city()``. An allowed but unset key
      gives a bound accessor on attribute access, so ``obj.owner.address``
      raises; a rejected key gives `false` either way.
    - Attribute assignment is classified like a method name:
      ``obj.color = 'red'`` and ``obj.set_color = 'red'`` both store
      ``color``, while assigning to ``obj.get_color`` raises
      ``AttributeError``.
    - ``copy.copy`` gives the copy its own storage.

    Examples
    --------
    >>> class Shape(GenericObject, allowed_keys=('color', 'height')):
    ...     pass
    >>> shape = Shape(color='green')
    >>> shape.set_country('usa')
    false
    >>> shape.exists('country')
    False
    >>> bool(shape.country().language())
    False
    """

    _values: dict[str, Any]

    def __init_subclass__(cls, allowed_keys: Iterable[str] | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if isinstance(allowed_keys, str):
            allowed_keys = (allowed_keys,)
        if allowed_keys is not None:
            cls.declare_allowed(*allowed_keys)

    def __init__(self, /, *pairs: Any, **kwargs: Any) -> None:
        # Bypass __setattr__, which routes public names to keys.
        object.__setattr__(self, '_values', {})
        self.args(*pairs, **kwargs)

    def __copy__(self) -> 'GenericObject':
        dup = type(self).__new__(type(self))
        for name, value in vars(self).items():
            object.__setattr__(dup, name, value)
        object.__setattr__(dup, '_values', dict(self._values))
        return dup

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

        # A class attribute raising AttributeError from its getter must not
        # be shadowed by a key accessor.
        if _defined_on_class(type(self), name):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

        return accessor.resolve(self, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith('_') or _defined_on_class(type(self), name):
            object.__setattr__(self, name, value)
            return

        kind, key = accessor.classify(name)
        if kind is accessor.AccessorKind.GETTER:
            raise AttributeError(f"'{name}' is a read accessor and cannot be assigned")
        if not self.is_key_allowed(key):
            raise AttributeError(f"'{type(self).__name__}' does not allow key '{key}'")
        self.set(key, value)

    def __repr__(self) -> str:
        pairs = ', '.join(f'{key}={self.get(key)!r}' for key in self.keys())
        return f'{type(self).__name__}({pairs})'

    def __dir__(self) -> Iterable[str]:
        names = set(super().__dir__())
        names.update(key for key in self.keys() if isinstance(key, str) and key.isidentifier())
        return sorted(names)

    @instancemethod
    def get(self, key: str) -> Any:
        """Return the value stored under ``key``, or `false` if it was never set."""
        if not self.exists(key):
            return false
        return self._values[key]

    @instancemethod
    def set(self, key: str, value: Any) -> Any:
        """Store ``value`` under ``key`` and return it."""
        self._values[key] = value
        return value

    @instancemethod
    def exists(self, key: str) -> bool:
        return key in self._values

    @instancemethod
    def keys(self) -> list[str]:
        return list(self._values)

    @instancemethod
    def args(self, /, *pairs: Any, **kwargs: Any) -> 'GenericObject':
        """Store alternating key/value ``pairs`` and then ``kwargs``.

        With an odd number of ``pairs`` the last key is stored with value
        ``None`` and a ``RuntimeWarning`` is issued, unless the
        ``strict_args`` setting is enabled, in which case ``ValueError`` is
        raised and nothing is stored.

        Returns
        -------
        GenericObject
            The instance itself, for chaining.
        """
        if len(pairs) % 2:
            message = f'Odd number of items passed to {type(self).__name__}.args(): {len(pairs)}'
            if resolve_setting(STRICT_ARGS.key, type(self)):
                raise ValueError(message)
            warnings.warn(message, RuntimeWarning, stacklevel=2)
            pairs = (*pairs, None)

        for key, value in zip(pairs[::2], pairs[1::2]):
            self.set(key, value)
        for key, value in kwargs.items():
            self.set(key, value)
        return self

    @classonlymethod
    def declare_allowed(cls, *keys: str) -> bool:
        """Allow ``keys`` for the accessors of this class.

        Declarations accumulate. The first one closes the class to the
        declared keys; subclasses keep their own, independent lists. When the
        ``purge_on_declare`` setting is enabled for the class, accessors
        already synthesized for keys that are no longer allowed are removed.

        Returns
        -------
        bool
            ``True`` when called on a class. Called through an instance it
            does nothing and returns ``False``.
        """
        get_registry().declare(cls, keys)
        if resolve_setting(PURGE_ON_DECLARE.key, cls):
            accessor.purge(cls, cls.is_key_allowed)
        return True

    @classmethod
    def is_key_allowed(cls, key: str) -> bool:
        return get_registry().is_allowed(cls, key)

    @classmethod
    def allowed_keys(cls) -> frozenset[str] | None:
        """Return the declared keys of this class, or ``None`` when it is open."""
        return get_registry().allowed_keys(cls)


def _defined_on_class(owner: type, name: str) -> bool:
    return any(
        name in klass.__dict__ and not isinstance(klass.__dict__[name], accessor.Accessor)
        for klass in owner.__mro__
    )
