from typing import Any, Iterator


class FalseType:
    """
    Shared, immutable value standing in for a missing or rejected access.

    There is exactly one instance, exported as `false`. It is false in a
    boolean context and it answers every attribute lookup, call and
    subscript with itself, so a chain such as ``obj.owner().address().city()``
    degrades to `false` at the first missing link instead of raising.

    Notes
    -----
    - Names starting with an underscore are not intercepted, the same rule
      generic objects follow, so missing protocol methods still raise
      `AttributeError` and `copy`, `pickle` and friends behave normally.
    - Copying or unpickling returns the singleton itself.

    Examples
    --------
    >>> bool(false)
    False
    >>> false.anything().anything_else is false
    True
    """

    __slots__ = ()

    _instance: 'FalseType | None' = None

    def __new__(cls) -> 'FalseType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __getattr__(self, name: str) -> 'FalseType':
        if name.startswith('_'):
            raise AttributeError(name)
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError('false is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError('false is immutable')

    def __call__(self, *args: Any, **kwargs: Any) -> 'FalseType':
        return self

    def __getitem__(self, key: Any) -> 'FalseType':
        return self

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __contains__(self, item: Any) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return other is self

    def __ne__(self, other: object) -> bool:
        return other is not self

    # Ordering against anything is simply not true.
    def __lt__(self, other: object) -> bool:
        return False

    def __le__(self, other: object) -> bool:
        return False

    def __gt__(self, other: object) -> bool:
        return False

    def __ge__(self, other: object) -> bool:
        return False

    def __hash__(self) -> int:
        return hash(FalseType)

    def __repr__(self) -> str:
        return 'false'

    def __str__(self) -> str:
        return ''

    def __copy__(self) -> 'FalseType':
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> 'FalseType':
        return self

    def __reduce__(self) -> str:
        # Pickled by reference to the module-level name.
        return 'false'


false = FalseType()


def is_false(value: Any) -> bool:
    """Return True when `value` is the shared `false` sentinel."""
    return value is false
