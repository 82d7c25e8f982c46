from logging import getLogger
from threading import RLock
from typing import Iterable

_logger = getLogger(__name__)


class AllowListRegistry:
    """Process-wide mapping of classes to the key names their accessors may use.

    A class without an entry is open: every key is allowed. The first
    declaration closes the class to the declared keys, and later declarations
    add to the set. Entries are keyed by the class object itself, so a
    subclass never shares an entry with its base and two classes with the
    same name stay independent.

    The registry starts empty and lives for the whole process. All mutation
    goes through :meth:`declare`.
    """

    _allowed: dict[type, set[str]]

    def __init__(self) -> None:
        self._allowed = {}
        self._lock = RLock()

    def __contains__(self, owner: object) -> bool:
        return owner in self._allowed

    def declare(self, owner: type, keys: Iterable[str]) -> None:
        """Add ``keys`` to the allow-list of ``owner``.

        Declaring no keys leaves an open class open.

        Parameters
        ----------
        owner:
            The class the keys are declared for.
        keys:
            Key names to allow.
        """
        keys = list(keys)
        if not keys:
            return

        with self._lock:
            self._allowed.setdefault(owner, set()).update(keys)

        _logger.info('Allowed keys for %s: %s', owner.__qualname__, ', '.join(map(str, keys)))

    def is_allowed(self, owner: type, key: str) -> bool:
        allowed = self._allowed.get(owner)
        return allowed is None or key in allowed

    def allowed_keys(self, owner: type) -> frozenset[str] | None:
        """Return a frozen copy of the keys declared for ``owner``.

        Returns ``None`` when the class has no entry and therefore allows
        every key.
        """
        with self._lock:
            allowed = self._allowed.get(owner)
            return None if allowed is None else frozenset(allowed)
