from dataclasses import dataclass
from typing import Any, List


@dataclass(frozen=True)
class Setting:
    """Metadata for a configurable behaviour of generic object classes.

    The registry stores these entries so configuration validation and value
    resolution can operate without knowing where a setting is consumed.

    Attributes
    ----------
    key:
        The name used in the configuration mapping, either flat
        (``strict_args``) or scoped to a class (``Shape.strict_args``).
    expected_type:
        The Python type expected for the configuration value, or ``None``
        when no type checking should be performed.
    default:
        Value used when the configuration does not mention the setting.
    description:
        Short human readable summary.
    """

    key: str
    expected_type: type[Any] | None
    default: Any
    description: str = ''


_REGISTRY: dict[str, Setting] = {}


def register(entry: Setting) -> Setting:
    """Register a ``Setting`` entry in the global registry.

    Registering a second entry under the same key replaces the first.

    Parameters
    ----------
    entry:
        The ``Setting`` instance to register.

    Returns
    -------
    Setting
        ``entry`` itself, so registration can be used in an assignment.
    """

    _REGISTRY[entry.key] = entry
    return entry


def lookup(key: str) -> Setting:
    """Return the registered setting for ``key``.

    Raises
    ------
    KeyError
        If no setting is registered under ``key``.
    """

    return _REGISTRY[key]


def all_registered() -> List[Setting]:
    """Return a shallow copy of all registered settings.

    Returns
    -------
    List[Setting]
        The registered settings in registration order.
    """

    return list(_REGISTRY.values())
