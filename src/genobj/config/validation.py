from typing import Any, Mapping
from types import MappingProxyType

from genobj.config.registry import Setting, all_registered, lookup

_CONFIG_CONTEXT: dict[str, Any] = {}


class ConfigValidationError(Exception):
    """Raised when configuration validation fails.

    This exception is raised by :func:`ensure_valid_config` when one or more
    registered settings are present in the provided mapping with a value of
    the wrong type.
    """


def bind_config_values(**kwargs: Any) -> None:
    """Bind configuration values for later setting resolution.

    The values are merged into the global configuration context that
    :func:`resolve_config_value` and :func:`resolve_setting` read from.
    Keys already bound are overwritten.
    """
    _CONFIG_CONTEXT.update(kwargs)


def get_config() -> Mapping[str, Any]:
    """Return a read-only view of the currently bound configuration."""
    return MappingProxyType(_CONFIG_CONTEXT)


def resolve_config_value(
    *, config: Mapping[str, Any] | None = None, key: str, collection_name: str | None = None
) -> Any:
    """Resolve a configuration value using string-based precedence.

    When looking up a value the function tries keys in this order (first
    match wins):

    - ``{collection}.{key}`` as a flat key
    - ``{collection}`` as a nested mapping containing ``key``
    - ``{key}``

    Parameters
    ----------
    config:
        The mapping to search. Defaults to the bound configuration.
    key:
        The setting name, possibly dotted.
    collection_name:
        Optional scope, usually a class name.

    Returns
    -------
    Any
        The first matching value found in ``config``.

    Raises
    ------
    KeyError
        If none of the candidate keys are present in ``config``.
    """
    if config is None:
        config = get_config()

    if collection_name:
        try:
            flat_key = f'{collection_name}.{key}'
            return resolve_config_value(config=config, key=flat_key)
        except KeyError:
            pass

    # Flat keys > nested keys
    if key in config:
        return config[key]

    parts = key.split('.', maxsplit=1)
    if len(parts) == 2:
        collection, restkey = parts
        section = config.get(collection)
        if isinstance(section, Mapping):
            return resolve_config_value(config=section, key=restkey)  # pyright: ignore[reportUnknownArgumentType]

    raise KeyError(f'No config value for {key}')


def resolve_setting(key: str, owner: type | None = None, config: Mapping[str, Any] | None = None) -> Any:
    """Resolve a registered setting for a generic object class.

    Class scoped values are searched along ``owner.__mro__``, most derived
    class first, before the flat key. When the configuration does not
    mention the setting at all, the registered default is returned.

    Scopes are class ``__name__`` strings, so two classes with the same
    name in different modules share their class-scoped settings.
    """
    if config is None:
        config = get_config()

    setting = lookup(key)
    scopes = [klass.__name__ for klass in owner.__mro__[:-1]] if owner is not None else []
    for scope in scopes:
        try:
            return resolve_config_value(config=config, key=f'{scope}.{key}')
        except KeyError:
            continue

    try:
        return resolve_config_value(config=config, key=key)
    except KeyError:
        return setting.default


def ensure_valid_config(config: Mapping[str, Any] | None = None) -> None:
    """Validate a configuration mapping against the registered settings.

    Every registered :class:`~genobj.config.registry.Setting` is looked up
    as a flat key and inside every class section (a nested mapping or a
    ``{Class}.{key}`` flat key). Values of the wrong type are accumulated,
    and a :class:`ConfigValidationError` is raised when any were found.
    Settings the configuration does not mention are fine; they fall back to
    their defaults.

    Raises
    ------
    ConfigValidationError
        When a registered setting has a value of the wrong type.
    """
    if config is None:
        config = get_config()

    errors: list[str] = []

    for entry in all_registered():
        for location, value in _find_values(config, entry):
            if entry.expected_type and not isinstance(value, entry.expected_type):
                errors.append(
                    f'Type mismatch for {location}: '
                    f'expected {entry.expected_type.__name__}, '
                    f'got {type(value).__name__}'
                )

    if errors:
        raise ConfigValidationError('Configuration validation failed:\n' + '\n'.join(errors))


def _find_values(config: Mapping[str, Any], entry: Setting) -> list[tuple[str, Any]]:
    found: list[tuple[str, Any]] = []
    for name, value in config.items():
        if name == entry.key or name.endswith(f'.{entry.key}'):
            found.append((name, value))
        elif isinstance(value, Mapping) and entry.key in value:
            found.append((f'{name}.{entry.key}', value[entry.key]))
    return found
