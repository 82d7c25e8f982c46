# pyright: reportUnusedImport=false
from genobj.config.registry import Setting, all_registered, register
from genobj.config.settings import PURGE_ON_DECLARE, STRICT_ARGS
from genobj.config.validation import (
    ConfigValidationError,
    bind_config_values,
    ensure_valid_config,
    get_config,
    resolve_config_value,
    resolve_setting,
)
