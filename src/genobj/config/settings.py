from genobj.config.registry import Setting, register

PURGE_ON_DECLARE = register(
    Setting(
        key='purge_on_declare',
        expected_type=bool,
        default=False,
        description='Drop cached accessors whose key a new declaration no longer allows.',
    )
)

STRICT_ARGS = register(
    Setting(
        key='strict_args',
        expected_type=bool,
        default=False,
        description='Raise ValueError instead of warning when args() gets an odd number of items.',
    )
)
