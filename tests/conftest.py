from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_registry_and_config() -> Iterator[None]:
    """Reset process-wide state before each test."""
    import genobj.config.validation as validation
    from genobj import GenericObject, accessor
    from genobj.container import container

    # Drop the allow-list registry singleton; the next use creates an empty one
    container.registry.reset()

    # Accessors synthesized on the shared base outlive a single test
    accessor.purge(GenericObject, lambda key: False)

    # Reset bound configuration
    validation._CONFIG_CONTEXT.clear()  # pyright: ignore[reportPrivateUsage]

    yield
