from dependency_injector import containers, providers

from genobj.registry import AllowListRegistry


class Container(containers.DeclarativeContainer):
    """Process-wide services shared by every generic object class.

    ``registry`` is created once on first use. Override the provider to
    substitute another registry, or call ``container.registry.reset()`` to
    start again from an empty one.
    """

    registry = providers.ThreadSafeSingleton(AllowListRegistry)


container = Container()


def get_registry() -> AllowListRegistry:
    return container.registry()
