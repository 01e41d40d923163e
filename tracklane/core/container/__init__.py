"""Dependency Injection Container Module.

Usage:
------
    # Initialize at startup (call once)
    from tracklane.core.container import initialize_container
    from tracklane.core.config import get_settings
    initialize_container(get_settings())

    # Use the global container after initialization
    from tracklane.core import container as container_module
    container_module.container.dispatcher.track("UserSignup", "{userId:42}")

    # In tests (construct directly with fakes, don't use global)
    from tracklane.core.container import Container
    test_container = Container(dispatcher=Dispatcher(SinglePolicy(FakeEmitter())))

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_container() (builds)
"""

from typing import TYPE_CHECKING

from tracklane.core.container.container import Container
from tracklane.core.container.factory import create_container

if TYPE_CHECKING:
    from tracklane.core.config import Settings

__all__ = ["Container", "create_container", "container", "initialize_container"]


# ---------------------------------------------------------------------------
# Global container instance
# ---------------------------------------------------------------------------

container: Container | None = None
"""Global container instance, set by `initialize_container()`.

Library code receives the dispatcher as a parameter and never imports
this directly.
"""


def initialize_container(settings: "Settings") -> None:
    """Initialize the global container. Call once at startup.

    Raises:
        RuntimeError: If called more than once (container already initialized)
    """
    global container

    if container is not None:
        raise RuntimeError(
            "Container already initialized. "
            "initialize_container() should only be called once at startup."
        )

    container = create_container(settings)


def reset_container() -> None:
    """Reset the global container to None. For testing only."""
    global container
    container = None
