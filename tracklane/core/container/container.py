"""Dependency Injection Container.

The container is a simple immutable dataclass that holds the wired
pipeline. It has no construction logic; that belongs in the factory.
"""

from dataclasses import dataclass
from typing import Optional

from tracklane.core.protocols import DispatchMetrics
from tracklane.domains.dispatch.protocols import DispatcherProtocol


@dataclass(frozen=True)
class Container:
    """Immutable container holding the tracking pipeline.

    Usage:
        # Production: build once at startup
        from tracklane.core.container import initialize_container
        initialize_container(settings)

        # Testing: construct directly with fakes
        test_container = Container(
            dispatcher=Dispatcher(SinglePolicy(FakeEmitter())),
            metrics=FakeDispatchMetrics(),
        )
    """

    dispatcher: DispatcherProtocol
    metrics: Optional[DispatchMetrics] = None
