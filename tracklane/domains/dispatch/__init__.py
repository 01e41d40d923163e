"""Dispatch domain: policies and the Dispatcher entry point."""

from tracklane.domains.dispatch.dispatcher import Dispatcher
from tracklane.domains.dispatch.policies import BroadcastPolicy, SinglePolicy
from tracklane.domains.dispatch.protocols import DispatcherProtocol, DispatchPolicy

__all__ = [
    "BroadcastPolicy",
    "Dispatcher",
    "DispatcherProtocol",
    "DispatchPolicy",
    "SinglePolicy",
]
