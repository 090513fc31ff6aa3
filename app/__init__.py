"""
Marketplace application shell.

Wires the feature modules into the running application: dependency
container plus the root shell that owns session, navigation and the
unread badge.
"""

from .shell import MarketplaceShell, create_shell
from .dependencies import ServiceContainer, get_container, reset_container

__all__ = [
    "MarketplaceShell",
    "create_shell",
    "ServiceContainer",
    "get_container",
    "reset_container",
]
