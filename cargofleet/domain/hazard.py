"""
Hazard notification capability.

Only some container variants carry dangerous payloads. Those variants
implement ``HazardNotifier``; callers check for the capability instead of
assuming every container has it.
"""

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class HazardNotifier(Protocol):
    """Protocol for containers that can raise hazard notifications."""

    def notify_hazard(self, message: str) -> None:
        """Emit a hazard notification."""
        ...


class LoggingHazardNotifier:
    """Mixin emitting hazard notifications as WARNING log records."""

    def notify_hazard(self, message: str) -> None:
        logger.warning("[HAZARD] %s", message)


def supports_hazard_notification(container: object) -> bool:
    """Check whether a container exposes the hazard notification capability."""
    return isinstance(container, HazardNotifier)


def notify_hazard(container: object, message: str) -> bool:
    """
    Send a hazard notification through a container, if it supports one.

    Args:
        container: Any container instance
        message: Notification text

    Returns:
        True if the notification was emitted, False for containers
        without the capability
    """
    if not supports_hazard_notification(container):
        return False
    container.notify_hazard(message)
    return True
