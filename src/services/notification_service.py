"""User-visible notifications raised by the add-product form."""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A transient message for the admin user."""

    level: NotificationLevel
    message: str


class NotificationService:
    """Collects notifications for the UI to render and logs each one.

    Rendering (toasts, banners) is up to the caller; this service only keeps
    the messages in order until they are drained.
    """

    def __init__(self):
        self._pending: list[Notification] = []

    def success(self, message: str) -> Notification:
        logger.info(f"[NOTIFY success] {message}")
        return self._push(Notification(NotificationLevel.SUCCESS, message))

    def error(self, message: str) -> Notification:
        logger.warning(f"[NOTIFY error] {message}")
        return self._push(Notification(NotificationLevel.ERROR, message))

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        """Return and clear all pending notifications."""
        drained, self._pending = self._pending, []
        return drained

    def _push(self, notification: Notification) -> Notification:
        self._pending.append(notification)
        return notification
