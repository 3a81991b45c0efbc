"""Service modules."""

from src.services.notification_service import (
    Notification,
    NotificationLevel,
    NotificationService,
)
from src.services.product_submission_service import (
    InvalidTransitionError,
    ProductSubmissionService,
    build_record,
)

__all__ = [
    "InvalidTransitionError",
    "Notification",
    "NotificationLevel",
    "NotificationService",
    "ProductSubmissionService",
    "build_record",
]
