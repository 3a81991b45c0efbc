"""Data models module."""

from src.models.image_file import ImageFile
from src.models.product import DEFAULT_CATEGORY, Category, ProductDraft, ProductRecord
from src.models.submission_state import (
    Failed,
    FailureStage,
    Idle,
    SubmissionState,
    Succeeded,
    Uploading,
    Validating,
    Writing,
)

__all__ = [
    "Category",
    "DEFAULT_CATEGORY",
    "Failed",
    "FailureStage",
    "Idle",
    "ImageFile",
    "ProductDraft",
    "ProductRecord",
    "SubmissionState",
    "Succeeded",
    "Uploading",
    "Validating",
    "Writing",
]
