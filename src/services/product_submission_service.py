"""Add-product submission workflow.

Runs one submission attempt as a sequence of explicit states:

    Idle -> Validating -> Uploading -> Writing -> Succeeded | Failed -> Idle

The image is uploaded first; the product record is written only once the
upload has finished and its URL is known. Failures are reported to the user
and never retried. The draft is kept on failure and reset on success.
"""

import logging
import time
from typing import Callable, Optional

from src.clients.interfaces import (
    DocumentStoreError,
    DocumentStoreInterface,
    StorageException,
    StorageInterface,
    UploadProgress,
)
from src.form.form_state import ProductFormState
from src.form.price import price_to_number
from src.models import (
    Failed,
    FailureStage,
    Idle,
    ProductDraft,
    ProductRecord,
    SubmissionState,
    Succeeded,
    Uploading,
    Validating,
    Writing,
)
from src.models.submission_state import can_transition, is_terminal
from src.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

PRODUCTS_COLLECTION = "products"
IMAGE_PREFIX = "productImages"

MISSING_IMAGE_MESSAGE = "Please upload an image."
UPLOAD_FAILED_MESSAGE = "Image upload failed: {error}"
PRODUCT_ADDED_MESSAGE = "Product added successfully!"
WRITE_FAILED_MESSAGE = "Error adding product: {error}"


class InvalidTransitionError(RuntimeError):
    """Raised when the workflow attempts an illegal state change."""
    pass


def build_record(draft: ProductDraft, image_url: str) -> ProductRecord:
    """Map a draft and its uploaded image URL to the persisted record."""
    return ProductRecord(
        name=draft.title,
        short_desc=draft.short_description,
        description=draft.description,
        category=draft.category,
        price=price_to_number(draft.price),
        image_url=image_url,
    )


class ProductSubmissionService:
    """Uploads the draft's image, then writes its product record.

    Storage, document store and notifications are passed in so that fakes can
    stand in for the cloud services.
    """

    def __init__(
        self,
        storage: StorageInterface,
        document_store: DocumentStoreInterface,
        notifications: NotificationService,
        collection: str = PRODUCTS_COLLECTION,
        image_prefix: str = IMAGE_PREFIX,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the workflow.

        Args:
            storage: Object storage receiving the product image
            document_store: Document database receiving the product record
            notifications: Sink for user-visible messages
            collection: Collection the product record is written to
            image_prefix: Folder for uploaded images
            clock: Returns seconds since the epoch; used for image keys
        """
        self._storage = storage
        self._document_store = document_store
        self._notifications = notifications
        self._collection = collection
        self._image_prefix = image_prefix
        self._clock = clock
        self._state: SubmissionState = Idle()
        self._last_outcome: SubmissionState = Idle()

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def last_outcome(self) -> SubmissionState:
        """Terminal state of the most recent attempt, or Idle if none ran."""
        return self._last_outcome

    def build_image_path(self, filename: str) -> str:
        """Object key for an uploaded image: <prefix>/<unix millis><filename>."""
        millis = int(self._clock() * 1000)
        return f"{self._image_prefix}/{millis}{filename}"

    async def submit(self, form: ProductFormState) -> SubmissionState:
        """
        Run one submission attempt for the form's current draft.

        Args:
            form: The form whose draft is submitted.

        Returns:
            The terminal state of the attempt (Succeeded or Failed). If the
            form is already busy nothing is started and the in-flight state
            is returned.
        """
        if form.busy:
            logger.warning("Submission already in flight; ignoring re-submit")
            return self._state

        form.busy = True
        try:
            outcome = await self._run(form)
            self._last_outcome = outcome
            return outcome
        finally:
            if is_terminal(self._state):
                self._transition(Idle())
            else:
                # unexpected error mid-attempt; propagate it, but leave the form usable
                self._state = Idle()
            form.busy = False

    async def _run(self, form: ProductFormState) -> SubmissionState:
        self._transition(Validating())

        draft = form.draft
        image = draft.image
        if image is None:
            return self._fail(FailureStage.MISSING_IMAGE, MISSING_IMAGE_MESSAGE)

        path = self.build_image_path(image.filename)
        self._transition(Uploading(path=path))

        try:
            stored = await self._storage.upload(image, path, on_progress=self._on_progress)
            image_url = await self._storage.get_url(stored.key)
        except StorageException as e:
            return self._fail(FailureStage.UPLOAD, UPLOAD_FAILED_MESSAGE.format(error=e), str(e))

        logger.info(f"File available at {image_url}")
        self._transition(Writing(image_url=image_url))

        record = build_record(draft, image_url)
        try:
            await self._document_store.create_item(self._collection, record.to_document())
        except DocumentStoreError as e:
            return self._fail(FailureStage.WRITE, WRITE_FAILED_MESSAGE.format(error=e), str(e))

        self._notifications.success(PRODUCT_ADDED_MESSAGE)
        form.reset()
        return self._transition(Succeeded(record=record))

    def _on_progress(self, progress: UploadProgress) -> None:
        if not isinstance(self._state, Uploading):
            return
        logger.debug(f"Upload is {progress.ratio * 100:.0f}% done")
        self._transition(Uploading(path=self._state.path, progress=progress.ratio))

    def _fail(self, stage: FailureStage, message: str, error: Optional[str] = None) -> Failed:
        self._notifications.error(message)
        return self._transition(Failed(stage=stage, reason=message, error=error))

    def _transition(self, target: SubmissionState) -> SubmissionState:
        if not can_transition(self._state, target):
            raise InvalidTransitionError(
                f"Cannot move from {type(self._state).__name__} to {type(target).__name__}"
            )
        self._state = target
        return target
