"""Image selection and preview decoding for the add-product form.

A UI calls ImageSelectionHandler.select() from its file-picker change event
and renders ProductFormState.draft.preview_data_uri once the returned task
completes.
"""

import asyncio
import base64
import logging
from typing import Awaitable, Callable, Optional, Sequence

from src.form.form_state import ProductFormState
from src.models import ImageFile

logger = logging.getLogger(__name__)

PreviewDecoder = Callable[[ImageFile], Awaitable[str]]


async def encode_data_uri(image: ImageFile) -> str:
    """Encode an image as a base64 data URI off the event loop."""
    payload = await asyncio.to_thread(base64.b64encode, image.content)
    return f"data:{image.mime_type};base64,{payload.decode('ascii')}"


class ImageSelectionHandler:
    """Stores the picked image and assigns its preview once decoded.

    Each selection bumps a request counter. A decode that finishes after a
    newer selection was made, or after the form was reset, is discarded, so
    the preview always matches the pending image.
    """

    def __init__(
        self,
        form_state: ProductFormState,
        decoder: PreviewDecoder = encode_data_uri,
    ):
        self._form_state = form_state
        self._decoder = decoder
        self._latest_request = 0

    def select(self, files: Sequence[ImageFile]) -> Optional["asyncio.Task[None]"]:
        """
        Handle a file-picker change.

        Must be called from a running event loop.

        Args:
            files: Selected files; only the first is used.

        Returns:
            The scheduled preview task, or None when nothing was selected.
        """
        if not files:
            return None

        image = files[0]
        self._form_state.set_image(image)
        self._latest_request += 1
        return asyncio.create_task(self._decode_preview(image, self._latest_request))

    async def _decode_preview(self, image: ImageFile, request_id: int) -> None:
        data_uri = await self._decoder(image)
        # A newer pick or a form reset replaced the image while decoding
        if request_id != self._latest_request or self._form_state.draft.image is not image:
            logger.debug(f"Discarding stale preview for {image.filename}")
            return
        self._form_state.set_preview(data_uri)
