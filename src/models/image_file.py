"""Image file picked in the add-product form."""

import io
import mimetypes
from dataclasses import dataclass
from typing import BinaryIO, Optional

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class ImageFile:
    """In-memory copy of a single selected file."""

    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def mime_type(self) -> str:
        """Declared content type, falling back to a guess from the filename."""
        if self.content_type:
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.filename)
        return guessed or DEFAULT_CONTENT_TYPE

    def open(self) -> BinaryIO:
        return io.BytesIO(self.content)
