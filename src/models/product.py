"""Product models for the add-product form and the persisted record."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from src.models.image_file import ImageFile


class Category(str, Enum):
    """Product categories offered by the form."""

    CHAIR = "chair"
    SOFA = "sofa"
    MOBILE = "mobile"
    WATCH = "watch"
    WIRELESS = "wireless"


DEFAULT_CATEGORY = Category.CHAIR


@dataclass
class ProductDraft:
    """Unsaved form state for one product being added."""

    title: str = ""
    short_description: str = ""
    description: str = ""
    price: str = ""  # currency-prefixed once set through the form
    category: Category = DEFAULT_CATEGORY
    image: Optional[ImageFile] = None
    preview_data_uri: Optional[str] = None  # display only, never persisted


@dataclass(frozen=True)
class ProductRecord:
    """Product document written to the document store after a successful upload."""

    name: str
    short_desc: str
    description: str
    category: Category
    price: float
    image_url: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_document(self) -> dict[str, Any]:
        """Serialize to the document shape stored in the products collection."""
        return {
            "id": self.id,
            "name": self.name,
            "shortDesc": self.short_desc,
            "description": self.description,
            "category": self.category.value,
            "price": self.price,
            "imageUrl": self.image_url,
        }
