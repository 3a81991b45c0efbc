"""Form state holder for the add-product form."""

import copy
from typing import Optional, Union

from src.form.price import CURRENCY_SYMBOL, normalize_price
from src.models import Category, ImageFile, ProductDraft


class ProductFormState:
    """Owns the Product Draft fields and the busy flag.

    Setters store values as given, except price which is normalized on every
    change and category which must be one of the Category values.
    """

    def __init__(self, currency_symbol: str = CURRENCY_SYMBOL):
        self._currency_symbol = currency_symbol
        self._draft = ProductDraft()
        self.busy = False

    @property
    def currency_symbol(self) -> str:
        return self._currency_symbol

    @property
    def draft(self) -> ProductDraft:
        return self._draft

    @property
    def display_price(self) -> str:
        """Price as shown in the input; always carries the currency symbol."""
        return self._draft.price or self._currency_symbol

    def set_title(self, value: str) -> None:
        self._draft.title = value

    def set_short_description(self, value: str) -> None:
        self._draft.short_description = value

    def set_description(self, value: str) -> None:
        self._draft.description = value

    def set_price(self, value: str) -> None:
        self._draft.price = normalize_price(value, self._currency_symbol)

    def set_category(self, value: Union[Category, str]) -> None:
        """
        Set the category.

        Raises:
            ValueError: If value is not one of the Category values.
        """
        self._draft.category = Category(value)

    def set_image(self, image: Optional[ImageFile]) -> None:
        self._draft.image = image

    def set_preview(self, data_uri: Optional[str]) -> None:
        self._draft.preview_data_uri = data_uri

    def reset(self) -> None:
        """Restore every draft field, image and preview included, to its default."""
        self._draft = ProductDraft()

    def snapshot(self) -> ProductDraft:
        """Copy of the current draft."""
        return copy.copy(self._draft)
