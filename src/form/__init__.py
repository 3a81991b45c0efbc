"""Add-product form state and input handlers."""

from src.form.form_state import ProductFormState
from src.form.image_selection import ImageSelectionHandler, encode_data_uri
from src.form.price import CURRENCY_SYMBOL, normalize_price, price_to_number

__all__ = [
    "CURRENCY_SYMBOL",
    "ImageSelectionHandler",
    "ProductFormState",
    "encode_data_uri",
    "normalize_price",
    "price_to_number",
]
