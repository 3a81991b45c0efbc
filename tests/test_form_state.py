"""Tests for the add-product form state holder."""

import pytest

from src.form import ProductFormState
from src.models import DEFAULT_CATEGORY, Category, ImageFile, ProductDraft


class TestDefaults:
    def test_new_form_has_empty_draft(self, form):
        assert form.draft == ProductDraft()
        assert form.busy is False

    def test_category_defaults_to_chair(self, form):
        assert form.draft.category is Category.CHAIR
        assert DEFAULT_CATEGORY is Category.CHAIR

    def test_display_price_carries_prefix_before_any_input(self, form):
        assert form.display_price == "₱"


class TestSetters:
    def test_text_fields_are_stored_verbatim(self, form):
        form.set_title("  Sofa  ")
        form.set_short_description("")
        form.set_description("<b>not sanitized</b>")

        assert form.draft.title == "  Sofa  "
        assert form.draft.short_description == ""
        assert form.draft.description == "<b>not sanitized</b>"

    def test_price_is_normalized_on_every_change(self, form):
        form.set_price("2")
        assert form.display_price == "₱2"

        form.set_price("₱25x")
        assert form.display_price == "₱25"

        form.set_price("₱25.0.")
        assert form.display_price == "₱25.0"

    def test_price_uses_configured_symbol(self):
        form = ProductFormState(currency_symbol="$")
        form.set_price("250")

        assert form.draft.price == "$250"

    @pytest.mark.parametrize("value", ["chair", "sofa", "mobile", "watch", "wireless"])
    def test_category_accepts_enumerated_values(self, form, value):
        form.set_category(value)
        assert form.draft.category.value == value

    def test_category_accepts_enum_member(self, form):
        form.set_category(Category.WATCH)
        assert form.draft.category is Category.WATCH

    @pytest.mark.parametrize("value", ["Select category", "table", "", "CHAIR"])
    def test_category_rejects_other_values(self, form, value):
        with pytest.raises(ValueError):
            form.set_category(value)

        assert form.draft.category is Category.CHAIR


class TestReset:
    def test_reset_restores_every_default(self, filled_form):
        filled_form.reset()

        assert filled_form.draft == ProductDraft()
        assert filled_form.draft.image is None
        assert filled_form.draft.preview_data_uri is None

    def test_snapshot_is_detached_from_later_edits(self, filled_form):
        snapshot = filled_form.snapshot()
        filled_form.set_title("Chair")
        filled_form.set_image(ImageFile("other.png", b"x"))

        assert snapshot.title == "Sofa"
        assert snapshot.image.filename == "sofa.png"
