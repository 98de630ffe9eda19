"""Unit tests for the field validation rules."""

from decimal import Decimal

import pytest

from catalog.application.dto import ProductDraft, ProductEdit
from catalog.application.validation import validate_draft, validate_edit
from catalog.domain.exceptions import ValidationError


class TestValidateDraft:

    def test_returns_clean_values(self):
        name, price = validate_draft(ProductDraft(" Chair ", "49.99", 1))
        assert name == "Chair"
        assert price.amount == Decimal("49.99")

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_names_rejected(self, name):
        with pytest.raises(ValidationError) as info:
            validate_draft(ProductDraft(name, 10, 1))
        assert info.value.reason == "empty"

    def test_float_price_keeps_its_decimal_text(self):
        _, price = validate_draft(ProductDraft("Chair", 49.99, 1))
        assert price.amount == Decimal("49.99")

    def test_boolean_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            validate_draft(ProductDraft("Chair", True, 1))

    def test_nan_price_rejected(self):
        with pytest.raises(ValidationError) as info:
            validate_draft(ProductDraft("Chair", "NaN", 1))
        assert info.value.reason == "invalid"


class TestValidateEdit:

    def test_positive_price_accepted(self):
        _, price = validate_edit(ProductEdit("Lamp", "0.01"))
        assert price.amount == Decimal("0.01")

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError) as info:
            validate_edit(ProductEdit("Lamp", "0"))
        assert info.value.reason == "non-positive"
