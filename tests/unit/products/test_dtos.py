"""Unit tests for Product DTOs.

Covers:
- CreateProductRequest: validation, name normalisation, frozen immutability.
- UpdateProductRequest: optional fields, validation, ``changes()``.
- UpdateProductStockRequest: quantity and duplicate checks.
- GetProductsRequest: pagination bounds and offset.
- Meta.paginate: page arithmetic.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from catalog.config import settings
from catalog.products.dtos import (
    CreateProductRequest,
    GetProductsRequest,
    Meta,
    UpdateProductRequest,
    UpdateProductStockRequest,
    UpdateStock,
)

pytestmark = pytest.mark.unit


def _create(**overrides) -> CreateProductRequest:
    data = {
        "user_id": "1",
        "shop_id": "2",
        "category_id": "3",
        "name": "Product 1",
        "price": 1000,
        "stock": 10,
    }
    data.update(overrides)
    return CreateProductRequest(**data)


# ===========================================================================
# CreateProductRequest
# ===========================================================================


class TestCreateProductRequest:
    def test_optional_fields_default(self):
        dto = _create()
        assert dto.description is None
        assert dto.image_url is None

    def test_stock_defaults_to_zero(self):
        dto = CreateProductRequest(
            user_id="1", shop_id="2", category_id="3", name="Widget", price=5
        )
        assert dto.stock == 0

    def test_name_is_stripped(self):
        assert _create(name="  Widget  ").name == "Widget"

    def test_blank_name_raises(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            _create(name="   ")

    @pytest.mark.parametrize("price", [0, -1])
    def test_non_positive_price_raises(self, price):
        with pytest.raises(ValidationError, match="Price must be greater than zero"):
            _create(price=price)

    def test_negative_stock_raises(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            _create(stock=-1)

    def test_is_immutable(self):
        dto = _create()
        with pytest.raises(ValidationError):
            dto.name = "Changed"


# ===========================================================================
# UpdateProductRequest
# ===========================================================================


class TestUpdateProductRequest:
    def test_only_identifiers_required(self):
        dto = UpdateProductRequest(user_id="1", id="1")
        assert dto.name is None
        assert dto.price is None
        assert dto.changes() == {}

    def test_changes_excludes_identifiers_and_unset_fields(self):
        dto = UpdateProductRequest(user_id="1", id="1", name="New", stock=0)
        assert dto.changes() == {"name": "New", "stock": 0}

    def test_negative_price_raises(self):
        with pytest.raises(ValidationError, match="Price must be greater than zero"):
            UpdateProductRequest(user_id="1", id="1", price=-5)

    def test_negative_stock_raises(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            UpdateProductRequest(user_id="1", id="1", stock=-5)


# ===========================================================================
# UpdateProductStockRequest
# ===========================================================================


class TestUpdateProductStockRequest:
    def test_defaults_to_empty(self):
        assert UpdateProductStockRequest().items == []

    def test_zero_quantity_raises(self):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            UpdateStock(product_id="1", quantity=0)

    def test_duplicate_products_raise(self):
        with pytest.raises(ValidationError, match="Duplicate product IDs"):
            UpdateProductStockRequest(
                items=[
                    UpdateStock(product_id="1", quantity=1),
                    UpdateStock(product_id="1", quantity=2),
                ]
            )


# ===========================================================================
# GetProductsRequest / Meta
# ===========================================================================


class TestGetProductsRequest:
    def test_defaults(self):
        dto = GetProductsRequest(shop_id="1")
        assert dto.page == 1
        assert dto.limit == settings.DEFAULT_PAGE_SIZE
        assert dto.offset == 0

    def test_offset(self):
        assert GetProductsRequest(shop_id="1", page=3, limit=20).offset == 40

    def test_page_below_one_raises(self):
        with pytest.raises(ValidationError, match="Page must be at least 1"):
            GetProductsRequest(shop_id="1", page=0)

    def test_limit_below_one_raises(self):
        with pytest.raises(ValidationError, match="Limit must be between"):
            GetProductsRequest(shop_id="1", limit=0)

    def test_limit_above_max_raises(self):
        with pytest.raises(ValidationError, match="Limit must be between"):
            GetProductsRequest(shop_id="1", limit=settings.MAX_PAGE_SIZE + 1)


class TestMetaPaginate:
    def test_empty_result_reports_one_page(self):
        meta = Meta.paginate(0, page=1, limit=10)
        assert meta == Meta(total_data=0, total_page=1, page=1, limit=10)

    def test_partial_last_page_rounds_up(self):
        assert Meta.paginate(21, page=2, limit=10).total_page == 3

    def test_exact_multiple(self):
        assert Meta.paginate(20, page=1, limit=10).total_page == 2

    def test_zero_limit_raises(self):
        with pytest.raises(ValueError, match="Limit must be at least 1"):
            Meta.paginate(5, page=1, limit=0)
