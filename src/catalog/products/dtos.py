"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the transport layer, the Service
layer and the repository.  DTOs are immutable (``frozen=True``).

- ``Product``: catalog entity as returned by the repository.
- ``CreateProductRequest`` / ``UpdateProductRequest`` /
  ``DeleteProductRequest``: owner-gated mutations.
- ``UpdateProductStockRequest``: bulk stock deduction (e.g. after an order).
- ``GetProductsRequest`` / ``GetProductsResponse``: paginated listing.
- ``UpsertProductResponse``: id of the created or updated product.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.config import settings

# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------


class Product(BaseModel):
    """Immutable product record.  ``price`` is expressed in minor units."""

    model_config = ConfigDict(frozen=True)

    id: str
    shop_id: str
    category_id: str
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: int
    stock: int


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductRequest(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is not blank.
    - ``price`` is greater than zero.
    - ``stock`` is non-negative.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    shop_id: str
    category_id: str
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: int
    stock: int = 0

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    @field_validator("stock")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock cannot be negative.")
        return v


class UpdateProductRequest(BaseModel):
    """Immutable DTO for product update requests.

    Every field except ``user_id`` and ``id`` is optional; only supplied
    fields are updated.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    id: str
    category_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[int] = None
    stock: Optional[int] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip() if v is not None else v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    @field_validator("stock")
    @classmethod
    def stock_must_be_non_negative(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("Stock cannot be negative.")
        return v

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually supplied, excluding identifiers."""
        return self.model_dump(exclude={"user_id", "id"}, exclude_none=True)


class DeleteProductRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str
    product_id: str


class UpdateStock(BaseModel):
    """Stock deduction for a single product."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class UpdateProductStockRequest(BaseModel):
    """Bulk stock adjustment.  An empty ``items`` list is a no-op."""

    model_config = ConfigDict(frozen=True)

    items: List[UpdateStock] = Field(default_factory=list)

    @field_validator("items")
    @classmethod
    def no_duplicate_products(cls, v: List[UpdateStock]) -> List[UpdateStock]:
        product_ids = [item.product_id for item in v]
        if len(product_ids) != len(set(product_ids)):
            raise ValueError("Duplicate product IDs are not allowed in the same request.")
        return v


class GetProductsRequest(BaseModel):
    """Listing filter.  ``shop_id`` is mandatory; the rest narrows the page."""

    model_config = ConfigDict(frozen=True)

    shop_id: str
    category_id: Optional[str] = None
    search: Optional[str] = None
    page: int = 1
    limit: int = Field(default_factory=lambda: settings.DEFAULT_PAGE_SIZE)

    @field_validator("page")
    @classmethod
    def page_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Page must be at least 1.")
        return v

    @field_validator("limit")
    @classmethod
    def limit_within_bounds(cls, v: int) -> int:
        if v < 1 or v > settings.MAX_PAGE_SIZE:
            raise ValueError(f"Limit must be between 1 and {settings.MAX_PAGE_SIZE}.")
        return v

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class Meta(BaseModel):
    """Pagination metadata attached to a product listing."""

    model_config = ConfigDict(frozen=True)

    total_data: int
    total_page: int
    page: int
    limit: int

    @classmethod
    def paginate(cls, total_data: int, page: int, limit: int) -> Meta:
        """Build metadata; an empty result still reports a single page."""
        if limit < 1:
            raise ValueError("Limit must be at least 1.")
        total_page = max(1, math.ceil(total_data / limit))
        return cls(total_data=total_data, total_page=total_page, page=page, limit=limit)


class GetProductsResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: List[Product] = Field(default_factory=list)
    meta: Meta


class UpsertProductResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
