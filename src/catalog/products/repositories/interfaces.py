"""Product repository interface.

Extends ``IRepository[Product]`` with the persistence operations and the
ownership look-ups the Service Layer gates mutations on.  Implementations
signal failure by raising; the service treats every such exception as
opaque and lets it propagate unchanged.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from catalog.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from catalog.core.context import RequestContext
    from catalog.products.dtos import (
        CreateProductRequest,
        DeleteProductRequest,
        GetProductsRequest,
        GetProductsResponse,
        Product,
        UpdateProductRequest,
        UpdateProductStockRequest,
        UpsertProductResponse,
    )


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def create_product(
        self, ctx: RequestContext, req: CreateProductRequest
    ) -> UpsertProductResponse:
        """Persist a new product and return its identifier."""

    @abstractmethod
    def get_products(
        self, ctx: RequestContext, req: GetProductsRequest
    ) -> GetProductsResponse:
        """Return one page of products matching the filter."""

    @abstractmethod
    def update_product(
        self, ctx: RequestContext, req: UpdateProductRequest
    ) -> UpsertProductResponse:
        """Apply the supplied changes to an existing product."""

    @abstractmethod
    def update_product_stock(
        self, ctx: RequestContext, req: UpdateProductStockRequest
    ) -> None:
        """Deduct stock for every item in the request as one unit of work."""

    @abstractmethod
    def delete_product(self, ctx: RequestContext, req: DeleteProductRequest) -> None:
        """Remove a product."""

    @abstractmethod
    def is_shop_owner(self, ctx: RequestContext, user_id: str, shop_id: str) -> bool:
        """Whether ``user_id`` is the registered owner of ``shop_id``."""

    @abstractmethod
    def is_product_owner(
        self, ctx: RequestContext, user_id: str, product_id: str
    ) -> bool:
        """Whether ``user_id`` owns the shop that ``product_id`` belongs to."""
