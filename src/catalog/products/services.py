"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- Creating a product requires the acting user to own the shop.
- Updating or deleting a product requires the acting user to own it.
- An empty listing is reported as ``ProductsNotFound`` (404).

Repository exceptions are never caught: they reach the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from catalog.products.exceptions import NotProductOwner, NotShopOwner, ProductsNotFound

if TYPE_CHECKING:
    from catalog.core.context import RequestContext
    from catalog.products.dtos import (
        CreateProductRequest,
        DeleteProductRequest,
        GetProductsRequest,
        GetProductsResponse,
        UpdateProductRequest,
        UpdateProductStockRequest,
        UpsertProductResponse,
    )
    from catalog.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Holds no per-request state; one instance may serve concurrent callers.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Ownership gates
    # ------------------------------------------------------------------

    def _ensure_shop_owner(
        self, ctx: RequestContext, log, user_id: str, shop_id: str
    ) -> None:
        ctx.raise_if_done()
        if not self._repo.is_shop_owner(ctx, user_id, shop_id):
            log.warning("product.not_shop_owner")
            raise NotShopOwner()

    def _ensure_product_owner(
        self, ctx: RequestContext, log, user_id: str, product_id: str
    ) -> None:
        ctx.raise_if_done()
        if not self._repo.is_product_owner(ctx, user_id, product_id):
            log.warning("product.not_product_owner")
            raise NotProductOwner()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(
        self, ctx: RequestContext, req: CreateProductRequest
    ) -> UpsertProductResponse:
        """Create a product in a shop the acting user owns.

        Raises:
            NotShopOwner: the user does not own ``req.shop_id``.
        """
        with ctx.bound_logging():
            log = logger.bind(user_id=req.user_id, shop_id=req.shop_id)
            self._ensure_shop_owner(ctx, log, req.user_id, req.shop_id)

            ctx.raise_if_done()
            res = self._repo.create_product(ctx, req)
            log.info("product.created", product_id=res.id)
            return res

    def update_product(
        self, ctx: RequestContext, req: UpdateProductRequest
    ) -> UpsertProductResponse:
        """Update a product the acting user owns.

        Raises:
            NotProductOwner: the user does not own ``req.id``.
        """
        with ctx.bound_logging():
            log = logger.bind(user_id=req.user_id, product_id=req.id)
            self._ensure_product_owner(ctx, log, req.user_id, req.id)

            ctx.raise_if_done()
            res = self._repo.update_product(ctx, req)
            log.info("product.updated", fields=sorted(req.changes()))
            return res

    def update_product_stock(
        self, ctx: RequestContext, req: UpdateProductStockRequest
    ) -> None:
        """Deduct stock in bulk.  Not ownership-gated: called by order flows."""
        with ctx.bound_logging():
            ctx.raise_if_done()
            self._repo.update_product_stock(ctx, req)
            logger.info("product.stock_updated", items=len(req.items))

    def delete_product(self, ctx: RequestContext, req: DeleteProductRequest) -> None:
        """Delete a product the acting user owns.

        Raises:
            NotProductOwner: the user does not own ``req.product_id``.
        """
        with ctx.bound_logging():
            log = logger.bind(user_id=req.user_id, product_id=req.product_id)
            self._ensure_product_owner(ctx, log, req.user_id, req.product_id)

            ctx.raise_if_done()
            self._repo.delete_product(ctx, req)
            log.info("product.deleted")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_products(
        self, ctx: RequestContext, req: GetProductsRequest
    ) -> GetProductsResponse:
        """Return one page of a shop's products.

        Raises:
            ProductsNotFound: the repository returned no items.
        """
        with ctx.bound_logging():
            log = logger.bind(shop_id=req.shop_id, page=req.page)
            ctx.raise_if_done()
            res = self._repo.get_products(ctx, req)
            if not res.items:
                log.warning("product.list_empty")
                raise ProductsNotFound()

            log.info("product.listed", count=len(res.items), total=res.meta.total_data)
            return res
