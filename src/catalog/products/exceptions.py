"""Product application errors.

Raised by the Service Layer when an ownership check fails or a listing
comes back empty.  The transport layer renders them through
``catalog.core.exceptions.error_response``.
"""

from __future__ import annotations

from catalog.core.exceptions import Forbidden, NotFound


class NotShopOwner(Forbidden):
    """The acting user does not own the shop the product belongs to."""

    default_message = "User is not shop owner"


class NotProductOwner(Forbidden):
    """The acting user does not own the product being mutated."""

    default_message = "User is not product owner"


class ProductsNotFound(NotFound):
    """The listing filter matched no products."""

    default_message = "Products not found"
