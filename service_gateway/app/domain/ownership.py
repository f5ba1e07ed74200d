"""
Product ownership checks for restaurant product mutations.
"""

from typing import Optional

from shared.errors import AuthError, AuthFailure, UpstreamError
from shared.logging import get_logger

from ..adapters.restaurant_client import RestaurantClient
from ..auth.tokens import AuthContext, Role


class OwnershipResolver:
    """Confirms that a caller may mutate a product.

    Admins may act on any product. Restaurants may act only on products the
    restaurant service attributes to them. Users may not mutate products.
    """

    def __init__(self, restaurant_client: RestaurantClient):
        self.restaurant_client = restaurant_client
        self.logger = get_logger("gateway.ownership")

    async def verify(self, context: AuthContext, product_id: str, action: str = "modify") -> Optional[str]:
        """Check the caller against the product owner.

        Returns the restaurant id to stamp on the outgoing request: the
        caller's own id for restaurants, ``None`` for admins, who act on
        behalf of whichever restaurant the request names.
        """
        if context.role is Role.ADMIN:
            return None

        if context.role is Role.RESTAURANT:
            try:
                owner_id = await self.restaurant_client.get_restaurant_id_by_product(product_id)
            except UpstreamError as e:
                raise e.reword("Failed to verify product ownership")

            if owner_id != context.entity_id:
                self.logger.warning(
                    "Product ownership mismatch",
                    product_id=product_id,
                    owner_id=owner_id,
                    caller_id=context.entity_id,
                )
                raise AuthError(AuthFailure.FORBIDDEN, f"Not authorized to {action} this product")
            return context.entity_id

        # Role.USER
        raise AuthError(AuthFailure.FORBIDDEN, f"Not authorized to {action} this product")

