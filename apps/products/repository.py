"""Product module repository implementation."""

from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR
from typing import List
from sqlmodel import select
from framework.database.types import CENT
from framework.repository.base import BaseRepository
from framework.exceptions.handler import InvalidRange
from .models import Product


class ProductRepository(BaseRepository[Product]):
    """Product repository."""

    def __init__(self, session):
        super().__init__(session, Product)

    async def get_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Product]:
        """Products priced within [min_price, max_price], both ends inclusive."""
        if min_price > max_price:
            raise InvalidRange(min_price, max_price)

        # Prices are whole cents, so narrow the bounds inward to cents before binding
        lower = min_price.quantize(CENT, rounding=ROUND_CEILING)
        upper = max_price.quantize(CENT, rounding=ROUND_FLOOR)
        statement = select(Product).where(
            Product.price >= lower,
            Product.price <= upper,
        )
        return await self._fetch(statement)
