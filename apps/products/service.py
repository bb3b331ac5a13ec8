from decimal import Decimal
from typing import List, Optional
from framework.logging.logger import get_logger
from .models import Product
from .unit_of_work import ProductUnitOfWork

logger = get_logger("product_service")

class ProductService:
    """Product use cases; every write runs in a single transaction."""

    def __init__(self, uow: ProductUnitOfWork):
        """Initialize Product Service with ProductUnitOfWork."""
        self.uow = uow

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        return await self.uow.products.get_by_id(product_id)

    async def get_all(self) -> List[Product]:
        return await self.uow.products.get_all()

    async def get_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Product]:
        return await self.uow.products.get_by_price_range(min_price, max_price)

    async def create(self, product: Product) -> Product:
        """Insert a product and return it with its assigned id."""
        await self.uow.begin_transaction()
        try:
            await self.uow.products.add(product)
            await self.uow.save_changes()
            await self.uow.commit_transaction()
        except Exception:
            await self.uow.rollback_transaction()
            raise
        logger.info(f"Product {product.id} '{product.name}' created")
        return product

    async def update(self, product: Product) -> Product:
        """Replace the stored product with the given state."""
        await self.uow.begin_transaction()
        try:
            await self.uow.products.update(product)
            await self.uow.save_changes()
            await self.uow.commit_transaction()
        except Exception:
            await self.uow.rollback_transaction()
            raise
        logger.info(f"Product {product.id} updated")
        return product

    async def delete(self, product_id: int) -> None:
        """Delete a product; a missing id is a no-op."""
        await self.uow.begin_transaction()
        try:
            product = await self.uow.products.get_by_id(product_id)
            if product is not None:
                await self.uow.products.delete(product)
                await self.uow.save_changes()
            await self.uow.commit_transaction()
        except Exception:
            await self.uow.rollback_transaction()
            raise

        if product is None:
            logger.info(f"Product {product_id} not found, nothing to delete")
        else:
            logger.info(f"Product {product_id} deleted")

    async def update_quantity(self, product_id: int, quantity: int) -> None:
        """Set the stock quantity of a product; a missing id is a no-op."""
        await self.uow.begin_transaction()
        try:
            product = await self.uow.products.get_by_id(product_id)
            if product is not None:
                product.quantity = quantity
                await self.uow.products.update(product)
                await self.uow.save_changes()
            await self.uow.commit_transaction()
        except Exception:
            await self.uow.rollback_transaction()
            raise

        if product is None:
            logger.info(f"Product {product_id} not found, quantity unchanged")
        else:
            logger.info(f"Product {product_id} quantity set to {quantity}")
