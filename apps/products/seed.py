"""Initial product rows for development and test bring-up."""

from decimal import Decimal
from framework.logging.logger import get_logger
from .models import Product
from .unit_of_work import ProductUnitOfWork

logger = get_logger("product_seed")

SEED_PRODUCTS = (
    {"id": 1, "name": "Product 1", "price": Decimal("10.99"), "quantity": 100},
    {"id": 2, "name": "Product 2", "price": Decimal("20.50"), "quantity": 50},
    {"id": 3, "name": "Product 3", "price": Decimal("15.75"), "quantity": 75},
)


async def seed_products(uow: ProductUnitOfWork) -> int:
    """Insert the seed products if the table is empty. Returns the number of rows inserted."""
    if await uow.products.count() > 0:
        logger.debug("Products table already populated, skipping seed")
        return 0

    await uow.begin_transaction()
    try:
        for row in SEED_PRODUCTS:
            await uow.products.add(Product(**row))
        await uow.save_changes()
        await uow.commit_transaction()
    except Exception:
        await uow.rollback_transaction()
        raise

    logger.info(f"Seeded {len(SEED_PRODUCTS)} products")
    return len(SEED_PRODUCTS)
