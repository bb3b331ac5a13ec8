"""Test config and shared fixtures."""
import pytest
from typing import AsyncGenerator

import apps.models  # noqa: F401  registers table models
from framework.database.sql_driver import SQLDriver
from apps.products.seed import seed_products
from apps.products.service import ProductService
from apps.products.unit_of_work import ProductUnitOfWork


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def driver() -> AsyncGenerator[SQLDriver, None]:
    """Create a fresh in-memory database with the schema in place."""
    driver = SQLDriver(TEST_DATABASE_URL)
    await driver.create_schema()
    yield driver
    await driver.drop_schema()
    await driver.disconnect()


@pytest.fixture
async def uow(driver: SQLDriver) -> AsyncGenerator[ProductUnitOfWork, None]:
    """Unit of work over a seeded database."""
    async with ProductUnitOfWork(driver.new_session()) as uow:
        await seed_products(uow)
        yield uow


@pytest.fixture
async def empty_uow(driver: SQLDriver) -> AsyncGenerator[ProductUnitOfWork, None]:
    """Unit of work over an empty products table."""
    async with ProductUnitOfWork(driver.new_session()) as uow:
        yield uow


@pytest.fixture
async def observer(driver: SQLDriver) -> AsyncGenerator[ProductUnitOfWork, None]:
    """Second unit of work on the same database, for checking what was persisted."""
    async with ProductUnitOfWork(driver.new_session()) as uow:
        yield uow


@pytest.fixture
def service(uow: ProductUnitOfWork) -> ProductService:
    return ProductService(uow)
