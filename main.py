#!/usr/bin/env python3
"""
Product inventory console.

Usage:
    python main.py
    python main.py --database-url sqlite+aiosqlite:///inventory.db --no-seed
"""

import argparse
import asyncio
from framework.config import settings
from framework.database.manager import DatabaseManager
from framework.logging.logger import LogConfig, get_logger
import apps.models  # noqa: F401  registers table models
from apps.products.cli.menu import ProductMenu
from apps.products.seed import seed_products
from apps.products.service import ProductService
from apps.products.unit_of_work import ProductUnitOfWork

logger = get_logger("main")


async def run_console(seed: bool = True) -> None:
    manager = DatabaseManager.get_instance(settings)
    await manager.sql.create_schema()
    try:
        async with ProductUnitOfWork(manager.sql.new_session()) as uow:
            if seed:
                await seed_products(uow)
            await ProductMenu(ProductService(uow)).run()
    finally:
        await DatabaseManager.reset_instance()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=settings.APP_DESCRIPTION)
    parser.add_argument("--database-url", help="SQLAlchemy async URL (overrides DATABASE_URL)")
    parser.add_argument("--no-seed", action="store_true", help="Do not insert seed products")
    parser.add_argument("--log-level", help="Console log level (overrides LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    if args.database_url:
        settings.DATABASE_URL = args.database_url

    LogConfig.setup_logging(level=args.log_level)
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} starting ({settings.APP_ENV})")

    try:
        asyncio.run(run_console(seed=settings.SEED_ON_STARTUP and not args.no_seed))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
