"""Menu loop driven with scripted answers."""
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from apps.products.cli.menu import ProductMenu, parse_decimal, parse_int
from framework.exceptions.handler import StoreFailure


class Console:
    """Feeds scripted answers and records everything written."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.output = []

    def read_line(self, prompt: str) -> str:
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


async def _run(service, *answers: str) -> Console:
    console = Console(*answers)
    await ProductMenu(service, read_line=console.read_line, write=console.write).run()
    return console


def test_parse_helpers():
    assert parse_int(" 12 ") == 12
    assert parse_int("twelve") is None
    assert parse_decimal("10.99") == Decimal("10.99")
    assert parse_decimal("abc") is None
    assert parse_decimal("NaN") is None


@pytest.mark.asyncio
async def test_list_products(service):
    console = await _run(service, "1", "0")

    assert "Id: 1, Name: Product 1, Price: $10.99, Quantity: 100" in console.output
    assert "Id: 2, Name: Product 2, Price: $20.50, Quantity: 50" in console.output


@pytest.mark.asyncio
async def test_add_product(service):
    console = await _run(service, "2", "Widget", "9.99", "5", "0")

    assert "Product added successfully! (Id: 4)" in console.output
    widget = await service.get_by_id(4)
    assert (widget.name, widget.price, widget.quantity) == ("Widget", Decimal("9.99"), 5)


@pytest.mark.asyncio
async def test_add_product_rejects_bad_price(service):
    console = await _run(service, "2", "Widget", "cheap", "0")

    assert "Invalid price format." in console.output
    assert len(await service.get_all()) == 3


@pytest.mark.asyncio
async def test_update_product_keeps_blank_fields(service):
    console = await _run(service, "3", "1", "", "12.5", "", "0")

    assert "Product updated successfully!" in console.output
    product = await service.get_by_id(1)
    assert (product.name, product.price, product.quantity) == ("Product 1", Decimal("12.50"), 100)


@pytest.mark.asyncio
async def test_update_unknown_product(service):
    console = await _run(service, "3", "99", "0")

    assert "Product not found." in console.output


@pytest.mark.asyncio
async def test_delete_product(service):
    console = await _run(service, "4", "2", "0")

    assert "Product deleted successfully!" in console.output
    assert await service.get_by_id(2) is None


@pytest.mark.asyncio
async def test_search_by_price_range(service):
    console = await _run(service, "5", "15", "21", "0")

    assert "\nProducts between $15 and $21:" in console.output
    assert "Id: 1, Name: Product 1, Price: $10.99, Quantity: 100" not in console.output
    assert "Id: 3, Name: Product 3, Price: $15.75, Quantity: 75" in console.output


@pytest.mark.asyncio
async def test_inverted_range_is_reported(service):
    console = await _run(service, "5", "25", "10", "1", "0")

    assert any(line.startswith("An error occurred: Invalid range") for line in console.output)
    # loop kept going and served the next choice
    assert "\nAll Products:" in console.output


@pytest.mark.asyncio
async def test_update_quantity(service):
    console = await _run(service, "6", "3", "1", "0")

    assert "Product quantity updated successfully!" in console.output
    assert (await service.get_by_id(3)).quantity == 1


@pytest.mark.asyncio
async def test_store_failure_is_reported_and_loop_continues():
    service = AsyncMock()
    service.get_all.side_effect = [StoreFailure("Storage engine failure"), []]

    console = await _run(service, "1", "1", "0")

    assert console.output.count("An error occurred: Storage engine failure") == 1
    assert service.get_all.await_count == 2


@pytest.mark.asyncio
async def test_invalid_choices(service):
    console = await _run(service, "x", "9", "0")

    assert "Invalid input. Please try again." in console.output
    assert "Invalid option. Please try again." in console.output


@pytest.mark.asyncio
async def test_end_of_input_exits(service):
    console = await _run(service)

    assert console.answers == []
