"""
Interactive product menu.

Reads raw answers, parses them into ids, prices and quantities, and calls
ProductService. Any failure is reported as text and the loop keeps going.
"""

from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable, Optional
from framework.exceptions.handler import describe_exception
from ..models import Product, to_price
from ..service import ProductService

MENU = """
Product Management System
1. List all products
2. Add new product
3. Update product
4. Delete product
5. Search products by price range
6. Update product quantity
0. Exit
"""


def parse_int(raw: Optional[str]) -> Optional[int]:
    try:
        return int(raw.strip())
    except (AttributeError, ValueError):
        return None


def parse_decimal(raw: Optional[str]) -> Optional[Decimal]:
    try:
        value = Decimal(raw.strip())
    except (AttributeError, InvalidOperation):
        return None
    return value if value.is_finite() else None


class ProductMenu:
    """Menu loop over a ProductService."""

    def __init__(
        self,
        service: ProductService,
        read_line: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ):
        self.service = service
        self.read_line = read_line or input
        self.write = write or print
        self.actions = {
            1: self.list_products,
            2: self.add_product,
            3: self.update_product,
            4: self.delete_product,
            5: self.search_by_price,
            6: self.update_quantity,
        }

    def _show(self, products: Iterable[Product]) -> None:
        for product in products:
            self.write(product.describe())

    async def run(self) -> None:
        while True:
            self.write(MENU)
            try:
                raw = self.read_line("Select an option: ")
            except EOFError:
                return

            choice = parse_int(raw)
            if choice is None:
                self.write("Invalid input. Please try again.")
                continue
            if choice == 0:
                return

            action = self.actions.get(choice)
            if action is None:
                self.write("Invalid option. Please try again.")
                continue

            try:
                await action()
            except EOFError:
                return
            except Exception as e:
                self.write(f"An error occurred: {describe_exception(e)}")

    async def list_products(self) -> None:
        products = await self.service.get_all()
        self.write("\nAll Products:")
        self._show(products)

    async def add_product(self) -> None:
        name = self.read_line("Enter product name: ").strip()
        if not name:
            self.write("Product name is required.")
            return
        price = parse_decimal(self.read_line("Enter price: "))
        if price is None:
            self.write("Invalid price format.")
            return
        quantity = parse_int(self.read_line("Enter quantity: "))
        if quantity is None:
            self.write("Invalid quantity format.")
            return

        product = await self.service.create(Product(name=name, price=to_price(price), quantity=quantity))
        self.write(f"Product added successfully! (Id: {product.id})")

    async def update_product(self) -> None:
        product_id = parse_int(self.read_line("Enter product ID to update: "))
        if product_id is None:
            self.write("Invalid ID format.")
            return

        product = await self.service.get_by_id(product_id)
        if product is None:
            self.write("Product not found.")
            return

        # Blank or unparsable answers keep the current value
        new_name = self.read_line(f"Enter new name (current: {product.name}): ").strip()
        if new_name:
            product.name = new_name

        new_price = parse_decimal(self.read_line(f"Enter new price (current: ${product.price}): "))
        if new_price is not None:
            product.price = to_price(new_price)

        new_quantity = parse_int(self.read_line(f"Enter new quantity (current: {product.quantity}): "))
        if new_quantity is not None:
            product.quantity = new_quantity

        await self.service.update(product)
        self.write("Product updated successfully!")

    async def delete_product(self) -> None:
        product_id = parse_int(self.read_line("Enter product ID to delete: "))
        if product_id is None:
            self.write("Invalid ID format.")
            return

        await self.service.delete(product_id)
        self.write("Product deleted successfully!")

    async def search_by_price(self) -> None:
        min_price = parse_decimal(self.read_line("Enter minimum price: "))
        if min_price is None:
            self.write("Invalid price format.")
            return
        max_price = parse_decimal(self.read_line("Enter maximum price: "))
        if max_price is None:
            self.write("Invalid price format.")
            return

        products = await self.service.get_by_price_range(min_price, max_price)
        self.write(f"\nProducts between ${min_price} and ${max_price}:")
        self._show(products)

    async def update_quantity(self) -> None:
        product_id = parse_int(self.read_line("Enter product ID to update quantity: "))
        if product_id is None:
            self.write("Invalid ID format.")
            return
        quantity = parse_int(self.read_line("Enter new quantity: "))
        if quantity is None:
            self.write("Invalid quantity format.")
            return

        await self.service.update_quantity(product_id, quantity)
        self.write("Product quantity updated successfully!")
