from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field, Column
from framework.database.types import CENT, Cents


def to_price(value: Decimal) -> Decimal:
    """Round a price to whole cents."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class Product(SQLModel, table=True):
    """Product stock record."""
    __tablename__ = "products"
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
        {"sqlite_autoincrement": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255, description="Product name")
    price: Decimal = Field(sa_column=Column(Cents(), nullable=False), description="Unit price, stored as cents")
    quantity: int = Field(default=0, description="Units in stock")

    def describe(self) -> str:
        return f"Id: {self.id}, Name: {self.name}, Price: ${self.price}, Quantity: {self.quantity}"
