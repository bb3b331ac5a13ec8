"""
Column types shared by table models.
"""

from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy import BigInteger
from sqlalchemy.types import TypeDecorator

CENT = Decimal("0.01")


class Cents(TypeDecorator):
    """Decimal money stored as an integer number of cents.

    SQLite has no decimal storage class and keeps NUMERIC values as REAL, so
    the amount is persisted as an exact integer instead. Comparisons against
    the column bind through the same conversion, so filters stay exact.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return int(value.quantize(CENT, rounding=ROUND_HALF_UP).scaleb(2))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(int(value)).scaleb(-2)
