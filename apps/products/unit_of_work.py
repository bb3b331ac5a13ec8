from framework.repository.unit_of_work import UnitOfWork
from .repository import ProductRepository


class ProductUnitOfWork(UnitOfWork):
    """Unit of work for the product module."""

    def __init__(self, session=None):
        super().__init__(session)
        self.products = ProductRepository(self.session)
