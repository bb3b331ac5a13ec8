"""
Model registration: import every table model here so SQLModel.metadata knows it
before the schema is created.
"""
from apps.products.models import Product

__all__ = ["Product"]
