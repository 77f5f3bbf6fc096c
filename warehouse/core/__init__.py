from .exceptions import (
    WarehouseException,
    SectorIndexError,
    SectorCapacityError,
)
from .product import Product

__all__ = [
    "WarehouseException",
    "SectorIndexError",
    "SectorCapacityError",
    "Product",
]
