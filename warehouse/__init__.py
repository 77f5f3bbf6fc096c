"""
Fixed-capacity inventory index.

A Warehouse hashes products into a fixed number of sectors by id; each sector
is a bounded max-heap ordered by demand.
"""

from .config import WarehouseConfig, DEFAULT_CONFIG
from .core import (
    Product,
    WarehouseException,
    SectorIndexError,
    SectorCapacityError,
)
from .placement import PlacementIndex
from .sector import Sector
from .stats import WarehouseStats, WarehouseInfo, SectorInfo
from .warehouse import Warehouse

__all__ = [
    "Warehouse",
    "WarehouseConfig",
    "DEFAULT_CONFIG",
    "Sector",
    "Product",
    "PlacementIndex",
    "WarehouseStats",
    "WarehouseInfo",
    "SectorInfo",
    "WarehouseException",
    "SectorIndexError",
    "SectorCapacityError",
]
