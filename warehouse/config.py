from dataclasses import dataclass


@dataclass(frozen=True)
class WarehouseConfig:
    """
    Sizing for a Warehouse.

    Args:
        num_sectors: Number of hash buckets; a product's home sector is id mod num_sectors
        sector_capacity: Maximum number of products held by each sector's heap
        placement_cache_size: Maximum number of displaced-product hints to remember
    """
    num_sectors: int = 10
    sector_capacity: int = 5
    placement_cache_size: int = 1000

    def __post_init__(self):
        for name in ("num_sectors", "sector_capacity", "placement_cache_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive int, got {value!r}")


DEFAULT_CONFIG = WarehouseConfig()
