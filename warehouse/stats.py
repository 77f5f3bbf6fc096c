from dataclasses import dataclass, field
from typing import Optional


@dataclass
class WarehouseStats:
    """Operation counters for a Warehouse."""
    # Insertion counts
    insertions: int = 0
    evictions: int = 0
    displaced_insertions: int = 0
    fallback_insertions: int = 0

    # Point operation counts
    deletions: int = 0
    restocks: int = 0
    purchases: int = 0
    rejected_purchases: int = 0
    missed_lookups: int = 0

    @property
    def eviction_rate(self) -> float:
        """Fraction of insertions that had to evict a product."""
        return self.evictions / max(1, self.insertions)

    @property
    def purchase_success_rate(self) -> float:
        attempts = self.purchases + self.rejected_purchases
        return self.purchases / max(1, attempts)

    def reset(self) -> None:
        for name in self.__dataclass_fields__:
            setattr(self, name, 0)


@dataclass(frozen=True)
class SectorInfo:
    index: int
    size: int
    capacity: int
    utilization: float
    root_demand: Optional[int]


@dataclass(frozen=True)
class WarehouseInfo:
    """Diagnostic snapshot of every sector in a Warehouse."""
    num_sectors: int
    total_products: int
    total_capacity: int
    utilization: float
    displaced_products: int
    sectors: tuple[SectorInfo, ...] = field(default_factory=tuple)

    @property
    def full_sectors(self) -> list[int]:
        return [s.index for s in self.sectors if s.size >= s.capacity]
