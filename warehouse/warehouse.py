import logging
from typing import Iterator, Optional

from warehouse.config import WarehouseConfig, DEFAULT_CONFIG
from warehouse.core.product import Product
from warehouse.placement import PlacementIndex
from warehouse.sector import Sector
from warehouse.stats import WarehouseStats, WarehouseInfo, SectorInfo

logger = logging.getLogger(__name__)


class Warehouse:
    """
    Fixed-size hash table of sectors, each sector a bounded max-heap on demand.

    The table is never rehashed. When a product's home sector (id mod
    num_sectors) is full, space is reclaimed by evicting from the sector's heap
    instead:

    1. add_product evicts the current root of the home sector
    2. better_add_product first probes the following sectors (open addressing)
       and only evicts when every sector is full

    restock_product, delete_product and purchase_product only look in the home
    sector. Products placed elsewhere by better_add_product are reachable
    through find_product.
    """

    def __init__(self, config: Optional[WarehouseConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.sectors: list[Sector] = [
            Sector(self.config.sector_capacity)
            for _ in range(self.config.num_sectors)
        ]
        self.placements = PlacementIndex(self.config.placement_cache_size)
        self.stats = WarehouseStats()

    def get_home_sector(self, product_id: int) -> int:
        return product_id % self.config.num_sectors

    def add_product(self, product_id: int, name: str, stock: int, day: int, demand: int) -> None:
        """
        Add a product to its home sector, evicting the sector's root if it is full.

        Args:
            product_id: Id of the product; selects the home sector
            name: Product name
            stock: Initial stock
            day: Creation day
            demand: Initial demand (heap key)
        """
        self._evict_if_needed(product_id)
        self._add_to_end(product_id, name, stock, day, demand)
        self._fix_heap(product_id)
        self.stats.insertions += 1

    def _add_to_end(self, product_id: int, name: str, stock: int, day: int, demand: int) -> None:
        sector = self.sectors[self.get_home_sector(product_id)]
        sector.add(Product(product_id, name, stock, day, demand))

    def _fix_heap(self, product_id: int) -> None:
        sector = self.sectors[self.get_home_sector(product_id)]
        if sector.get_size() != 1:
            sector.swim(sector.get_size())

    def _evict_if_needed(self, product_id: int) -> None:
        index = self.get_home_sector(product_id)
        sector = self.sectors[index]
        if not sector.is_full():
            return

        # The root is evicted, not the least popular leaf.
        sector.swap(1, sector.get_size())
        evicted = sector.delete_last()
        if not sector.is_empty():
            sector.sink(1)

        self.placements.forget(evicted.get_id())
        self.stats.evictions += 1
        logger.debug("Evicted product %d (demand %d) from sector %d",
                     evicted.get_id(), evicted.get_demand(), index)

    def restock_product(self, product_id: int, amount: int) -> None:
        """Add amount to the product's stock. No-op if the product is absent."""
        if amount < 0:
            raise ValueError(f"Restock amount must be non-negative, got {amount}")

        sector = self.sectors[self.get_home_sector(product_id)]
        for n in range(sector.get_size(), 0, -1):
            product = sector.get(n)
            if product.get_id() == product_id:
                product.update_stock(amount)
                self.stats.restocks += 1
                return

        self._record_miss("restock", product_id)

    def delete_product(self, product_id: int) -> None:
        """
        Delete a product from its home sector and repair the heap.

        The scan keeps going after a match over the shrunken sector, and the
        moved-in element is only sunk, never swum.
        """
        sector = self.sectors[self.get_home_sector(product_id)]
        found = False
        for n in range(sector.get_size(), 0, -1):
            if n > sector.get_size():
                continue
            if sector.get(n).get_id() != product_id:
                continue

            sector.swap(n, sector.get_size())
            sector.delete_last()
            if n <= sector.get_size():
                sector.sink(n)
            found = True
            self.stats.deletions += 1

        if found:
            self.placements.forget(product_id)
        else:
            self._record_miss("delete", product_id)

    def purchase_product(self, product_id: int, day: int, amount: int) -> None:
        """
        Record a purchase of amount units on day.

        Stock, demand and last purchase day are only touched when enough stock
        is available. The position is then repaired with sink even though
        demand can only grow.
        """
        if amount < 0:
            raise ValueError(f"Purchase amount must be non-negative, got {amount}")

        sector = self.sectors[self.get_home_sector(product_id)]
        for n in range(sector.get_size(), 0, -1):
            product = sector.get(n)
            if product.get_id() != product_id:
                continue

            if product.get_stock() >= amount:
                product.update_stock(-amount)
                product.update_demand(amount)
                product.set_last_purchase_day(day)
                sector.sink(n)
                self.stats.purchases += 1
            else:
                self.stats.rejected_purchases += 1
                logger.debug("Rejected purchase of %d x product %d: only %d in stock",
                             amount, product_id, product.get_stock())
            return

        self._record_miss("purchase", product_id)

    def better_add_product(self, product_id: int, name: str, stock: int, day: int, demand: int) -> None:
        """
        Add a product to the first sector with room, probing from its home sector.

        Falls back to add_product (root eviction in the home sector) when every
        sector is full.
        """
        home = self.get_home_sector(product_id)
        index = home
        while True:
            sector = self.sectors[index]
            if not sector.is_full():
                sector.add(Product(product_id, name, stock, day, demand))
                sector.swim(sector.get_size())
                self.stats.insertions += 1

                if index != home:
                    self.placements.record(product_id, index)
                    self.stats.displaced_insertions += 1
                    logger.debug("Placed product %d in sector %d (home sector %d is full)",
                                 product_id, index, home)
                return

            index = (index + 1) % self.config.num_sectors
            if index == home:
                break

        logger.debug("All sectors full, falling back to eviction for product %d", product_id)
        self.stats.fallback_insertions += 1
        self.add_product(product_id, name, stock, day, demand)

    def find_product(self, product_id: int) -> Optional[tuple[int, int, Product]]:
        """
        Locate a product anywhere in the warehouse.

        Returns:
            (sector index, position, product), or None if the product is absent
        """
        hinted = self.placements.hint(product_id)
        if hinted is not None:
            position = self.sectors[hinted].find(product_id)
            if position is not None:
                return hinted, position, self.sectors[hinted].get(position)
            self.placements.forget(product_id)

        home = self.get_home_sector(product_id)
        for offset in range(self.config.num_sectors):
            index = (home + offset) % self.config.num_sectors
            position = self.sectors[index].find(product_id)
            if position is not None:
                if index != home:
                    self.placements.record(product_id, index)
                return index, position, self.sectors[index].get(position)

        return None

    def get_sectors(self) -> list[Sector]:
        return self.sectors

    def get_stats(self) -> WarehouseStats:
        return self.stats

    def get_info(self) -> WarehouseInfo:
        """Get diagnostic information about every sector."""
        sectors = tuple(
            SectorInfo(
                index=i,
                size=sector.get_size(),
                capacity=sector.get_capacity(),
                utilization=sector.get_size() / sector.get_capacity(),
                root_demand=None if sector.is_empty() else sector.get(1).get_demand(),
            )
            for i, sector in enumerate(self.sectors)
        )
        total_products = sum(s.size for s in sectors)
        total_capacity = sum(s.capacity for s in sectors)
        displaced = sum(
            1 for i, sector in enumerate(self.sectors)
            for product in sector
            if self.get_home_sector(product.get_id()) != i
        )

        return WarehouseInfo(
            num_sectors=len(self.sectors),
            total_products=total_products,
            total_capacity=total_capacity,
            utilization=total_products / total_capacity,
            displaced_products=displaced,
            sectors=sectors,
        )

    def _record_miss(self, operation: str, product_id: int) -> None:
        self.stats.missed_lookups += 1
        logger.debug("%s: product %d not found in sector %d",
                     operation, product_id, self.get_home_sector(product_id))

    def __len__(self) -> int:
        return sum(len(sector) for sector in self.sectors)

    def __iter__(self) -> Iterator[Product]:
        for sector in self.sectors:
            yield from sector

    def __str__(self) -> str:
        warehouse_string = "[\n"
        for sector in self.sectors:
            warehouse_string += "\t" + str(sector) + "\n"
        return warehouse_string + "]"
