import logging
from typing import Optional

from cachetools import LRUCache

logger = logging.getLogger(__name__)


class PlacementIndex:
    """
    Remembers which sector holds a product stored outside its home sector.

    Open-addressed inserts break the id -> home sector mapping, so lookups for
    those products would otherwise have to scan every sector. Entries are only
    hints: the cache is bounded, so old hints fall out, and callers must verify
    a hint against the sector before trusting it.
    """

    def __init__(self, maxsize: int = 1000):
        self._hints: LRUCache[int, int] = LRUCache(maxsize=maxsize)

    def record(self, product_id: int, sector_index: int) -> None:
        self._hints[product_id] = sector_index

    def forget(self, product_id: int) -> None:
        if self._hints.pop(product_id, None) is not None:
            logger.debug("Dropped placement hint for product %d", product_id)

    def hint(self, product_id: int) -> Optional[int]:
        return self._hints.get(product_id)

    def clear(self) -> None:
        self._hints.clear()

    def __contains__(self, product_id: int) -> bool:
        return product_id in self._hints

    def __len__(self) -> int:
        return len(self._hints)
