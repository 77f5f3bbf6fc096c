from typing import Iterator, Optional

from warehouse.core.exceptions import SectorIndexError, SectorCapacityError
from warehouse.core.product import Product


class Sector:
    """
    Array-backed binary max-heap of products ordered by demand.

    Layout:
    1. Slot 0 is never used, so positions are 1-indexed
    2. parent(p) = p // 2, children(p) = 2p and 2p + 1
    3. Slots size+1 .. capacity are free

    The sector only offers primitives (add, swap, delete_last, sink, swim).
    Deciding when to evict or repair is left to the Warehouse.
    """

    DEFAULT_CAPACITY = 5

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"Sector capacity must be positive, got {capacity}")

        self.capacity = capacity
        self.size = 0
        self.products: list[Optional[Product]] = [None] * (capacity + 1)

    def get_size(self) -> int:
        return self.size

    def get_capacity(self) -> int:
        return self.capacity

    def is_empty(self) -> bool:
        return self.size == 0

    def is_full(self) -> bool:
        return self.size >= self.capacity

    def get(self, position: int) -> Product:
        """Return the product at a 1-indexed position."""
        self._check_position(position)
        return self.products[position]

    def add(self, product: Product) -> None:
        """Append a product at position size + 1 without repairing the heap."""
        if self.is_full():
            raise SectorCapacityError(
                f"Sector is full ({self.size}/{self.capacity}), cannot add product {product.get_id()}")

        self.size += 1
        self.products[self.size] = product

    def swap(self, i: int, j: int) -> None:
        self._check_position(i)
        self._check_position(j)
        self.products[i], self.products[j] = self.products[j], self.products[i]

    def delete_last(self) -> Product:
        """Drop the product at the last position and return it."""
        if self.is_empty():
            raise SectorIndexError("Cannot delete from an empty sector")

        product = self.products[self.size]
        self.products[self.size] = None
        self.size -= 1
        return product

    def sink(self, position: int) -> None:
        """Move the product at position down until no child has larger demand."""
        self._check_position(position)

        k = position
        while 2 * k <= self.size:
            child = 2 * k
            if child < self.size and self._less(child, child + 1):
                child += 1
            if not self._less(k, child):
                break
            self.swap(k, child)
            k = child

    def swim(self, position: int) -> None:
        """Move the product at position up while its parent has smaller demand."""
        self._check_position(position)

        k = position
        while k > 1 and self._less(k // 2, k):
            self.swap(k // 2, k)
            k = k // 2

    def find(self, product_id: int) -> Optional[int]:
        """Return the highest position holding product_id, or None."""
        for position in range(self.size, 0, -1):
            if self.products[position].get_id() == product_id:
                return position
        return None

    def is_heap(self) -> bool:
        """Check that every parent's demand is at least its children's."""
        return all(not self._less(p // 2, p) for p in range(2, self.size + 1))

    def _less(self, i: int, j: int) -> bool:
        return self.products[i].get_demand() < self.products[j].get_demand()

    def _check_position(self, position: int) -> None:
        if not (1 <= position <= self.size):
            raise SectorIndexError(
                f"Position {position} out of range [1, {self.size}]")

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Product]:
        for position in range(1, self.size + 1):
            yield self.products[position]

    def __str__(self) -> str:
        return "[" + ", ".join(str(p) for p in self) + "]"

    def __repr__(self) -> str:
        return f"Sector(size={self.size}, capacity={self.capacity})"
