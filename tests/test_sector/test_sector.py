"""
Tests for the Sector bounded heap.

Covers:
- Positional access and its bounds
- Capacity enforcement on add
- swap / delete_last primitives
- sink and swim heap repair
- Iteration, lookup and string form
"""

import pytest

from warehouse.core import Product, SectorIndexError, SectorCapacityError
from warehouse.sector import Sector


def make_product(product_id: int, demand: int) -> Product:
    return Product(product_id, f"item-{product_id}", 10, 0, demand)


def demands(sector: Sector) -> list[int]:
    return [p.get_demand() for p in sector]


class TestSectorBasics:
    """Test construction, size and positional access."""

    def test_new_sector_is_empty(self):
        sector = Sector()

        assert sector.get_size() == 0
        assert sector.get_capacity() == Sector.DEFAULT_CAPACITY == 5
        assert sector.is_empty()
        assert not sector.is_full()
        assert len(sector) == 0

    def test_invalid_capacity_raises_error(self):
        with pytest.raises(ValueError, match="Sector capacity must be positive, got 0"):
            Sector(0)

    def test_add_appends_at_last_position(self):
        """Test that add places products at size + 1 without reordering."""
        sector = Sector()
        sector.add(make_product(1, 1))
        sector.add(make_product(2, 50))

        assert sector.get_size() == 2
        assert sector.get(1).get_id() == 1
        assert sector.get(2).get_id() == 2

    def test_add_to_full_sector_raises_error(self):
        sector = Sector(2)
        sector.add(make_product(1, 1))
        sector.add(make_product(2, 2))

        assert sector.is_full()
        with pytest.raises(SectorCapacityError, match="Sector is full \\(2/2\\)"):
            sector.add(make_product(3, 3))
        assert sector.get_size() == 2

    def test_get_out_of_range_raises_error(self):
        """Test that positions outside [1, size] are rejected."""
        sector = Sector()
        sector.add(make_product(1, 1))

        with pytest.raises(SectorIndexError, match="Position 0 out of range \\[1, 1\\]"):
            sector.get(0)

        with pytest.raises(SectorIndexError, match="Position 2 out of range \\[1, 1\\]"):
            sector.get(2)

    def test_index_error_is_an_index_error(self):
        with pytest.raises(IndexError):
            Sector().get(1)


class TestSectorPrimitives:
    """Test swap and delete_last."""

    def setup_method(self):
        self.sector = Sector()
        for product_id, demand in [(1, 9), (2, 5), (3, 7)]:
            self.sector.add(make_product(product_id, demand))

    def test_swap(self):
        self.sector.swap(1, 3)

        assert self.sector.get(1).get_id() == 3
        assert self.sector.get(3).get_id() == 1

    def test_swap_with_self_is_harmless(self):
        self.sector.swap(2, 2)
        assert [p.get_id() for p in self.sector] == [1, 2, 3]

    def test_swap_out_of_range_raises_error(self):
        with pytest.raises(SectorIndexError):
            self.sector.swap(1, 4)

    def test_delete_last(self):
        removed = self.sector.delete_last()

        assert removed.get_id() == 3
        assert self.sector.get_size() == 2
        with pytest.raises(SectorIndexError):
            self.sector.get(3)

    def test_delete_last_on_empty_raises_error(self):
        with pytest.raises(SectorIndexError, match="Cannot delete from an empty sector"):
            Sector().delete_last()

    def test_slot_is_reusable_after_delete(self):
        self.sector.delete_last()
        self.sector.add(make_product(4, 1))

        assert self.sector.get(3).get_id() == 4


class TestSectorHeapRepair:
    """Test sink and swim."""

    def test_swim_moves_larger_demand_to_root(self):
        sector = Sector()
        for product_id, demand in [(1, 5), (2, 3), (3, 4), (4, 1)]:
            sector.add(make_product(product_id, demand))
        sector.add(make_product(5, 10))

        sector.swim(5)

        assert sector.get(1).get_id() == 5
        assert sector.is_heap()

    def test_swim_stops_when_parent_is_larger(self):
        sector = Sector()
        for product_id, demand in [(1, 10), (2, 3), (3, 4)]:
            sector.add(make_product(product_id, demand))
        sector.add(make_product(4, 6))

        sector.swim(4)

        assert demands(sector) == [10, 6, 4, 3]

    def test_swim_equal_demand_does_not_move(self):
        sector = Sector()
        sector.add(make_product(1, 5))
        sector.add(make_product(2, 5))

        sector.swim(2)

        assert sector.get(1).get_id() == 1

    def test_sink_moves_root_below_larger_child(self):
        """Test that sink picks the larger of the two children."""
        sector = Sector()
        for product_id, demand in [(1, 1), (2, 8), (3, 9), (4, 2), (5, 7)]:
            sector.add(make_product(product_id, demand))

        sector.sink(1)

        assert demands(sector) == [9, 8, 1, 2, 7]
        assert sector.is_heap()

    def test_sink_through_two_levels(self):
        sector = Sector()
        for product_id, demand in [(1, 0), (2, 8), (3, 3), (4, 2), (5, 7)]:
            sector.add(make_product(product_id, demand))

        sector.sink(1)

        assert demands(sector) == [8, 7, 3, 2, 0]
        assert sector.is_heap()

    def test_sink_on_leaf_is_noop(self):
        sector = Sector()
        sector.add(make_product(1, 5))
        sector.add(make_product(2, 9))

        sector.sink(2)

        assert demands(sector) == [5, 9]

    def test_is_heap_detects_violation(self):
        sector = Sector()
        sector.add(make_product(1, 1))
        sector.add(make_product(2, 2))

        assert not sector.is_heap()


class TestSectorLookup:
    """Test find, iteration and string form."""

    def test_find(self):
        sector = Sector()
        sector.add(make_product(13, 2))
        sector.add(make_product(23, 1))

        assert sector.find(23) == 2
        assert sector.find(13) == 1
        assert sector.find(33) is None

    def test_iteration_follows_positions(self):
        sector = Sector()
        for product_id in (3, 1, 2):
            sector.add(make_product(product_id, 0))

        assert [p.get_id() for p in sector] == [3, 1, 2]

    def test_string_representation(self):
        sector = Sector()
        assert str(sector) == "[]"

        sector.add(Product(3, "A", 4, 1, 2))
        sector.add(Product(13, "B", 5, 2, 1))

        assert str(sector) == "[(3, A, 4, 1, 1, 2), (13, B, 5, 2, 2, 1)]"
        assert repr(sector) == "Sector(size=2, capacity=5)"
