import pytest

from warehouse import Warehouse, WarehouseConfig, DEFAULT_CONFIG


class TestWarehouseConfig:

    def test_defaults(self):
        config = WarehouseConfig()

        assert config.num_sectors == 10
        assert config.sector_capacity == 5
        assert config.placement_cache_size == 1000
        assert config == DEFAULT_CONFIG

    def test_config_is_immutable(self):
        config = WarehouseConfig()

        with pytest.raises(AttributeError):
            config.num_sectors = 20

    @pytest.mark.parametrize("field", ["num_sectors", "sector_capacity", "placement_cache_size"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_values_raise_error(self, field, value):
        with pytest.raises(ValueError, match=f"{field} must be a positive int"):
            WarehouseConfig(**{field: value})

    def test_non_int_value_raises_error(self):
        with pytest.raises(ValueError, match="num_sectors must be a positive int, got 2.5"):
            WarehouseConfig(num_sectors=2.5)

    def test_warehouse_uses_default_config(self):
        assert Warehouse().config is DEFAULT_CONFIG
