"""Custom exceptions for the warehouse index."""


class WarehouseException(Exception):
    """Base exception for warehouse-related errors."""
    pass


class SectorIndexError(WarehouseException, IndexError):
    """Raised when a sector position falls outside [1, size]."""
    pass


class SectorCapacityError(WarehouseException):
    """Raised when adding to a sector that is already at capacity."""
    pass
