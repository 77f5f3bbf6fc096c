class Product:
    """
    A single inventory item stored in a sector.

    The product's demand is the heap key: the higher the cumulative demand,
    the closer the product sits to the root of its sector. Stock is not an
    ordering key, so restocking never requires a heap repair.
    """

    def __init__(self, product_id: int, name: str, stock: int, day: int, demand: int = 0):
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            raise ValueError(
                f"Product id must be an int, got {type(product_id).__name__}")
        if stock < 0:
            raise ValueError(f"Stock must be non-negative, got {stock}")

        self.id = product_id
        self.name = name
        self.stock = stock
        self.demand = demand
        self.creation_day = day
        self.last_purchase_day = day

    def get_id(self) -> int:
        return self.id

    def get_name(self) -> str:
        return self.name

    def get_stock(self) -> int:
        return self.stock

    def set_stock(self, stock: int) -> None:
        self.stock = stock

    def update_stock(self, delta: int) -> None:
        """Adjust stock by delta (negative on purchase)."""
        self.stock += delta

    def get_demand(self) -> int:
        return self.demand

    def set_demand(self, demand: int) -> None:
        self.demand = demand

    def update_demand(self, delta: int) -> None:
        self.demand += delta

    def get_creation_day(self) -> int:
        return self.creation_day

    def get_last_purchase_day(self) -> int:
        return self.last_purchase_day

    def set_last_purchase_day(self, day: int) -> None:
        self.last_purchase_day = day

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return False
        return (self.id == other.id and
                self.name == other.name and
                self.stock == other.stock and
                self.demand == other.demand and
                self.creation_day == other.creation_day and
                self.last_purchase_day == other.last_purchase_day)

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (f"({self.id}, {self.name}, {self.stock}, {self.creation_day}, "
                f"{self.last_purchase_day}, {self.demand})")

    def __repr__(self) -> str:
        return (f"Product(id={self.id}, name={self.name!r}, stock={self.stock}, "
                f"demand={self.demand})")
