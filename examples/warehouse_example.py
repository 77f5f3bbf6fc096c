#!/usr/bin/env python3
"""
Warehouse Example

Walks through the warehouse index operations and shows the sectors after
each step:
- Adding products and evicting the root of a full sector
- Restocking, purchasing and deleting
- Open-addressed insertion with better_add_product
- Diagnostic info and statistics

Run with: python examples/warehouse_example.py
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from warehouse import Warehouse, SectorIndexError

console = Console()


def print_header(title: str, subtitle: str = ""):
    full_title = f"[bold blue]{title}[/bold blue]"
    if subtitle:
        full_title += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel(full_title, style="bright_blue", box=box.DOUBLE, padding=(1, 2)))


def print_step(step_num: int, title: str, description: str = ""):
    step_text = f"[bold yellow]Step {step_num}: {title}[/bold yellow]"
    if description:
        step_text += f"\n[dim italic]{description}[/dim italic]"
    console.print(step_text)
    console.print()


def print_info(message: str):
    console.print(f"[bold cyan]ℹ[/bold cyan] {message}")


def print_success(message: str):
    console.print(f"[bold green]✓[/bold green] {message}")


def sectors_table(warehouse: Warehouse, title: str = "Sectors") -> Table:
    """Render every sector as a row, products listed in heap position order."""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Sector", style="cyan", justify="right")
    table.add_column("Size", style="green", justify="right")
    table.add_column("Products (id:demand)", style="white")

    for index, sector in enumerate(warehouse.get_sectors()):
        cells = []
        for position, product in enumerate(sector, start=1):
            cell = f"{product.get_id()}:{product.get_demand()}"
            if position == 1:
                cell = f"[bold magenta]{cell}[/bold magenta]"
            if warehouse.get_home_sector(product.get_id()) != index:
                cell = f"[yellow]{cell}*[/yellow]"
            cells.append(cell)
        table.add_row(str(index), f"{sector.get_size()}/{sector.get_capacity()}",
                      "  ".join(cells) or "[dim]empty[/dim]")

    return table


def demonstrate_add_and_evict(warehouse: Warehouse):
    print_step(1, "Adding Products",
               "Products hash to sector id mod 10; a full sector evicts its root")

    for product_id, name, demand in [(13, "Apples", 5), (23, "Bananas", 9), (103, "Cherries", 3),
                                     (33, "Dates", 1), (43, "Elderberries", 2)]:
        warehouse.add_product(product_id, name, 10, 1, demand)
    console.print(sectors_table(warehouse, "Sector 3 filled"))

    print_info("Adding Figs (demand 20) to the full sector 3...")
    warehouse.add_product(53, "Figs", 10, 1, 20)
    console.print(sectors_table(warehouse, "Bananas (the root) was evicted"))
    print_success("Sector 3 still holds 5 products")
    console.print()


def demonstrate_point_operations(warehouse: Warehouse):
    print_step(2, "Restock, Purchase and Delete")

    warehouse.restock_product(13, 15)
    _, _, apples = warehouse.find_product(13)
    print_info(f"Restocked Apples: stock is now {apples.get_stock()}")

    warehouse.purchase_product(13, 2, 4)
    print_info(f"Purchased 4 Apples on day 2: stock {apples.get_stock()}, "
               f"demand {apples.get_demand()}")

    warehouse.purchase_product(13, 3, 1000)
    print_info(f"Purchase of 1000 Apples rejected: stock still {apples.get_stock()}")

    warehouse.delete_product(33)
    console.print(sectors_table(warehouse, "After deleting Dates"))
    console.print()


def demonstrate_better_add(warehouse: Warehouse):
    print_step(3, "Open-Addressed Insertion",
               "better_add_product probes the next sectors before evicting")

    warehouse.add_product(63, "Grapes", 10, 4, 4)
    warehouse.better_add_product(73, "Honeydew", 10, 4, 6)
    console.print(sectors_table(warehouse, "Honeydew spilled into sector 4 (*)"))

    sector_index, position, _ = warehouse.find_product(73)
    print_success(f"find_product(73) -> sector {sector_index}, position {position}")
    console.print()


def demonstrate_diagnostics(warehouse: Warehouse):
    print_step(4, "Diagnostics")

    info = warehouse.get_info()
    stats = warehouse.get_stats()

    table = Table(title="Warehouse Info", box=box.SIMPLE)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Products", str(info.total_products))
    table.add_row("Utilization", f"{info.utilization:.0%}")
    table.add_row("Displaced products", str(info.displaced_products))
    table.add_row("Full sectors", ", ".join(map(str, info.full_sectors)) or "-")
    table.add_row("Evictions", str(stats.evictions))
    table.add_row("Eviction rate", f"{stats.eviction_rate:.0%}")
    table.add_row("Rejected purchases", str(stats.rejected_purchases))
    console.print(table)

    try:
        warehouse.get_sectors()[0].get(1)
    except SectorIndexError as e:
        print_info(f"Positional access is bounds-checked: {e}")

    console.print(Rule("[dim]Raw dump[/dim]"))
    console.print(str(warehouse), markup=False)


def main():
    print_header("Warehouse Index Demonstration",
                 "Hashed sectors of bounded, demand-ordered heaps")

    warehouse = Warehouse()
    demonstrate_add_and_evict(warehouse)
    demonstrate_point_operations(warehouse)
    demonstrate_better_add(warehouse)
    demonstrate_diagnostics(warehouse)

    console.print(Rule("[bold green]Demonstration Complete![/bold green]"))


if __name__ == "__main__":
    main()
