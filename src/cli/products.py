"""Terminal UI for the product inventory.

One-shot commands (``list``, ``show``, ``add``, ``edit``, ``delete``) and an
``interactive`` session that mirrors the single-page form/table screen.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from src.inventory.client import (
    InventoryApiClient,
    InventoryController,
    InventoryState,
    adapt_products,
    format_price,
)
from src.inventory.client.state import FORM_FIELDS
from src.inventory.core.errors import TransportError
from src.inventory.runtime.context import get_config

console = Console()

products_app = typer.Typer(help="📦 List, search and edit products through the API")

T = TypeVar("T")


def confirm_action(message: str) -> bool:
    return Confirm.ask(message, console=console)


def show_alert(message: str) -> None:
    console.print(f"[red]❌ {message}[/red]")


def build_client() -> InventoryApiClient:
    return InventoryApiClient.from_config(get_config().client)


def render_products(state: InventoryState) -> RenderableType:
    """Product list as the screen shows it: loading, empty, or the table."""
    if state.loading:
        return Text("Loading...")

    products = state.filtered_products
    if not products:
        return Text("No products found.", style="yellow")

    symbol = get_config().client.currency_symbol
    table = Table(title="Product List")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Description")
    table.add_column("Price", justify="right")
    table.add_column("Quantity", justify="right")

    for product in products:
        table.add_row(
            str(product.id),
            product.name,
            product.description or "-",
            format_price(product.price, symbol),
            str(product.quantity),
        )
    return table


def render_form(state: InventoryState) -> RenderableType:
    title = "Edit Product" if state.is_editing else "Add New Product"
    form = state.form_data
    lines = [
        f"[bold]Name:[/bold] {form.name}",
        f"[bold]Description:[/bold] {form.description}",
        f"[bold]Price:[/bold] {form.price}",
        f"[bold]Quantity:[/bold] {form.quantity}",
    ]
    return Panel("\n".join(lines), title=title, border_style="blue")


def _run_with_controller(
    action: Callable[[InventoryController], Awaitable[T]],
    confirm: Callable[[str], bool] = confirm_action,
) -> T:
    async def runner() -> T:
        async with build_client() as client:
            controller = InventoryController(client, confirm=confirm, alert=show_alert)
            return await action(controller)

    return asyncio.run(runner())


def _confirmer(yes: bool) -> Callable[[str], bool]:
    return (lambda _message: True) if yes else confirm_action


@products_app.command("list")
def list_products(
    search: str = typer.Option("", "--search", "-s", help="Filter by name (case-insensitive)"),
) -> None:
    """Show the product table."""

    async def action(controller: InventoryController) -> InventoryState:
        await controller.mount()
        controller.search(search)
        return controller.state

    state = _run_with_controller(action)
    console.print(render_products(state))


@products_app.command("show")
def show_product(item_id: int = typer.Argument(..., help="Product ID")) -> None:
    """Show a single product."""

    async def fetch() -> object:
        async with build_client() as client:
            return await client.get_product(item_id)

    try:
        body = asyncio.run(fetch())
    except TransportError as e:
        if e.status_code == 404:
            show_alert(f"Product {item_id} not found")
        else:
            show_alert(f"Failed to load product: {e}")
        raise typer.Exit(code=1) from e

    console.print(render_products(InventoryState(products=tuple(adapt_products(body)))))


@products_app.command("add")
def add_product(
    name: str = typer.Option(..., "--name", "-n", help="Product name"),
    description: str = typer.Option(..., "--description", "-d", help="Description"),
    price: str = typer.Option(..., "--price", "-p", help="Unit price, e.g. 12.50"),
    quantity: str = typer.Option(..., "--quantity", "-q", help="Units in stock"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Add a new product."""

    async def action(controller: InventoryController) -> bool:
        controller.start_add()
        for field, value in zip(FORM_FIELDS, (name, description, price, quantity)):
            controller.set_field(field, value)
        return await controller.submit()

    if not _run_with_controller(action, confirm=_confirmer(yes)):
        raise typer.Exit(code=1)
    console.print(f"[green]✅ Added product '{name}'[/green]")


@products_app.command("edit")
def edit_product(
    item_id: int = typer.Argument(..., help="Product ID"),
    name: str | None = typer.Option(None, "--name", "-n", help="New name"),
    description: str | None = typer.Option(None, "--description", "-d", help="New description"),
    price: str | None = typer.Option(None, "--price", "-p", help="New unit price"),
    quantity: str | None = typer.Option(None, "--quantity", "-q", help="New stock quantity"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Update a product. Fields not given keep their current value."""

    async def action(controller: InventoryController) -> bool:
        await controller.mount()
        product = controller.find(item_id)
        if product is None:
            show_alert(f"Product {item_id} not found")
            return False
        controller.start_edit(product)
        for field, value in zip(FORM_FIELDS, (name, description, price, quantity)):
            if value is not None:
                controller.set_field(field, value)
        return await controller.submit()

    if not _run_with_controller(action, confirm=_confirmer(yes)):
        raise typer.Exit(code=1)
    console.print(f"[green]✅ Updated product {item_id}[/green]")


@products_app.command("delete")
def delete_product(
    item_id: int = typer.Argument(..., help="Product ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Delete a product."""

    async def action(controller: InventoryController) -> bool:
        return await controller.delete(item_id)

    if not _run_with_controller(action, confirm=_confirmer(yes)):
        raise typer.Exit(code=1)
    console.print(f"[green]✅ Deleted product {item_id}[/green]")


def _prompt_form(controller: InventoryController) -> None:
    form = controller.state.form_data
    for field in FORM_FIELDS:
        current = getattr(form, field)
        value = Prompt.ask(field.capitalize(), default=str(current), console=console)
        controller.set_field(field, value)


def _ask_product_id() -> int | None:
    raw = Prompt.ask("Product ID", console=console).strip()
    if not raw.isdigit():
        show_alert(f"Product {raw} not found")
        return None
    return int(raw)


async def _interactive(controller: InventoryController) -> None:
    await controller.mount()
    while True:
        console.print(
            Group(render_products(controller.state), render_form(controller.state))
        )
        choice = Prompt.ask(
            "[s]earch [a]dd [e]dit [c]ancel [d]elete [r]efresh [q]uit",
            choices=["s", "a", "e", "c", "d", "r", "q"],
            default="r",
            console=console,
        )
        if choice == "q":
            return
        if controller.state.loading and choice in {"a", "e", "d"}:
            show_alert("Please wait for the current operation to finish.")
            continue

        if choice == "s":
            controller.search(Prompt.ask("Search by name", default="", console=console))
        elif choice == "r":
            await controller.fetch_products()
        elif choice == "c":
            controller.cancel()
        elif choice == "a":
            # A draft left by a failed add is kept for another try
            if controller.state.is_editing:
                controller.start_add()
            _prompt_form(controller)
            await controller.submit()
        elif choice == "e":
            item_id = _ask_product_id()
            if item_id is None:
                continue
            product = controller.find(item_id)
            if product is None:
                show_alert(f"Product {item_id} not found")
                continue
            if controller.state.editing_target != product:
                controller.start_edit(product)
            _prompt_form(controller)
            await controller.submit()
        elif choice == "d":
            item_id = _ask_product_id()
            if item_id is not None:
                await controller.delete(item_id)


@products_app.command("interactive")
def interactive() -> None:
    """Open the product manager: table, search and the add/edit form on one screen."""
    try:
        _run_with_controller(_interactive)
    except KeyboardInterrupt:
        console.print("\n[yellow]Bye[/yellow]")
