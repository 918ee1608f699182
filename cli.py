# cli.py
import os
import sys
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from products_sdk import CatalogAPIError, CatalogClient

console = Console()
c = CatalogClient(base_url=os.getenv("PRODUCTS_API_URL", "http://127.0.0.1:8085"))

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Product Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", justify="right", width=5)
    table.add_column("Name", style="bold", width=22)
    table.add_column("Description", width=32)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Stock", justify="right", width=7)
    table.add_column("Category", width=14)
    table.add_column("Created", width=17)

    for p in products:
        created = p.get("createdAt") or ""
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name") or "N/A",
            p.get("description") or "",
            f"${float(p.get('price', 0)):.2f}",
            str(p.get("stockQuantity", 0)),
            p.get("category") or "",
            created[:16].replace("T", " "),
        )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    API errors are shown in a status panel and turn into a None result.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)
    except CatalogAPIError as e:
        status_message = f"Error: {e.message} (HTTP {e.status_code})"
        console.print(show_status(status_message, False))
        return None
    except OSError as e:
        status_message = f"Error: cannot reach {c.base_url}: {e}"
        console.print(show_status(status_message, False))
        return None

    if success_msg:
        status_message = success_msg
        console.print(show_status(success_msg, True))
    # update/delete return None on success
    return True if result is None else result


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []
    return WordCompleter([str(p.get("id")) for p in product_cache], ignore_case=True)


def get_category_completer():
    categories = {p.get("category") for p in product_cache if p.get("category")}
    return WordCompleter(sorted(categories), ignore_case=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_price(message: str, default: str = "10.00") -> Decimal:
    while True:
        raw = Prompt.ask(message, default=default)
        try:
            return Decimal(raw)
        except InvalidOperation:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_id() -> Optional[int]:
    raw = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
    try:
        return int(raw)
    except ValueError:
        console.print(show_status(f"'{raw}' is not a product ID", False))
        return None


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    name = prompt_with_autocomplete("Product name", default=current.get("name") or "")
    description = prompt_with_autocomplete("Description", default=current.get("description") or "")
    price = ask_price("💰 Price", default=str(current.get("price", "10.00")))
    stock = IntPrompt.ask("📦 Stock quantity", default=int(current.get("stockQuantity", 0)))
    category = prompt_with_autocomplete(
        "🏷️ Category", completer=get_category_completer(), default=current.get("category") or ""
    )
    return {
        "name": name,
        "price": price,
        "stock_quantity": stock,
        "description": description or None,
        "category": category or None,
    }


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Products API",
        "[bold blue]Catalog CLI with Autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache

    console.clear()
    console.print(create_header())
    product_cache = try_api(c.list_products) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "4", "✏️ Update product"),
            ("2", "ℹ️ Get product by ID", "5", "🗑️ Delete product"),
            ("3", "➕ Create product", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 6)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded successfully")
            if products is not None:
                product_cache = products
                show_products(products)

        elif choice == "2":
            pid = ask_product_id()
            if pid is not None:
                resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
                if resp:
                    show_products([resp])

        elif choice == "3":
            fields = ask_product_fields()
            resp = try_api(c.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                product_cache = try_api(c.list_products) or []

        elif choice == "4":
            pid = ask_product_id()
            if pid is None:
                continue
            current = try_api(c.get_product, pid)
            if not current:
                continue
            fields = ask_product_fields(current)
            if try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields):
                show_products([c.get_product(pid)])
                product_cache = []

        elif choice == "5":
            pid = ask_product_id()
            if pid is not None and Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                if try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted"):
                    product_cache = []

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
