# cli.py
import argparse
import asyncio
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from shopsdk.camera import FileCamera, SnapshotCamera
from shopsdk.config import API_BASE, LOG_LEVEL, SNAPSHOT_URL, configure_logging
from shopsdk.errors import CameraPermissionError, InventoryError, ValidationError
from shopsdk.form import ProductForm
from shopsdk.models import Product
from shopsdk.products import ProductClient
from shopsdk.store import SyncStore
from shopsdk.transport import Transport

console = Console()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def format_price(price) -> str:
    return f"€{price}" if price is not None else ""


def show_products(products: Sequence[Product]):
    if not products:
        console.print("[italic yellow]No products found.[/italic yellow]")
        return

    table = Table(
        title="📦 Products",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Description", width=30)
    table.add_column("Photo", width=8)

    for p in products:
        table.add_row(
            p.key or "N/A",
            p.name or "Unnamed",
            format_price(p.price),
            p.description or "",
            "yes" if p.image else "",
        )
    console.print(table)


def show_form(form: ProductForm):
    title = f"✏️ Editing {form.editing_id}" if form.editing else "➕ New product"
    photo = "none"
    if form.image:
        photo = f"{form.image[:32]}..." if len(form.image) > 32 else form.image
    body = (
        f"[bold]Name:[/bold] {form.name}\n"
        f"[bold]Price:[/bold] {form.price}\n"
        f"[bold]Description:[/bold] {form.description}\n"
        f"[bold]Photo:[/bold] {photo}"
    )
    console.print(Panel(body, title=title, border_style="blue"))


def show_status(message: str, is_success: bool = True, title: str = "Status"):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title=title)


def set_status(message: str, is_success: bool = True, title: str = "Status"):
    console.print(show_status(message, is_success, title))


# ---------------------------
# API wrapper
# ---------------------------
async def try_api(fn, *args, description: str = "Processing...", success_msg: Optional[str] = None, spinner: bool = True):
    """
    Awaits fn(*args), behind a spinner unless fn prompts the user itself.
    Errors are shown as a status panel and None is returned, so the menu stays usable.
    """
    try:
        if not spinner:
            result = await fn(*args)
        else:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                transient=True,
                console=console,
            ) as progress:
                progress.add_task(description=description, total=None)
                result = await fn(*args)
    except ValidationError as e:
        set_status(e.reason, False, title="Validation")
        return None
    except CameraPermissionError as e:
        set_status(e.reason, False, title="Permission Denied")
        return None
    except InventoryError as e:
        set_status(f"Error: {e}", False, title="Error")
        return None

    if success_msg:
        set_status(success_msg, True)
    return result


# ---------------------------
# Interactive inventory screen
# ---------------------------
def product_completer(store: SyncStore) -> WordCompleter:
    ids = [p.key for p in store.products if p.key]
    return WordCompleter(ids, ignore_case=True, meta_dict={p.key: p.name or "Unnamed" for p in store.products if p.key})


def ask_image_path() -> Optional[str]:
    return Prompt.ask("📷 Image file (blank to cancel)", default="", console=console) or None


def make_camera():
    if SNAPSHOT_URL:
        return SnapshotCamera(SNAPSHOT_URL)
    return FileCamera(ask_image_path)


def confirm_delete(message: str) -> bool:
    return Confirm.ask(f"[red]{message}[/red]", console=console)


async def fill_form(session: PromptSession, form: ProductForm):
    form.name = await session.prompt_async("Name: ", default=form.name, style=custom_style)
    form.price = await session.prompt_async("Price (optional): ", default=form.price, style=custom_style)
    form.description = await session.prompt_async("Description (optional): ", default=form.description, style=custom_style)


async def save_form(form: ProductForm):
    label = "Saving..." if form.editing else "Adding..."
    notice = await try_api(form.save, description=label)
    if notice:
        set_status(notice.message, True, title=notice.title)
        show_products(form.store.products)


async def menu(store: SyncStore, form: ProductForm):
    session = PromptSession()

    console.clear()
    console.print(Panel("[bold blue]Inventory[/bold blue]  [dim]" + store.client.transport.base_url + "[/dim]", style="bold blue"))

    if await try_api(store.fetch_products, description="Loading products...") is not None:
        show_products(store.products)

    while True:
        show_form(form)

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        save_label = "💾 Save" if form.editing else "➕ Add product"
        options = [
            ("1", "📦 Refresh products", "5", "✏️ Edit product"),
            ("2", "📝 Fill in form", "6", "🗑️ Delete product"),
            ("3", "📷 Take photo", "7", "🧹 Clear form"),
            ("4", save_label, "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = (await session.prompt_async(
            "\nChoose an option: ",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"]),
            style=custom_style,
        )).strip()

        if choice == "1":
            if await try_api(store.fetch_products, description="Loading products...", success_msg="Products loaded") is not None:
                show_products(store.products)

        elif choice == "2":
            await fill_form(session, form)

        elif choice == "3":
            taken = await try_api(form.take_photo, spinner=False)
            if taken:
                set_status("Photo attached", True)

        elif choice == "4":
            await save_form(form)

        elif choice == "5":
            pid = (await session.prompt_async("Product ID: ", completer=product_completer(store), style=custom_style)).strip()
            product = store.find(pid)
            if product is None:
                set_status(f"No product with id {pid!r}", False)
            else:
                form.edit(product)

        elif choice == "6":
            pid = (await session.prompt_async("Product ID: ", completer=product_completer(store), style=custom_style)).strip()
            notice = await try_api(form.delete, pid, spinner=False)
            if notice:
                set_status(notice.message, True, title=notice.title)
                show_products(store.products)

        elif choice == "7":
            form.cancel_edit()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?", console=console):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                return

        console.print()
        console.rule(style="dim")


# ---------------------------
# One-shot commands
# ---------------------------
async def run_command(args, store: SyncStore, form: ProductForm) -> int:
    if args.command == "list":
        await store.fetch_products()
        show_products(store.products)
        return 0

    if args.command == "update":
        await store.fetch_products()
        product = store.find(args.id)
        if product is None:
            console.print(f"[red]No product with id {args.id!r}[/red]")
            return 1
        form.edit(product)

    if args.name is not None:
        form.name = args.name
    if args.price is not None:
        form.price = args.price
    if args.description is not None:
        form.description = args.description
    if args.image_file:
        form.camera = FileCamera(lambda: args.image_file)
        await form.take_photo()

    notice = await form.save()
    console.print(show_status(notice.message, True, title=notice.title))
    show_products(store.products)
    return 0


async def run_delete(args, store: SyncStore, form: ProductForm) -> int:
    if args.yes:
        form.confirm = lambda message: True
    notice = await form.delete(args.id)
    if notice is None:
        console.print("[yellow]Cancelled[/yellow]")
        return 0
    console.print(show_status(notice.message, True, title=notice.title))
    show_products(store.products)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ShopDemo inventory")
    parser.add_argument("--base-url", default=API_BASE, help="Backend origin")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="SDK log level (DEBUG shows every request)")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list", help="List all products")

    add = subparsers.add_parser("add", help="Add a product")
    add.add_argument("--name", required=True, help="Product name")
    add.add_argument("--price", help="Price (optional)")
    add.add_argument("--description", help="Description (optional)")
    add.add_argument("--image-file", help="Photo to attach")

    up = subparsers.add_parser("update", help="Replace a product's fields")
    up.add_argument("--id", required=True, help="ID of the product")
    up.add_argument("--name", help="New name")
    up.add_argument("--price", help="New price; empty string removes it")
    up.add_argument("--description", help="New description")
    up.add_argument("--image-file", help="New photo")

    rm = subparsers.add_parser("delete", help="Delete a product")
    rm.add_argument("--id", required=True, help="ID of the product")
    rm.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    return parser


async def amain(args) -> int:
    async with Transport(args.base_url) as transport:
        store = SyncStore(ProductClient(transport))
        form = ProductForm(store, confirm=confirm_delete, camera=make_camera())
        if args.command is None:
            await menu(store, form)
            return 0
        try:
            if args.command == "delete":
                return await run_delete(args, store, form)
            return await run_command(args, store, form)
        except ValidationError as e:
            console.print(show_status(e.reason, False, title="Validation"))
        except InventoryError as e:
            console.print(show_status(f"Error: {e}", False, title="Error"))
        return 1


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    return asyncio.run(amain(args))


if __name__ == "__main__":
    try:
        sys.exit(main())
    except (KeyboardInterrupt, EOFError):
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
