"""
AppMarket SDK CLI

Command-line tools for working with event return addresses.

Commands:
- inspect: Build and validate a return address from its three identifiers
- validate: Check a JSON file of return address documents
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from appmarket_sdk.contracts import EventReturnAddress, InvalidReturnAddressError, ReturnAddressPayload
from appmarket_sdk.core.logging import setup_logging
from appmarket_sdk.core.settings import LOG_LEVELS, get_settings, normalize_log_level

app = typer.Typer(
    name="appmarket-sdk",
    help="AppMarket SDK tools",
)

console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Log level (defaults to APPMARKET_LOG_LEVEL)"),
):
    """AppMarket SDK tools."""
    if log_level is not None and normalize_log_level(log_level) not in LOG_LEVELS:
        raise typer.BadParameter(
            f"{log_level!r} is not one of {', '.join(LOG_LEVELS)}",
            param_hint="--log-level",
        )

    try:
        setup_logging(level=log_level)
    except ValidationError as e:
        rprint(f"[red]Invalid APPMARKET_* settings: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def inspect(
    event_id: str = typer.Argument(..., help="Event identifier"),
    marketplace_base_url: str = typer.Argument(..., help="Base URL of the originating marketplace"),
    client_id: str = typer.Argument(..., help="Client (tenant) identifier"),
    as_json: bool = typer.Option(False, "--json", help="Print the return address as JSON"),
):
    """
    Build a return address and show it.

    Fails with exit code 1 when any of the identifiers is invalid.
    """
    try:
        address = EventReturnAddress(
            event_id=event_id,
            marketplace_base_url=marketplace_base_url,
            client_id=client_id,
        )
    except InvalidReturnAddressError as e:
        rprint(f"[red]Invalid return address: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(address.to_dict()))
        return

    table = Table(title="Event Return Address")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("event_id", escape(address.event_id))
    table.add_row("marketplace_base_url", escape(address.marketplace_base_url))
    table.add_row("client_id", escape(address.client_id))
    table.add_row("secure", "yes" if address.is_secure else "[yellow]no[/yellow]")
    console.print(table)


def _check_document(document: Any, require_https: bool) -> tuple[EventReturnAddress | None, str | None]:
    """Validate one document. Returns (address, None) or (None, reason)."""
    try:
        address = ReturnAddressPayload.model_validate(document).to_return_address()
    except ValidationError as e:
        reasons = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            reasons.append(f"{location}: {error['msg']}" if location else error["msg"])
        return None, ", ".join(reasons)
    except InvalidReturnAddressError as e:
        return None, str(e)

    if require_https and not address.is_secure:
        return None, "marketplace_base_url must use https"

    return address, None


@app.command()
def validate(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="JSON file"),
    require_https: Optional[bool] = typer.Option(
        None,
        "--require-https/--allow-http",
        help="Reject non-https marketplace URLs (defaults to APPMARKET_REQUIRE_HTTPS)",
    ),
):
    """
    Validate return address documents from a JSON file.

    The file holds one object or an array of objects with eventId,
    marketplaceBaseUrl and clientId (snake_case keys are accepted too).
    """
    if require_https is None:
        require_https = get_settings().require_https

    try:
        data = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        rprint(f"[red]Invalid JSON in {escape(str(file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    documents = data if isinstance(data, list) else [data]

    table = Table(title=f"Return addresses in {file.name}")
    table.add_column("#", justify="right")
    table.add_column("Event ID")
    table.add_column("Status")
    table.add_column("Reason")

    invalid_count = 0
    for index, document in enumerate(documents):
        address, reason = _check_document(document, require_https)
        if address is None:
            invalid_count += 1
            logger.debug("Invalid return address document", extra={"index": index, "reason": reason})
            event_id = None
            if isinstance(document, dict):
                event_id = document.get("eventId") or document.get("event_id")
            table.add_row(str(index), escape(str(event_id or "-")), "[red]invalid[/red]", escape(reason or ""))
        else:
            table.add_row(str(index), escape(address.event_id), "[green]valid[/green]", "")

    console.print(table)

    valid_count = len(documents) - invalid_count
    rprint(f"{valid_count} valid, {invalid_count} invalid")

    if invalid_count:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
