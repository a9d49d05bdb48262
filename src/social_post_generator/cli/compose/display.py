"""Display functions for compose commands - pure functions for Rich output."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import GenerationKind
from ...content import DraftStore, InputField, InputValidator
from ...sharing import ShareTarget
from .params import ComposeParams


def show_compose_config(console: Console, params: ComposeParams) -> None:
    """Display generation configuration panel."""
    field = InputField(value=params.text)
    kind_info = "Image" if params.kind == GenerationKind.IMAGE_SYNTHESIS else "Text rewrite"

    console.print(Panel(
        f"Input: [cyan]{params.text}[/cyan]\n"
        f"Length: [yellow]{field}[/yellow] ({field.remaining} left)\n"
        f"Backend: [yellow]{kind_info}[/yellow]\n"
        f"Page URL: [green]{params.page_url or 'none'}[/green]",
        title="Social Post Generation",
    ))


def show_draft(console: Console, store: DraftStore) -> None:
    """Display the generated draft."""
    body = ""
    if store.artifact_ref:
        body += f"[bold]Image:[/] {store.artifact_ref}\n"
    body += store.editable or "[dim](no text)[/dim]"

    console.print(Panel(body, title="Generated Draft", border_style="cyan"))


def show_share_targets(
    console: Console,
    targets: list[ShareTarget],
    committed_text: Optional[str] = None,
) -> None:
    """Display share targets as a table."""
    if committed_text is not None:
        console.print(Panel(
            committed_text or "[dim](empty)[/dim]",
            title="Ready to Share",
            border_style="green",
        ))

    table = Table(title="Share")
    table.add_column("Platform", style="cyan", no_wrap=True)
    table.add_column("Action", style="yellow", no_wrap=True)
    table.add_column("Link / Instruction")

    for target in targets:
        table.add_row(
            target.platform.value.title(),
            target.label,
            target.url if target.is_link else f"[dim]{target.instruction}[/dim]",
        )

    console.print(table)


def show_count(console: Console, text: str, validator: InputValidator) -> None:
    """Display input length and remaining characters."""
    remaining = validator.remaining(text)
    style = "green" if remaining >= 0 else "red"
    console.print(f"[{style}]{len(text)}/{validator.max_length}[/{style}] ({remaining} remaining)")


def show_compose_error(console: Console, error: str, details: Optional[dict] = None) -> None:
    """Display generation error."""
    console.print(f"\n[red]Error: {error}[/red]")
    if details:
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/dim] [yellow]{value}[/yellow]")
    console.print("[dim]You can resubmit the same text to try again.[/dim]")
