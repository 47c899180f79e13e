from typing import Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cesar_cipher.trace import EncodingTrace


COLORS = {
    "codes": "cyan",
    "normalized": "turquoise2",
    "grouped": "green",
    "shifted": "spring_green2",
    "ciphertext": "bold yellow",
}


def values_to_string(values: Sequence, color: str) -> str:
    """Space separated values wrapped in a rich color tag."""
    if not values:
        return "[dim]-[/dim]"
    return " ".join(f"[{color}]{value}[/{color}]" for value in values)


def render(trace: EncodingTrace):
    """Render every pipeline stage of a trace as a table."""
    if not trace.word:
        return Panel("Empty word, nothing to encode.", title="Cesar", border_style="dim")

    ui_table = Table(title=f"{escape(repr(trace.word))}  |  {trace.group_count} group(s)")
    ui_table.add_column("Stage", justify="right")
    ui_table.add_column("Values")

    ui_table.add_row("Codes", values_to_string(trace.codes, COLORS["codes"]))
    ui_table.add_row("Zero-based", values_to_string(trace.normalized, COLORS["normalized"]))
    ui_table.add_row("Grouped", values_to_string(trace.grouped, COLORS["grouped"]))
    ui_table.add_row("Shifted", values_to_string(trace.shifted, COLORS["shifted"]))
    ui_table.add_row("Ciphertext", f"[{COLORS['ciphertext']}]{trace.ciphertext}[/{COLORS['ciphertext']}]")

    return ui_table
