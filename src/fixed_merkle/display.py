# display.py
# All terminal output for the Merkle tree runner.
#
# This module owns presentation entirely. run.py never formats strings;
# it calls named functions here.
#
# Colour language:
#   cyan    : configuration and tree lifecycle events
#   yellow  : roots and authentication paths
#   green   : success / confirmed
#   red     : failures and halts

from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from fixed_merkle.merkle import MerkleTree
from fixed_merkle.models import Proof, TreeConfig

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _label(tag: str, color: str) -> Text:
    t = Text()
    t.append(f" {tag} ", style=f"bold white on {color}")
    return t


def _mono(value: Any, max_len: int = 48) -> str:
    text = str(value)
    if len(text) > max_len:
        text = text[:max_len] + "…"
    return escape(text)


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def banner(config: TreeConfig, capacity: int) -> None:
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Fixed-Depth Merkle Tree[/bold cyan]\n"
            "[dim]Incremental updates with zero-padded authentication paths[/dim]\n\n"
            f"[dim]Levels   :[/dim] [white]{config.levels}[/white]\n"
            f"[dim]Capacity :[/dim] [white]{capacity}[/white]\n"
            f"[dim]Combiner :[/dim] [white]{config.combiner}[/white]",
            border_style="cyan",
            padding=(1, 4),
        )
    )


# ---------------------------------------------------------------------------
# Mutation events
# ---------------------------------------------------------------------------


def element_inserted(index: int, element: Any, root: Any) -> None:
    console.print(
        _label("INSERT", "cyan"),
        f"[cyan] leaf[{index}][/cyan] = [white]{_mono(element)}[/white]"
        f"  [dim]root → {_mono(root, 24)}[/dim]",
    )


def bulk_inserted(count: int, total: int, root: Any) -> None:
    console.print(
        _label("BULK INSERT", "cyan"),
        f"[cyan] {count} element(s), tree now holds {total}[/cyan]"
        f"  [dim]root → {_mono(root, 24)}[/dim]",
    )


def leaf_updated(index: int, element: Any, root: Any) -> None:
    console.print(
        _label("UPDATE", "cyan"),
        f"[cyan] leaf[{index}][/cyan] = [white]{_mono(element)}[/white]"
        f"  [dim]root → {_mono(root, 24)}[/dim]",
    )


# ---------------------------------------------------------------------------
# Tree state
# ---------------------------------------------------------------------------


def tree_layers(tree: MerkleTree) -> None:
    console.print()
    console.print(Rule(f"[cyan]LAYERS: {len(tree)} leaf/leaves[/cyan]", style="cyan"))

    table = Table(box=box.SIMPLE_HEAVY, show_header=True, header_style="bold cyan", padding=(0, 1))
    table.add_column("Level", justify="center", width=6)
    table.add_column("Nodes", justify="right", width=6)
    table.add_column("Zero", style="dim", width=18)
    table.add_column("Values", style="white")

    zeros = tree.zeros
    for level, layer in enumerate(tree.layers):
        table.add_row(
            str(level),
            str(len(layer)),
            _mono(zeros[level], 16),
            ", ".join(_mono(v, 16) for v in layer) or "[dim]—[/dim]",
        )
    console.print(table)


def root(value: Any) -> None:
    console.print(
        Panel(
            f"[bold yellow]Root:[/bold yellow] [white]{escape(str(value))}[/white]",
            title=_label("ROOT", "yellow"),
            border_style="yellow",
            padding=(0, 2),
        )
    )


def proof(index: int, element: Any, value: Proof) -> None:
    console.print()

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold yellow", padding=(0, 1))
    table.add_column("Level", justify="center", width=6)
    table.add_column("Node is", justify="center", width=8)
    table.add_column("Sibling", style="yellow")

    for level, (sibling, side) in enumerate(zip(value.path_elements, value.path_index)):
        table.add_row(str(level), "right" if side else "left", _mono(sibling, 64))

    console.print(
        Panel(
            table,
            title=_label(f"PROOF leaf[{index}]", "yellow"),
            subtitle=f"[dim]Element: {_mono(element)}[/dim]",
            border_style="yellow",
            padding=(0, 1),
        )
    )


# ---------------------------------------------------------------------------
# Final result
# ---------------------------------------------------------------------------


def done() -> None:
    console.print()
    console.print(_label("DONE ✓", "green"), "[green] Run complete.[/green]")
    console.print()


def halt(reason: str) -> None:
    console.print()
    console.print(
        Panel(
            f"[bold white]{escape(reason)}[/bold white]",
            title=_label("HALT", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )
    console.print()
