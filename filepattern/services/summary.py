from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from filepattern.models.pattern import STAR, Capture
from filepattern.services.walk import LiteralWalk, Owners, WalkNode


def _capture_text(capture: Capture) -> str:
    if not capture:
        return "-"
    return ", ".join(repr(part) for part in capture)


def _owners_text(owners: Owners) -> str:
    return escape(", ".join(str(i) for i in sorted(owners)))


def matches_table(results: Iterable[tuple[Any, Any, Capture]], title: str = "Matches") -> Table:
    table = Table(title=title, header_style="bold cyan")
    table.add_column("Pattern")
    table.add_column("Path")
    table.add_column("Captures")
    for pattern_key, path_key, capture in results:
        table.add_row(escape(str(pattern_key)), escape(str(path_key)), escape(_capture_text(capture)))
    return table


def _fill(tree: Tree, node: WalkNode, depth: int) -> None:
    if isinstance(node, LiteralWalk):
        for name, owners in node.final_names.items():
            tree.add(f"[green]{escape(name)}[/green] (patterns {_owners_text(owners)})")
        for name, child in node.children.items():
            branch = tree.add(f"[bold]{escape(name)}/[/bold]")
            if depth > 1:
                _fill(branch, child, depth - 1)
            else:
                branch.add("[dim]...[/dim]")
        return

    # Deferred nodes have no names until a listing is supplied; show acceptors.
    for tok, owners in node.finals:
        label = "any name" if tok == STAR else repr(tok)
        tree.add(f"[yellow]{escape(label)}[/yellow] (patterns {_owners_text(owners)})")
    for tok, states in node.transitions:
        tree.add(f"[magenta]{escape(repr(tok))}/[/magenta] [dim]deferred, {len(states)} states[/dim]")


def walk_tree(node: WalkNode, label: str = ".", depth: int = 8) -> Tree:
    """A rich tree of *node*: literal subtrees in full, deferred nodes by acceptor."""
    tree = Tree(escape(label))
    _fill(tree, node, depth)
    return tree


def render_matches(console: Console, results: Iterable[tuple[Any, Any, Capture]]) -> None:
    console.print(matches_table(results))


def render_walk(console: Console, node: WalkNode, depth: int = 8) -> None:
    console.print(walk_tree(node, depth=depth))
