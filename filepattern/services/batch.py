from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from filepattern.models.enums import Syntax
from filepattern.models.pattern import Capture
from filepattern.services.compiler import PatternLike, ensure_compiled
from filepattern.services.matcher import capture_components
from filepattern.services.paths import split_path
from filepattern.services.walk import WalkNode, build_walk

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PathTree:
    """Paths grouped by shared leading components.

    ``here`` holds the (key, original path) pairs that end exactly at this
    node; ``children`` is keyed by the next component, in sorted order.
    """

    here: list[tuple[Any, str]] = field(default_factory=list)
    children: dict[str, PathTree] = field(default_factory=dict)


def make_tree(paths: Iterable[tuple[Any, str]]) -> PathTree:
    entries = sorted(((split_path(path), key, path) for key, path in paths), key=lambda e: e[0])
    root = PathTree()
    for comps, key, path in entries:
        node = root
        for comp in comps:
            node = node.children.setdefault(comp, PathTree())
        node.here.append((key, path))
    return root


def match_many[A, B](
    patterns: Sequence[tuple[A, PatternLike]],
    paths: Iterable[tuple[B, str]],
    syntax: Syntax = Syntax.STANDARD,
) -> list[tuple[A, B, Capture]]:
    """Match every pattern against every path in one pass.

    Equivalent to running match() on each (pattern, path) pair and keeping the
    successes, but the work follows the merged path tree: each directory level
    is stepped once for all patterns, and subtrees no pattern can reach are
    never visited.  Results come in no particular order.
    """
    keys = [key for key, _ in patterns]
    compiled = [ensure_compiled(p, syntax) for _, p in patterns]
    tree = make_tree(paths)
    _, root = build_walk(compiled)

    results: list[tuple[A, B, Capture]] = []
    stack: list[tuple[WalkNode, PathTree, tuple[str, ...]]] = [(root, tree, ())]
    visited = 0
    while stack:
        node, sub, prefix = stack.pop()
        visited += 1
        step = node.step(sub.children)
        for name, child in sub.children.items():
            comps = (*prefix, name)
            owners = step.accepted.get(name)
            if owners and child.here:
                for idx in sorted(owners):
                    for path_key, path in child.here:
                        # The walk already decided; this recovers the captures,
                        # and rejects absolute paths for relative-only patterns.
                        capture = capture_components(compiled[idx], comps, path)
                        if capture is not None:
                            results.append((keys[idx], path_key, capture))
            next_node = step.children.get(name)
            if next_node is not None and child.children:
                stack.append((next_node, child, comps))

    logger.debug("match_many: %d patterns, %d tree nodes stepped, %d matches", len(compiled), visited, len(results))
    return results
