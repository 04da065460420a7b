# Multi-pattern directory walking.
#
# The walk is a subset construction over pattern suffixes.  A *state* is the
# remaining optimised token tuple of one pattern; a node holds the set of live
# states (deduplicated, each tagged with the indices of the patterns that
# reached it) and answers two questions about one directory level:
#
#   final(state)  which single name would finish the pattern here
#                 (a Star acceptor means any name does);
#   next(state)   which acceptor tokens let the pattern descend into a child,
#                 and the state it continues in.
#
#   state                   final          next
#   ----------------------  -------------  -----------------------------------
#   [Skip, Stars *.c]       Stars *.c      (Star -> [Skip, Stars *.c])
#   [Skip1, Lit x]          -              (Star -> [Skip, Lit x])
#   [Lit src, Star]         -              (Lit src -> [Star])
#   [Star]                  Star           -
#
# Nodes come in two shapes:
#
#   LiteralWalk   every acceptor at this level and below is a literal, so the
#                 whole (finite) subtree is built up front and a caller can
#                 probe names without listing the directory.
#   DeferredWalk  some acceptor is a wildcard; nothing below is built until
#                 step() is given the names actually present, and only those
#                 names get child nodes.
#
# A Skip can match nothing and a "." literal can be passed over, so a node
# works on the closure of its states under both (see _closure).
#
# Nodes are plain values: building one twice from the same states gives equal
# nodes, and siblings can be stepped in any order or concurrently.

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from filepattern.models.enums import TokenKind
from filepattern.models.pattern import DOT, STAR, SKIP, Token, Tokens
from filepattern.services.compiler import PatternLike, ensure_compiled
from filepattern.services.matcher import match_one, matches_tokens

logger = logging.getLogger(__name__)

_SKIP = TokenKind.SKIP
_SKIP1 = TokenKind.SKIP1

type State = Tokens
type Owners = frozenset[int]
type States = dict[State, Owners]

_NO_OWNERS: Owners = frozenset()


def _is_empty(state: State) -> bool:
    """Can *state* be satisfied by no further components at all?"""
    return all(t.kind is _SKIP for t in state)


def final(state: State) -> Token | None:
    if not state:
        return None
    head, rest = state[0], state[1:]
    if head.kind is _SKIP:
        return STAR if _is_empty(rest) else final(rest)
    if head.kind is _SKIP1:
        return STAR if _is_empty(rest) else None
    return head if _is_empty(rest) else None


def next_steps(state: State) -> list[tuple[Token, State]]:
    if not state:
        return []
    head, rest = state[0], state[1:]
    if head.kind is _SKIP1:
        return [(STAR, (SKIP, *rest))]
    if head.kind is _SKIP:
        return [(STAR, state), *next_steps(rest)]
    return [(head, rest)] if rest else []


def _add(states: States, state: State, owners: Owners) -> None:
    states[state] = states.get(state, _NO_OWNERS) | owners


@dataclass(slots=True, frozen=True)
class WalkStep:
    """Result of stepping a node with the names present in one directory.

    ``accepted`` maps each name that completes a pattern to the indices of
    the patterns it completes; ``children`` maps each name worth descending
    into to the node for that subdirectory.  Both keep the input order.
    """

    accepted: dict[str, Owners]
    children: dict[str, WalkNode]

    @property
    def accepted_names(self) -> list[str]:
        return list(self.accepted)


@dataclass(slots=True, frozen=True)
class LiteralWalk:
    """A finite subtree where every name that matters is known in advance."""

    final_names: dict[str, Owners]
    children: dict[str, WalkNode]

    def step(self, names: Iterable[str]) -> WalkStep:
        present = list(dict.fromkeys(names))
        return WalkStep(
            accepted={n: self.final_names[n] for n in present if n in self.final_names},
            children={n: self.children[n] for n in present if n in self.children},
        )


@dataclass(slots=True, frozen=True)
class DeferredWalk:
    """A decision over the names actually present in a directory."""

    finals: tuple[tuple[Token, Owners], ...]
    transitions: tuple[tuple[Token, States], ...]

    @property
    def final_wildcard(self) -> bool:
        return any(tok.kind is TokenKind.STAR for tok, _ in self.finals)

    @property
    def final_names(self) -> dict[str, Owners]:
        return {tok.text: owners for tok, owners in self.finals if tok.is_literal}

    def step(self, names: Iterable[str]) -> WalkStep:
        accepted: dict[str, Owners] = {}
        children: dict[str, WalkNode] = {}
        for name in dict.fromkeys(names):
            owners = _NO_OWNERS
            for tok, tok_owners in self.finals:
                if match_one(tok, name):
                    owners |= tok_owners
            if owners:
                accepted[name] = owners

            continuation: States = {}
            for tok, states in self.transitions:
                if match_one(tok, name):
                    for state, state_owners in states.items():
                        _add(continuation, state, state_owners)
            if continuation:
                children[name] = build_node(continuation)
        return WalkStep(accepted=accepted, children=children)


type WalkNode = LiteralWalk | DeferredWalk

type _Pending = tuple[dict[str, WalkNode], str, States]


def _closure(state: State) -> list[State]:
    """*state* plus every state it reaches without consuming a component.

    A Skip may match nothing, and a "." literal may be passed over while a
    component remains, which is always the case when a node is stepped.
    """
    out = [state]
    while state and (state[0].kind is _SKIP or state[0] == DOT):
        state = state[1:]
        out.append(state)
    return out


def _shape(states: States) -> tuple[WalkNode, list[_Pending]]:
    """Build one node; literal children are returned for the caller to fill in."""
    finals: dict[Token, Owners] = {}
    transitions: dict[Token, States] = {}
    for entry, owners in states.items():
        for state in _closure(entry):
            tok = final(state)
            if tok is not None:
                finals[tok] = finals.get(tok, _NO_OWNERS) | owners
            for acceptor, cont in next_steps(state):
                _add(transitions.setdefault(acceptor, {}), cont, owners)

    if all(t.is_literal for t in finals) and all(t.is_literal for t in transitions):
        children: dict[str, WalkNode] = {}
        node = LiteralWalk(final_names={tok.text: owners for tok, owners in finals.items()}, children=children)
        return node, [(children, tok.text, conts) for tok, conts in transitions.items()]
    return DeferredWalk(finals=tuple(finals.items()), transitions=tuple(transitions.items())), []


def build_node(states: States) -> WalkNode:
    """Build the node for a set of live states.

    Literal-only subtrees are built eagerly, without recursion so that long
    literal patterns are fine; this terminates because consuming a literal
    always shortens the state.
    """
    node, pending = _shape(states)
    pending.reverse()
    while pending:
        children, name, conts = pending.pop()
        child, more = _shape(conts)
        children[name] = child
        pending.extend(reversed(more))
    return node


def walk_state(pattern: PatternLike) -> State:
    return ensure_compiled(pattern).optimised


def build_walk(patterns: Sequence[PatternLike]) -> tuple[bool, WalkNode]:
    """Plan a walk for *patterns*.

    Returns whether the empty path matches any pattern (that case never
    reaches a node) and the root node.  Owner indices in the nodes refer to
    positions in *patterns*.
    """
    states: States = {}
    matches_empty = False
    for idx, pattern in enumerate(patterns):
        state = walk_state(pattern)
        if _is_empty(state) or matches_tokens(state, [""]):
            matches_empty = True
        _add(states, state, frozenset((idx,)))
    logger.debug("Walk over %d patterns starts from %d distinct states", len(patterns), len(states))
    return matches_empty, build_node(states)


def step_walk(node: WalkNode, names: Iterable[str]) -> WalkStep:
    return node.step(names)
