"""Reconstruction of builder method chains.

A builder chain starts at an origin constructor call and applies methods to
each previous result::

    OperationBuilder.get("/users")      # origin
        .summary("List users")          # link 0
        .register(router, openapi)      # link 1

Anything other than a method call or the origin anywhere on the receiver path
(a name, a subscript, a binary operation, ...) means the expression is not a
builder chain, and it is discarded as a whole.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from http import HTTPStatus

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.constants import (
    DEFAULT_BUILDER_CONSTRUCTORS,
    DEFAULT_BUILDER_TYPES,
    DEFAULT_MAX_CHAIN_LENGTH,
)
from api_dna_linter.domain.names import DottedName
from api_dna_linter.domain.spans import Span

logger = logging.getLogger(__name__)

_PREFIXED_STATUS = re.compile(r"^HTTP_\d{3}_(?P<name>[A-Z0-9_]+)$")


@dataclass(frozen=True)
class ChainLink:
    """One method call of a chain."""

    method: str
    args: tuple[astroid.nodes.NodeNG, ...]
    keywords: tuple[astroid.nodes.Keyword, ...]
    name_span: Span
    node: astroid.nodes.Call

    @classmethod
    def from_call(cls, call: astroid.nodes.Call) -> "ChainLink":
        func = call.func
        return cls(
            method=func.attrname,
            args=tuple(call.args or ()),
            keywords=tuple(call.keywords or ()),
            name_span=Span.of_attribute_name(func),
            node=call,
        )

    def first_argument_name(self) -> str | None:
        """
        Terminal identifier of the first positional argument.

        `StatusCode.NOT_FOUND` and `NOT_FOUND` give "NOT_FOUND"; an integer
        literal is read as an HTTP status code (404 -> "NOT_FOUND").
        """
        if not self.args:
            return None
        first = self.args[0]
        if isinstance(first, astroid.nodes.Const):
            value = first.value
            if isinstance(value, int) and not isinstance(value, bool):
                try:
                    return HTTPStatus(value).name
                except ValueError:
                    return None
            return None
        return DottedName.terminal(first)

    def status_name(self) -> str | None:
        """first_argument_name() with `HTTP_404_` style prefixes removed."""
        name = self.first_argument_name()
        if name is None:
            return None
        match = _PREFIXED_STATUS.match(name)
        return match.group("name") if match else name


@dataclass(frozen=True)
class BuilderChain:
    """A recognized chain: origin call plus its links, origin first."""

    origin: astroid.nodes.Call
    constructor: str
    links: tuple[ChainLink, ...]

    def __len__(self) -> int:
        return len(self.links)

    @property
    def last(self) -> ChainLink | None:
        return self.links[-1] if self.links else None

    def positions(self, method: str) -> list[int]:
        return [index for index, link in enumerate(self.links) if link.method == method]

    def has_call_before(self, method: str, position: int) -> bool:
        """True when a call named method appears at an index lower than position."""
        return any(index < position for index in self.positions(method))


class ChainWalker:
    """Walks receivers back to a recognized origin constructor."""

    def __init__(
        self,
        builder_types: Iterable[str] = DEFAULT_BUILDER_TYPES,
        constructors: Iterable[str] = DEFAULT_BUILDER_CONSTRUCTORS,
        max_links: int = DEFAULT_MAX_CHAIN_LENGTH,
    ) -> None:
        self._builder_types = frozenset(builder_types)
        self._constructors = frozenset(constructors)
        self._max_links = max_links

    def is_origin(self, node: astroid.nodes.NodeNG) -> bool:
        """
        `OperationBuilder.get(...)` or `pkg.OperationBuilder.get(...)`: a call
        on a pure dotted path ending in <builder type>.<constructor>.
        """
        if not isinstance(node, astroid.nodes.Call):
            return False
        segments = DottedName.segments(node.func)
        if segments is None or len(segments) < 2:
            return False
        return segments[-1] in self._constructors and segments[-2] in self._builder_types

    def reconstruct(self, expr: astroid.nodes.NodeNG) -> BuilderChain | None:
        """Return the chain ending at expr, or None when expr is not one."""
        links: list[ChainLink] = []
        current = expr
        while not self.is_origin(current):
            if not isinstance(current, astroid.nodes.Call):
                return None
            func = current.func
            if not isinstance(func, astroid.nodes.Attribute):
                return None
            if len(links) >= self._max_links:
                logger.debug(
                    "Chain at %s exceeds %d links; not treated as a builder chain",
                    Span.of(expr),
                    self._max_links,
                )
                return None
            links.append(ChainLink.from_call(current))
            current = func.expr
        links.reverse()
        return BuilderChain(
            origin=current,
            constructor=current.func.attrname,
            links=tuple(links),
        )
