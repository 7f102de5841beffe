"""Regex patterns for path parsing and the default pattern expander."""

import re
from typing import List, Protocol, Sequence, Tuple

from route_composer.exceptions import BadRoutePattern
from route_composer.types import Literal, Placeholder, Segment, Variant

DEFAULT_PLACEHOLDER_REGEX = "[^/]+"

# Pattern matching expressions
slashes_expr = re.compile(r"/+")
methods_delimiter = re.compile(r"\W+")
handler_token_expr = re.compile(r"\{([^{}]+)\}")
placeholder_expr = re.compile(
    r"\{\s*(?P<name>[a-zA-Z_][a-zA-Z0-9_-]*)\s*"
    r"(?::\s*(?P<pattern>[^{}]*(?:\{[^{}]*\}[^{}]*)*))?\}"
)


class PatternExpander(Protocol):
    """Expands a path pattern into its literal/placeholder variants."""

    def expand(self, path: str) -> List[Variant]:
        ...


def collapse_slashes(path: str) -> str:
    """Replace every run of ``/`` with a single ``/``."""
    return slashes_expr.sub("/", path)


def _placeholder_spans(path: str) -> List[Tuple[int, int]]:
    return [match.span() for match in placeholder_expr.finditer(path)]


def _outside(index: int, spans: Sequence[Tuple[int, int]]) -> bool:
    return not any(start <= index < end for start, end in spans)


def parse_placeholders(path: str) -> Variant:
    """Split a path without optional parts into literal and placeholder segments."""
    segments: List[Segment] = []
    offset = 0
    for match in placeholder_expr.finditer(path):
        if match.start() > offset:
            segments.append(Literal(path[offset : match.start()]))
        pattern = (match["pattern"] or "").strip()
        regex = pattern or DEFAULT_PLACEHOLDER_REGEX
        segments.append(Placeholder(match["name"], regex))
        offset = match.end()

    if offset < len(path):
        segments.append(Literal(path[offset:]))
    return segments


class StdPatternParser:
    """Expand ``{name}``, ``{name:regex}`` and trailing ``[...]`` optional parts.

    ``/extra[/{id}]`` expands to two variants, ``/extra`` and
    ``/extra/{id}``. Variants are returned shortest first, so each one
    holds at least as many placeholders as the one before it.
    """

    def expand(self, path: str) -> List[Variant]:
        trimmed = path.rstrip("]")
        num_optionals = len(path) - len(trimmed)
        spans = _placeholder_spans(trimmed)

        if any(c == "]" and _outside(i, spans) for i, c in enumerate(trimmed)):
            raise BadRoutePattern(
                f"Optional segments can only occur at the end of a route: `{path}`"
            )

        opens = [i for i, c in enumerate(trimmed) if c == "[" and _outside(i, spans)]
        if len(opens) != num_optionals:
            raise BadRoutePattern(
                f"Number of opening '[' and closing ']' does not match: `{path}`"
            )

        pieces = []
        start = 0
        for index in opens:
            pieces.append(trimmed[start:index])
            start = index + 1
        pieces.append(trimmed[start:])

        variants: List[Variant] = []
        current = ""
        for n, piece in enumerate(pieces):
            if not piece and n != 0:
                raise BadRoutePattern(f"Empty optional part: `{path}`")
            current += piece
            variants.append(parse_placeholders(current))

        return variants
