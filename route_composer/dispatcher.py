"""Dispatcher protocol and the default regex dispatcher."""

import re
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    Set,
    Tuple,
)

from route_composer.exceptions import BadRoutePattern
from route_composer.patterns import PatternExpander, StdPatternParser
from route_composer.routing import ANY_METHOD
from route_composer.types import DispatchResult, DispatchStatus, Literal, Variant

DispatchEntry = Tuple[Sequence[str], str, Any]


class Dispatcher(Protocol):
    """Matches a request method and path against compiled route entries."""

    def dispatch(self, method: str, path: str) -> DispatchResult:
        ...


DispatcherFactory = Callable[[List[DispatchEntry]], Dispatcher]


def _variant_to_regex(variant: Variant) -> Tuple[str, Dict[str, str]]:
    """Build an anchored regex for a variant.

    Placeholder names are mapped to generated group names since names such
    as ``user-id`` are not valid regex group names.
    """
    regex = "^"
    groups: Dict[str, str] = {}
    for segment in variant:
        if isinstance(segment, Literal):
            regex += re.escape(segment.text)
        else:
            if segment.name in groups.values():
                raise BadRoutePattern(
                    f"Cannot use the same placeholder `{segment.name}` twice"
                )
            group = f"p{len(groups)}"
            groups[group] = segment.name
            regex += f"(?P<{group}>{segment.regex})"
    return regex + "$", groups


class RegexDispatcher:
    """Match requests by trying every route variant in registration order.

    The first entry whose path matches and whose methods accept the request
    method wins. ``*`` accepts any method.
    """

    def __init__(
        self,
        entries: Iterable[DispatchEntry],
        expander: Optional[PatternExpander] = None,
    ) -> None:
        """Compile dispatch entries."""
        self.expander = expander or StdPatternParser()
        self._compiled: List[Tuple[frozenset, re.Pattern, Dict[str, str], Any]] = []
        for methods, path, target in entries:
            accepted = frozenset(m.upper() for m in methods)
            for variant in self.expander.expand(path):
                regex, groups = _variant_to_regex(variant)
                try:
                    expr = re.compile(regex)
                except re.error as err:
                    raise BadRoutePattern(
                        f"Invalid placeholder regex in `{path}`: {err}"
                    ) from err
                self._compiled.append((accepted, expr, groups, target))

    def dispatch(self, method: str, path: str) -> DispatchResult:
        method = method.upper()
        allowed: Set[str] = set()
        for accepted, expr, groups, target in self._compiled:
            match = expr.match(path)
            if not match:
                continue

            if ANY_METHOD in accepted or method in accepted:
                params = {name: match.group(group) for group, name in groups.items()}
                return DispatchResult(DispatchStatus.FOUND, target, params)

            allowed |= accepted

        if allowed:
            return DispatchResult(
                DispatchStatus.METHOD_NOT_ALLOWED, allowed_methods=frozenset(allowed)
            )
        return DispatchResult(DispatchStatus.NOT_FOUND)
