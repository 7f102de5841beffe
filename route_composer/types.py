from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, FrozenSet, List, Union


class NodeKind(Enum):
    ROUTE = "route"
    GROUP = "group"


class DispatchStatus(IntEnum):
    NOT_FOUND = 0
    FOUND = 1
    METHOD_NOT_ALLOWED = 2


@dataclass(frozen=True)
class DispatchResult:
    status: DispatchStatus
    target: Any = None
    params: Dict[str, str] = field(default_factory=dict)
    allowed_methods: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    name: str
    regex: str = "[^/]+"


Segment = Union[Literal, Placeholder]
Variant = List[Segment]
