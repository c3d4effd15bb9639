"""
Outcomes returned by ``ProductOrchestrator``.

Each orchestrator call returns exactly one of these values.  The HTTP
layer never inspects exceptions; it renders the outcome it receives.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union


class Operation(str, Enum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Success:
    operation: Operation
    value: Any = None


@dataclass(frozen=True)
class NotFound:
    product_id: int


@dataclass(frozen=True)
class InvalidPayload:
    fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Unauthorized:
    reason: str


@dataclass(frozen=True)
class MissingToken:
    pass


Outcome = Union[Success, NotFound, InvalidPayload, Unauthorized, MissingToken]
