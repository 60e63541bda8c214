"""
Tagged lookup results.

Counts and id lookups report one of three outcomes instead of folding
failures into the returned number.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ENGINE_ERROR = "engine_error"


@dataclass(frozen=True)
class QueryResult:
    status: LookupStatus
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def found(cls, value: Any) -> "QueryResult":
        return cls(LookupStatus.FOUND, value=value)

    @classmethod
    def not_found(cls) -> "QueryResult":
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def engine_error(cls, error: str) -> "QueryResult":
        return cls(LookupStatus.ENGINE_ERROR, error=error)

    @property
    def ok(self) -> bool:
        return self.status == LookupStatus.FOUND

    @property
    def is_error(self) -> bool:
        return self.status == LookupStatus.ENGINE_ERROR
