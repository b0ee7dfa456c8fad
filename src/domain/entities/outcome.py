"""
Tagged results for calls to external providers.

Adapters return a Success or a Failure instead of raising, and the
application layer decides what to substitute for a Failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureReason(str, Enum):
    PROVIDER_ERROR = "provider_error"
    RATE_LIMITED = "rate_limited"
    MISSING_QUOTE = "missing_quote"
    MISSING_PRICE = "missing_price"
    MISSING_SERIES = "missing_series"
    MALFORMED_PAYLOAD = "malformed_payload"
    UNREACHABLE = "unreachable"
    MISSING_CREDENTIAL = "missing_credential"
    COMPLETION_ERROR = "completion_error"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    reason: FailureReason
    detail: str = ""


Outcome = Union[Success[T], Failure]
