#!/usr/bin/env python3
"""
Error kinds and result values shared by the pipeline stages.

Stages return a Result instead of raising, so the CLI has a single place
that turns each ErrorKind into its user-facing message and exit code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class ErrorKind(Enum):
    """Terminal failures of a run: (code, message template, exit code)"""

    TRANSPORT = ('transport', 'Error: {detail}', 1)
    EMPTY_BODY = ('empty_body', 'Failed to fetch receipt details.', 2)
    PARSE = ('parse', 'Failed to parse receipt details.', 3)
    # Empty product list, reported like a parse failure
    NO_PRODUCTS = ('no_products', 'Failed to parse receipt details.', 3)

    def __init__(self, code: str, template: str, exit_code: int):
        self.code = code
        self.template = template
        self.exit_code = exit_code


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    detail: str = ''

    @property
    def message(self) -> str:
        """User-facing line printed for this failure"""
        return self.kind.template.format(detail=self.detail)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a Failure, never both"""

    value: Optional[T] = None
    error: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> 'Result[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, detail: str = '') -> 'Result[T]':
        return cls(error=Failure(kind, detail))


class ReceiptParseError(ValueError):
    """Receipt JSON is malformed or a record has a field of the wrong shape"""


class ConfigError(ValueError):
    """Settings file or option value is invalid"""
