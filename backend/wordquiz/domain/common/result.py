"""Result<T> for normal-flow outcomes; broken preconditions raise InvalidInput instead."""
from __future__ import annotations
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

# Failure codes the API layer maps onto HTTP statuses
INVALID = "invalid"
NOT_FOUND = "not_found"
CONFLICT = "conflict"
UNAVAILABLE = "unavailable"


class Result(Generic[T]):
    __slots__ = ("is_success", "value", "error", "code")

    def __init__(
        self,
        is_success: bool,
        value: Optional[T] = None,
        error: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.is_success = is_success
        self.value = value
        self.error = error
        self.code = code

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str = INVALID) -> "Result[T]":
        return cls(is_success=False, error=error, code=code)

    @classmethod
    def not_found(cls, error: str) -> "Result[T]":
        return cls.fail(error, code=NOT_FOUND)

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok({self.value!r})"
        return f"Result.fail({self.error!r}, code={self.code!r})"
