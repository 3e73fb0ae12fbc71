"""Single-shot memoization primitives.

`Deferred` is the thunk handle used for field maps that may reference types
which do not exist yet. `WriteOnceCell` is the slot through which closures
observe a value produced later (the storage model, for instance).
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from .errors import CellAlreadySetError, LazyEvaluationError

T = TypeVar("T")


class Deferred(Generic[T]):
    """Zero-argument producer invoked on first call, cached afterwards."""

    __slots__ = ("_producer", "_value", "_evaluated", "_evaluating", "_lock")

    def __init__(self, producer: Callable[[], T]):
        self._producer = producer
        self._value: T | None = None
        self._evaluated = False
        self._evaluating = False
        self._lock = threading.RLock()

    @classmethod
    def of(cls, value_or_producer: T | Callable[[], T]) -> Deferred[T]:
        if isinstance(value_or_producer, Deferred):
            return value_or_producer
        if callable(value_or_producer):
            return cls(value_or_producer)
        return cls(lambda: value_or_producer)

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    def __call__(self) -> T:
        if self._evaluated:
            return self._value  # type: ignore[return-value]

        with self._lock:
            if self._evaluated:
                return self._value  # type: ignore[return-value]
            if self._evaluating:
                raise LazyEvaluationError("Deferred value requested during its own evaluation")

            self._evaluating = True
            try:
                value = self._producer()
            finally:
                self._evaluating = False

            self._value = value
            self._evaluated = True
            # Drop the producer so captured state can be collected.
            self._producer = None  # type: ignore[assignment]
            return value

    def __repr__(self) -> str:
        state = "evaluated" if self._evaluated else "pending"
        return f"<Deferred {state}>"


class WriteOnceCell(Generic[T]):
    """Shared slot that is written exactly once and read any number of times."""

    __slots__ = ("_value", "_is_set")

    def __init__(self) -> None:
        self._value: T | None = None
        self._is_set = False

    @property
    def is_set(self) -> bool:
        return self._is_set

    def get(self) -> T | None:
        return self._value

    def set(self, value: T) -> None:
        if self._is_set:
            raise CellAlreadySetError("Cell has already been written")
        self._value = value
        self._is_set = True

    def __repr__(self) -> str:
        return f"<WriteOnceCell {self._value!r}>" if self._is_set else "<WriteOnceCell unset>"
