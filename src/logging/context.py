# src/logging/context.py — v2
"""Contextual logging support: attach store path and operation to log records.

Context is set per store operation on the worker thread that runs it.
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

_store_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "store_path", default=None
)
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    store_path: str | None = None
    operation: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(store_path=_store_path.get(), operation=_operation.get())


def set_operation_context(operation: str, store_path: str | None = None) -> None:
    """Set operation-level context."""
    _operation.set(operation)
    _store_path.set(store_path)


@contextmanager
def operation_context(operation: str, store_path: str | None = None) -> Iterator[LogContext]:
    """Scope the operation context to a block, restoring the previous values."""
    op_token = _operation.set(operation)
    path_token = _store_path.set(store_path)
    try:
        yield get_context()
    finally:
        _operation.reset(op_token)
        _store_path.reset(path_token)


def clear_context() -> None:
    """Reset all context variables."""
    _store_path.set(None)
    _operation.set(None)
