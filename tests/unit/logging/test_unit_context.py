# tests/unit/logging/test_unit_context.py — v2
"""Tests for logging/context.py — contextvars-based log context."""

from __future__ import annotations

from feedstore.logging.context import (
    clear_context,
    get_context,
    operation_context,
    set_operation_context,
)


class TestContext:
    def test_empty_by_default(self):
        assert get_context().as_dict() == {}

    def test_set_and_clear(self):
        set_operation_context("delete", "/tmp/x")
        assert get_context().as_dict() == {"operation": "delete", "store_path": "/tmp/x"}
        clear_context()
        assert get_context().as_dict() == {}

    def test_scoped_context_restores_previous(self):
        set_operation_context("outer")
        with operation_context("inner", "/tmp/x") as ctx:
            assert ctx.operation == "inner"
            assert get_context().store_path == "/tmp/x"
        assert get_context().operation == "outer"
        assert get_context().store_path is None

