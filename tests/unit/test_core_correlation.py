"""Unit tests for the correlation id context.

Tests cover:
- Default (no active scope)
- correlation_scope() install, generation, nesting and reset
- Isolation between concurrent asyncio tasks
"""

import asyncio

import pytest

from faultlog.core.correlation import (
    correlation_id_context,
    correlation_scope,
    get_correlation_id,
    set_correlation_id,
)


@pytest.mark.unit
class TestCorrelationScope:
    """Test correlation_scope()."""

    def test_no_scope_returns_none(self):
        """Test there is no correlation id outside a scope."""
        assert get_correlation_id() is None

    def test_scope_installs_and_resets(self):
        """Test the id is visible inside the block only."""
        with correlation_scope("req-1") as active:
            assert active == "req-1"
            assert get_correlation_id() == "req-1"

        assert get_correlation_id() is None

    def test_scope_generates_id_when_omitted(self):
        """Test a new id is generated for an anonymous scope."""
        with correlation_scope() as first:
            pass
        with correlation_scope() as second:
            pass

        assert first and second
        assert first != second

    def test_nested_scopes_restore_outer(self):
        """Test leaving an inner scope restores the outer id."""
        with correlation_scope("outer"):
            with correlation_scope("inner"):
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "outer"

    def test_scope_resets_on_exception(self):
        """Test the id is cleared even when the block raises."""
        with pytest.raises(ValueError):
            with correlation_scope("req-2"):
                raise ValueError("boom")

        assert get_correlation_id() is None

    def test_set_correlation_id_returns_reset_token(self):
        """Test set_correlation_id() can be undone with its token."""
        token = set_correlation_id("manual")
        assert get_correlation_id() == "manual"

        correlation_id_context.reset(token)

        assert get_correlation_id() is None

    @pytest.mark.asyncio
    async def test_tasks_are_isolated(self):
        """Test concurrent tasks each see their own correlation id."""

        async def handle(request_id):
            with correlation_scope(request_id):
                await asyncio.sleep(0)
                return get_correlation_id()

        results = await asyncio.gather(*(handle(f"req-{i}") for i in range(5)))

        assert results == [f"req-{i}" for i in range(5)]
