"""Tests for shared/timeouts.py."""

import asyncio

import pytest

from shared.timeouts import with_timeout


class TestWithTimeout:
    @pytest.mark.asyncio
    async def test_returns_result_in_time(self):
        """Should return the awaited value when it finishes in time."""
        async def load():
            return ["a", "b"]

        assert await with_timeout(load(), 1.0, default=[]) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_returns_default_on_timeout(self):
        """Should degrade to the default instead of raising."""
        async def stalled():
            await asyncio.sleep(10)
            return ["late"]

        assert await with_timeout(stalled(), 0.01, default=[], label="feed") == []

    @pytest.mark.asyncio
    async def test_propagates_errors(self):
        """Errors other than the timeout are not swallowed."""
        async def broken():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await with_timeout(broken(), 1.0, default=None)
