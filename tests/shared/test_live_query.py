"""Tests for shared/live_query.py."""

import asyncio

import pytest

from shared.live_query import LiveQuery, LiveQueryHub


class TestLiveQuery:
    @pytest.mark.asyncio
    async def test_first_snapshot_always_delivered(self):
        """The first poll should deliver even an empty result."""
        received = []

        async def fetch():
            return []

        query = LiveQuery(fetch, received.append, interval=60)
        assert await query.poll_once() is True
        assert received == [[]]

    @pytest.mark.asyncio
    async def test_unchanged_snapshot_not_redelivered(self):
        """Only changed result sets should reach the callback."""
        results = [[1], [1], [1, 2]]
        received = []

        async def fetch():
            return results.pop(0)

        query = LiveQuery(fetch, received.append, interval=60)
        await query.poll_once()
        await query.poll_once()
        await query.poll_once()

        assert received == [[1], [1, 2]]

    @pytest.mark.asyncio
    async def test_fetch_failure_keeps_previous_snapshot(self):
        """A failed fetch should be logged and not delivered."""
        calls = {"n": 0}
        received = []

        async def fetch():
            calls["n"] += 1
            if calls["n"] == 2:
                raise RuntimeError("network down")
            return ["row"]

        query = LiveQuery(fetch, received.append, interval=60)
        await query.poll_once()
        assert await query.poll_once() is False
        await query.poll_once()

        assert received == [["row"]]

    @pytest.mark.asyncio
    async def test_start_and_cancel(self):
        """start() should poll in the background until cancelled."""
        received = []

        async def fetch():
            return ["row"]

        query = LiveQuery(fetch, received.append, interval=0.01)
        cancel = query.start()
        await asyncio.sleep(0.05)
        assert query.active
        cancel()
        assert not query.active
        assert received == [["row"]]


class TestBackoff:
    @pytest.mark.asyncio
    async def test_delay_doubles_while_unchanged_and_is_capped(self):
        async def fetch():
            return ["row"]

        query = LiveQuery(fetch, lambda _: None, interval=0.01, max_interval=0.04)
        query.start()
        await asyncio.sleep(0.2)
        query.cancel()

        assert query.delay == 0.04

    @pytest.mark.asyncio
    async def test_no_backoff_without_max_interval(self):
        async def fetch():
            return ["row"]

        query = LiveQuery(fetch, lambda _: None, interval=0.01)
        query.start()
        await asyncio.sleep(0.05)
        query.cancel()

        assert query.delay == 0.01

    @pytest.mark.asyncio
    async def test_wake_polls_now_and_resets_delay(self):
        """A woken query should not wait out its backed-off delay."""
        rows = ["a"]
        received = []

        async def fetch():
            return list(rows)

        query = LiveQuery(fetch, received.append, interval=30, max_interval=60)
        query.start()
        await asyncio.sleep(0.02)
        rows.append("b")
        query.wake()
        await asyncio.sleep(0.02)
        query.cancel()

        assert received == [["a"], ["a", "b"]]
        assert query.delay == 30


class TestLiveQueryHub:
    @pytest.mark.asyncio
    async def test_one_query_per_key(self):
        calls = {"n": 0}
        first, second = [], []

        async def fetch():
            calls["n"] += 1
            return ["row"]

        hub = LiveQueryHub(interval=30)
        hub.subscribe("feed", fetch, first.append)
        hub.subscribe("feed", fetch, second.append)
        await asyncio.sleep(0.02)
        hub.close()

        assert calls["n"] == 1
        assert first == second == [["row"]]

    @pytest.mark.asyncio
    async def test_late_subscriber_gets_current_snapshot(self):
        async def fetch():
            return ["row"]

        hub = LiveQueryHub(interval=30)
        hub.subscribe("feed", fetch, lambda _: None)
        await asyncio.sleep(0.02)

        late = []
        hub.subscribe("feed", fetch, late.append)
        hub.close()

        assert late == [["row"]]

    @pytest.mark.asyncio
    async def test_last_unsubscribe_cancels_query(self):
        async def fetch():
            return []

        hub = LiveQueryHub(interval=30)
        stop_a = hub.subscribe("feed", fetch, lambda _: None)
        stop_b = hub.subscribe("feed", fetch, lambda _: None)

        stop_a()
        assert hub.keys == {"feed"}
        stop_b()
        stop_b()
        assert hub.keys == set()

    @pytest.mark.asyncio
    async def test_wake_unknown_key_is_ignored(self):
        hub = LiveQueryHub(interval=30)
        hub.wake("missing")
        assert hub.keys == set()

    @pytest.mark.asyncio
    async def test_failing_subscriber_does_not_starve_others(self):
        received = []

        async def fetch():
            return ["row"]

        def broken(_):
            raise RuntimeError("render failed")

        hub = LiveQueryHub(interval=30)
        hub.subscribe("feed", fetch, broken)
        hub.subscribe("feed", fetch, received.append)
        await asyncio.sleep(0.02)
        hub.close()

        assert received == [["row"]]
