"""Tests for the sliding-window rate limiter."""

import pytest

from folio.presentation.api.rate_limit import SlidingWindowRateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock) -> SlidingWindowRateLimiter:
    return SlidingWindowRateLimiter(max_attempts=3, window_seconds=60, clock=clock)


class TestSlidingWindowRateLimiter:
    @pytest.mark.asyncio
    async def test_allows_up_to_limit(self, limiter):
        decisions = [await limiter.hit("ip:1") for _ in range(3)]

        assert all(d.allowed for d in decisions)
        assert [d.remaining for d in decisions] == [2, 1, 0]

    @pytest.mark.asyncio
    async def test_rejects_past_limit(self, limiter, clock):
        for _ in range(3):
            await limiter.hit("ip:1")
        clock.advance(10)

        decision = await limiter.hit("ip:1")

        assert decision.allowed is False
        assert decision.remaining == 0
        assert decision.retry_after == 50

    @pytest.mark.asyncio
    async def test_window_slides(self, limiter, clock):
        await limiter.hit("ip:1")
        clock.advance(30)
        await limiter.hit("ip:1")
        await limiter.hit("ip:1")
        assert (await limiter.hit("ip:1")).allowed is False

        # The first hit leaves the window; exactly one slot opens
        clock.advance(31)
        assert (await limiter.hit("ip:1")).allowed is True
        assert (await limiter.hit("ip:1")).allowed is False

    @pytest.mark.asyncio
    async def test_rejected_attempts_do_not_extend_block(self, limiter, clock):
        for _ in range(3):
            await limiter.hit("ip:1")
        for _ in range(5):
            await limiter.hit("ip:1")

        clock.advance(61)

        assert (await limiter.hit("ip:1")).allowed is True

    @pytest.mark.asyncio
    async def test_keys_are_independent(self, limiter):
        for _ in range(3):
            await limiter.hit("ip:1")

        assert (await limiter.hit("ip:2")).allowed is True

    @pytest.mark.asyncio
    async def test_reset(self, limiter):
        for _ in range(3):
            await limiter.hit("ip:1")

        await limiter.reset("ip:1")

        assert (await limiter.hit("ip:1")).allowed is True

    @pytest.mark.parametrize(
        ("attempts", "window"),
        [(0, 60), (3, 0)],
    )
    def test_invalid_configuration(self, attempts: int, window: float):
        with pytest.raises(ValueError):
            SlidingWindowRateLimiter(max_attempts=attempts, window_seconds=window)


class TestIdleKeyEviction:
    @pytest.mark.asyncio
    async def test_idle_keys_dropped_after_window(self, limiter, clock):
        for i in range(1000):
            await limiter.hit(f"ip:{i}")
        assert limiter.tracked_keys == 1000

        clock.advance(61)
        await limiter.hit("ip:new")

        assert limiter.tracked_keys == 1

    @pytest.mark.asyncio
    async def test_active_keys_survive_sweep(self, limiter, clock):
        await limiter.hit("ip:idle")
        clock.advance(40)
        await limiter.hit("ip:active")
        clock.advance(30)

        decision = await limiter.hit("ip:active")

        assert limiter.tracked_keys == 1
        assert decision.remaining == 1
