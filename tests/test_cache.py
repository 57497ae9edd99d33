"""Tests for bigmath.core.cache and the constant tiers in bigmath.functions.constants."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from decimal import ROUND_HALF_DOWN, Decimal

import pytest

from bigmath.core.cache import ConstantCache
from bigmath.core.context import MathContext, Rounding
from bigmath.core.errors import ConfigurationError
from bigmath.functions.constants import LibraryConstants

# ---------------------------------------------------------------------------
# ConstantCache
# ---------------------------------------------------------------------------


class TestConstantCache:
    def test_computes_once(self) -> None:
        cache: ConstantCache[str, int] = ConstantCache("test")
        calls: list[str] = []

        def compute() -> int:
            calls.append("x")
            return 42

        assert cache.get_or_compute("k", compute) == 42
        assert cache.get_or_compute("k", compute) == 42
        assert calls == ["x"]
        assert "k" in cache
        assert len(cache) == 1

    def test_concurrent_callers_share_one_computation(self) -> None:
        cache: ConstantCache[str, object] = ConstantCache("test")
        barrier = threading.Barrier(8)
        lock = threading.Lock()
        calls = 0

        def compute() -> object:
            nonlocal calls
            with lock:
                calls += 1
            time.sleep(0.05)
            return object()

        def worker() -> object:
            barrier.wait()
            return cache.get_or_compute("pi", compute)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: worker(), range(8)))

        assert calls == 1
        assert all(r is results[0] for r in results)

    def test_distinct_keys_compute_separately(self) -> None:
        cache: ConstantCache[int, int] = ConstantCache("test")
        assert cache.get_or_compute(1, lambda: 10) == 10
        assert cache.get_or_compute(2, lambda: 20) == 20
        assert len(cache) == 2

    def test_failure_releases_key(self) -> None:
        cache: ConstantCache[str, int] = ConstantCache("test")

        def boom() -> int:
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            cache.get_or_compute("k", boom)
        assert "k" not in cache
        assert cache.get_or_compute("k", lambda: 7) == 7

    def test_logs_computation(self, caplog: pytest.LogCaptureFixture) -> None:
        cache: ConstantCache[str, int] = ConstantCache("named")
        with caplog.at_level("DEBUG", logger="bigmath.core.cache"):
            cache.get_or_compute("key", lambda: 1)
        assert "named: computing 'key'" in caplog.text


# ---------------------------------------------------------------------------
# LibraryConstants
# ---------------------------------------------------------------------------


class TestLibraryConstants:
    @pytest.mark.parametrize(
        ("precision", "tier"),
        [(1, 255), (255, 255), (256, 510), (510, 510), (1000, 1020)],
    )
    def test_tier(self, constants: LibraryConstants, precision: int, tier: int) -> None:
        assert constants.tier(precision) == tier

    def test_computed_once_per_tier(self, constants: LibraryConstants) -> None:
        seen: list[MathContext] = []

        def compute(mc: MathContext) -> Decimal:
            seen.append(mc)
            return Decimal("1.23456789")

        constants.constant("c", MathContext(5), compute)
        constants.constant("c", MathContext(50), compute)
        assert len(seen) == 1
        assert seen[0] == MathContext(255, Rounding.HALF_DOWN)

        constants.constant("c", MathContext(300), compute)
        assert len(seen) == 2
        assert seen[1].precision == 510

    def test_rounds_to_caller(self, constants: LibraryConstants) -> None:
        value = constants.constant("c", MathContext(3), lambda mc: Decimal("1.23456789"))
        assert value == Decimal("1.23")

    def test_rounding_rule_from_config(self, constants: LibraryConstants) -> None:
        assert constants.config.constants_rounding == ROUND_HALF_DOWN

    def test_unlimited_rejected(self, constants: LibraryConstants) -> None:
        with pytest.raises(ConfigurationError):
            constants.constant("c", MathContext.UNLIMITED, lambda mc: Decimal(1))

    def test_pi_is_cached(self, constants: LibraryConstants) -> None:
        before = constants.cached_keys()
        first = constants.pi(MathContext(30))
        second = constants.pi(MathContext(30))
        assert first == second
        assert constants.cached_keys() == before + 1
