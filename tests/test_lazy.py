from __future__ import annotations

import gc
import weakref

import pytest

from deferred import Deferred, as_deferred, defer, suspend
from deferred._helpers import Once, once

from fakes import Boom, CountingProducer, FailingProducer


class TestDefer:
    def test_force_yields_value(self):
        assert defer(5)() == 5

    def test_construction_is_inert(self):
        producer = CountingProducer(5)
        d = Deferred(producer)
        assert producer.runs == 0
        assert d() == 5
        assert producer.runs == 1

    def test_pure_matches_defer(self):
        assert Deferred.pure("x")() == defer("x")() == "x"

    def test_captured_value_is_not_copied(self):
        items = [1, 2]
        d = defer(items)
        assert d() is items


class TestForcing:
    def test_every_force_reruns_producer(self):
        producer = CountingProducer(3)
        d = suspend(producer)
        d()
        d()
        d()
        assert producer.runs == 3

    def test_mutable_state_is_reread(self):
        state = {"n": 1}
        d = suspend(lambda: state["n"])
        assert d() == 1
        state["n"] = 2
        assert d() == 2

    def test_failure_surfaces_on_force(self):
        producer = FailingProducer(Boom("no"))
        d = suspend(producer)
        assert producer.runs == 0
        with pytest.raises(Boom):
            d()


class TestCache:
    def test_runs_once(self):
        producer = CountingProducer(7)
        d = suspend(producer).cache()
        assert producer.runs == 0
        assert d() == 7
        assert d() == 7
        assert producer.runs == 1

    def test_failure_is_not_cached(self):
        calls = {"n": 0}

        def flaky() -> int:
            calls["n"] += 1
            if calls["n"] == 1:
                raise Boom("first")
            return 42

        d = suspend(flaky).cache()
        with pytest.raises(Boom):
            d()
        assert d() == 42
        assert d() == 42
        assert calls["n"] == 2

    def test_once_reports_realization(self):
        cell: Once[int] = once(CountingProducer(1))
        assert not cell.is_realized
        assert repr(cell) == "Once(pending)"
        cell()
        assert cell.is_realized
        assert repr(cell) == "Once(realized=1)"

    def test_once_releases_producer(self):
        class Source:
            def __call__(self) -> int:
                return 1

        source = Source()
        alive = weakref.ref(source)
        cell = once(source)
        del source
        gc.collect()
        assert alive() is not None
        assert cell() == 1
        gc.collect()
        assert alive() is None
        assert cell() == 1


class TestAsDeferred:
    def test_keeps_deferred_instances(self):
        d = defer(1)
        assert as_deferred(d) is d

    def test_wraps_plain_callables(self):
        d = as_deferred(lambda: 9)
        assert isinstance(d, Deferred)
        assert d() == 9
