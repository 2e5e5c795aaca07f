import pytest

from metricskit.metrics import Counter, Gauge
from metricskit.registry import Registry, create_registry, get_registry


@pytest.fixture
def reg():
    return create_registry()


def test_add_and_retrieve_metrics(reg):
    counter = Counter(10)
    gauge = Gauge(3.14)
    reg.add_metric("test_counter", counter)
    reg.add_metric("test_gauge", gauge)

    assert reg.get_metric("test_counter", Counter).value() == 10
    assert reg.get_metric("test_gauge", Gauge).value() == pytest.approx(3.14)


def test_get_non_existent_metric_creates_default(reg):
    new_counter = reg.get_metric("new_counter", Counter)
    new_gauge = reg.get_metric("new_gauge", Gauge)

    assert new_counter.value() == 0
    assert new_gauge.value() == pytest.approx(0.0)
    assert set(reg.metric_group()) == {"new_counter", "new_gauge"}


def test_metric_modifications_persist(reg):
    reg.add_metric("persistent_counter", Counter(5))

    counter1 = reg.get_metric("persistent_counter", Counter)
    counter1 += 10

    counter2 = reg.get_metric("persistent_counter", Counter)
    assert counter2.value() == 15


def test_get_metric_group(reg):
    reg.add_metric("metric1", Counter(1))
    reg.add_metric("metric2", Gauge(2.0))

    metrics = reg.metric_group()
    assert len(metrics) >= 2
    assert "metric1" in metrics
    assert "metric2" in metrics


def test_metric_group_is_a_snapshot(reg):
    reg.add_metric("metric1", Counter(1))
    snapshot = reg.metric_group()
    snapshot["other"] = Counter(2)
    assert "other" not in reg.metric_group()


def test_retrieved_metric_shares_added_handle(reg):
    gauge = Gauge(0.97)
    reg.add_metric("CPU", gauge)
    reg.get_metric("CPU", Gauge).__iadd__(1.0)
    assert gauge.value() == pytest.approx(1.97)


def test_add_metric_replaces(reg):
    reg.add_metric("x", Counter(1))
    reg.add_metric("x", Counter(7))
    assert reg.get_metric("x", Counter).value() == 7


def test_mismatched_type_returns_unconnected_default(reg):
    reg.add_metric("x", Counter(4))
    gauge = reg.get_metric("x", Gauge)
    gauge += 1.0
    assert gauge.value() == pytest.approx(1.0)
    assert reg.get_metric("x", Counter).value() == 4


def test_unsupported_type_rejected(reg):
    with pytest.raises(TypeError):
        reg.get_metric("x", float)
    with pytest.raises(TypeError):
        reg.add_metric("x", 3)


def test_get_registry_is_singleton():
    get_registry().add_metric("singleton_probe", Counter(9))
    assert get_registry().get_metric("singleton_probe", Counter).value() == 9
    assert "singleton_probe" in get_registry().metric_group()


def test_create_registry_is_fresh():
    first = create_registry()
    second = create_registry()
    first.add_metric("only_here", Counter())
    assert isinstance(first, Registry)
    assert "only_here" not in second.metric_group()