from prometheus_client import CollectorRegistry

from principal_auth.observability.metrics import OUTCOMES, Metrics


def test_outcomes_start_at_zero():
    reg = CollectorRegistry()
    Metrics(reg)
    for outcome in OUTCOMES:
        assert reg.get_sample_value("principal_auth_resolutions_total", {"outcome": outcome}) == 0.0


def test_reregistration_reuses_collectors():
    reg = CollectorRegistry()
    first = Metrics(reg)
    second = Metrics(reg)
    first.record_resolution("missing")
    second.record_resolution("missing")
    assert first.resolutions is second.resolutions
    assert reg.get_sample_value("principal_auth_resolutions_total", {"outcome": "missing"}) == 2.0
