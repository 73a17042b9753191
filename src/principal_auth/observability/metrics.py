"""Prometheus counters for principal resolution."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, REGISTRY

OUTCOMES = ("verified", "missing", "invalid")


def _safe_counter(name: str, desc: str, registry: CollectorRegistry, labelnames: tuple[str, ...] = ()) -> Counter:
    try:
        return Counter(name, desc, labelnames=labelnames, registry=registry)
    except ValueError:
        return registry._names_to_collectors.get(name + "_total") or registry._names_to_collectors[name]


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or REGISTRY
        self.resolutions = _safe_counter(
            "principal_auth_resolutions_total",
            "Principal resolutions by outcome",
            self.registry,
            labelnames=("outcome",),
        )
        self.rejections = _safe_counter(
            "principal_auth_rejections_total",
            "Requests rejected with 401 in strict mode",
            self.registry,
            labelnames=("code",),
        )
        for outcome in OUTCOMES:
            self.resolutions.labels(outcome=outcome)

    def record_resolution(self, outcome: str) -> None:
        self.resolutions.labels(outcome=outcome).inc()

    def record_rejection(self, code: str) -> None:
        self.rejections.labels(code=code).inc()


_metrics: Metrics | None = None


def get_metrics() -> Metrics:
    global _metrics
    if _metrics is None:
        _metrics = Metrics()
    return _metrics
