"""
Prometheus metrics collection for modelgen

Generation runs are short-lived, so metrics are kept in a private registry and
can be written out in the Prometheus text format for a textfile collector.
"""
from pathlib import Path

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    write_to_textfile,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# GENERATION METRICS
# =======================

generation_runs_total = Counter(
    name="modelgen_generation_runs_total",
    documentation="Total number of generation runs",
    labelnames=["dialect", "status"],  # status: success, failure
    registry=REGISTRY,
)

generation_duration_seconds = Histogram(
    name="modelgen_generation_duration_seconds",
    documentation="Time spent generating artifacts for one table in seconds",
    labelnames=["dialect"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)

rules_derived_total = Counter(
    name="modelgen_rules_derived_total",
    documentation="Total number of validation rules derived",
    labelnames=["dialect", "kind"],
    registry=REGISTRY,
)

columns_skipped_total = Counter(
    name="modelgen_columns_skipped_total",
    documentation="Total number of columns skipped because their data type is unsupported",
    labelnames=["family"],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def write_metrics_file(path: str | Path) -> None:
    """
    Write all metrics to a file in the Prometheus text format

    Args:
        path: Destination file (written atomically by prometheus_client)
    """
    write_to_textfile(str(path), REGISTRY)


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def observe_histogram(histogram: Histogram, value: float, **labels) -> None:
    """
    Observe a value in a histogram metric

    Args:
        histogram: Prometheus Histogram metric
        value: Value to observe
        **labels: Label values for the metric
    """
    histogram.labels(**labels).observe(value)


class MetricsCollector:
    """
    Metrics collector for generation runs.

    Gives the pipeline one place to report what a run produced.
    """

    def record_run(
        self,
        dialect: str,
        rule_kinds: list[str],
        skipped_families: list[str],
        duration_seconds: float = 0.0,
    ) -> None:
        """
        Record a generation run.

        Args:
            dialect: Dialect the model was rendered in
            rule_kinds: Kind of every derived rule (one entry per rule)
            skipped_families: Family of every skipped column
            duration_seconds: Time taken by the run
        """
        increment_counter(generation_runs_total, 1, dialect=dialect, status="success")

        for kind in rule_kinds:
            increment_counter(rules_derived_total, 1, dialect=dialect, kind=kind)
        for family in skipped_families:
            increment_counter(columns_skipped_total, 1, family=family)

        if duration_seconds > 0:
            observe_histogram(generation_duration_seconds, duration_seconds, dialect=dialect)

    def record_failure(self, dialect: str) -> None:
        increment_counter(generation_runs_total, 1, dialect=dialect, status="failure")
