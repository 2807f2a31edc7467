"""Prometheus metrics for monitoring score distribution and tip usage"""

from prometheus_client import Counter, Histogram

from penny_score.domain.insights import score_zone

# Score metrics
score_counter = Counter(
    "penny_score_total",
    "Total score computations",
    ["zone"],  # low | medium | high
)

score_percent_histogram = Histogram(
    "penny_score_percent",
    "Distribution of overall score percentages",
    buckets=[10, 20, 33, 50, 66, 80, 90, 100],
)

# Tip metrics
tip_counter = Counter(
    "penny_tip_picks_total",
    "Tips served",
    ["area"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(percent: float) -> None:
    """Record score metrics for monitoring the zone distribution"""
    score_counter.labels(zone=score_zone(percent).value).inc()
    score_percent_histogram.observe(percent)


def record_tip(area: int) -> None:
    tip_counter.labels(area=str(int(area))).inc()
