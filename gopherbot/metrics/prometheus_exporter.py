"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Gauge


gopher_generation_total = Counter(
    "gopher_generation_total",
    "Total number of random gopher generations, by outcome.",
    ["outcome"],
)

gopher_callback_total = Counter(
    "gopher_callback_total",
    "Total number of delayed Slack responses, by outcome.",
    ["outcome"],
)

notify_queue_depth = Gauge(
    "gopher_notify_queue_depth",
    "Number of delayed responses waiting for a worker.",
)
