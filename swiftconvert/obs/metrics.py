from __future__ import annotations
import time
from collections import Counter, defaultdict, deque
from typing import Dict, Any, Deque, Optional
from threading import RLock

class MetricsRegistry:
    """In-memory counters, duration samples and gauges for the JSON metrics view."""

    def __init__(self, max_samples: int = 1000):
        self._lock = RLock()
        self._max_samples = max_samples
        self._counters: Dict[str, Counter] = defaultdict(Counter)
        self._durations: Dict[str, Deque[float]] = defaultdict(lambda: deque(maxlen=self._max_samples))
        self._gauges: Dict[str, float] = {}

    def increment_counter(self, name: str, labels: Optional[Dict[str, str]] = None, value: float = 1.0):
        with self._lock:
            self._counters[name][_label_key(labels)] += value

    def record_duration(self, name: str, duration_ms: float):
        with self._lock:
            self._durations[name].append(duration_ms)

    def set_gauge(self, name: str, value: float, labels: Optional[Dict[str, str]] = None):
        with self._lock:
            key = _label_key(labels)
            self._gauges[f"{name}{{{key}}}" if key else name] = value

    def counter_value(self, name: str, labels: Optional[Dict[str, str]] = None) -> float:
        with self._lock:
            return self._counters[name][_label_key(labels)]

    def get_metrics(self) -> Dict[str, Any]:
        """Snapshot of everything collected so far."""
        with self._lock:
            return {
                "counters": {name: dict(values) for name, values in self._counters.items()},
                "durations_ms": {
                    name: _summarize(list(samples))
                    for name, samples in self._durations.items() if samples
                },
                "gauges": dict(self._gauges),
                "timestamp": time.time()
            }

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._durations.clear()
            self._gauges.clear()

def _label_key(labels: Optional[Dict[str, str]]) -> str:
    if not labels:
        return ""
    return ",".join(f"{k}={v}" for k, v in sorted(labels.items()))

def _summarize(values: list) -> Dict[str, float]:
    values.sort()
    n = len(values)
    return {
        "count": n,
        "min": values[0],
        "max": values[-1],
        "mean": sum(values) / n,
        "p50": values[int(n * 0.5)],
        "p95": values[min(n - 1, int(n * 0.95))],
    }

# Global metrics registry
metrics_registry = MetricsRegistry()

def inc_counter(name: str, labels: Optional[Dict[str, str]] = None, value: float = 1.0):
    """Increment counter."""
    metrics_registry.increment_counter(name, labels, value)

def record_duration(name: str, duration_ms: float):
    """Record duration in milliseconds."""
    metrics_registry.record_duration(name, duration_ms)

def set_gauge(name: str, value: float, labels: Optional[Dict[str, str]] = None):
    metrics_registry.set_gauge(name, value, labels)
