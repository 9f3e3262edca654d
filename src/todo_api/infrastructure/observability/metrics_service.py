"""Prometheus metrics declarations for the task API.

Labels use ONLY static enumerations, never task ids.
"""

from prometheus_client import Counter, Histogram

TASK_REQUESTS_TOTAL = Counter(
    "todo_api_task_requests_total",
    "Task requests by operation and outcome",
    ["operation", "outcome"],
)

TASK_REQUEST_DURATION_SECONDS = Histogram(
    "todo_api_task_request_duration_seconds",
    "Task request handling duration in seconds",
    ["operation"],
)
