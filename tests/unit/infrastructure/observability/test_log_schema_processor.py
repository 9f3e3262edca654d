from todo_api.infrastructure.observability.logging.log_schema_processor import (
    log_schema_processor,
)


def test_flat_event_is_nested_into_blocks(monkeypatch):
    monkeypatch.setenv("SERVICE_NAME", "todo-api-test")
    monkeypatch.setenv("APP_ENV", "qa")
    event = {
        "event": "Task service call failed",
        "level": "error",
        "timestamp": "2024-01-01T00:00:00Z",
        "correlation_id": "corr-1",
        "error_type": "RuntimeError",
        "error_details": "boom",
        "context_component": "task_handler",
        "context_endpoint": "/tasks",
        "context_method": "POST",
        "operation": "create",
    }

    result = log_schema_processor(None, "error", event)

    assert result["event"] == "Task service call failed"
    assert result["service"] == "todo-api-test"
    assert result["environment"] == "qa"
    assert result["correlation_id"] == "corr-1"
    assert result["error"] == {"type": "RuntimeError", "details": "boom"}
    assert result["context"] == {"component": "task_handler", "endpoint": "/tasks", "method": "POST"}
    assert result["extra"] == {"operation": "create"}
    assert "processing" not in result


def test_processing_block_casts_duration():
    result = log_schema_processor(
        None,
        "info",
        {
            "event": "Request processed",
            "processing_status": "SUCCESS",
            "processing_duration_ms": "12.5",
            "processing_http_status": 201,
        },
    )

    assert result["processing"] == {"status": "SUCCESS", "duration_ms": 12.5, "http_status": 201}
    assert "error" not in result
    assert "context" not in result
    assert "extra" not in result


def test_unparseable_duration_becomes_none():
    result = log_schema_processor(
        None, "info", {"event": "x", "processing_status": "ERROR", "processing_duration_ms": "n/a"}
    )

    assert result["processing"]["duration_ms"] is None
