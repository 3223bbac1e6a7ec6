import structlog
from structlog.contextvars import get_contextvars

from thandi.infrastructure.observability.logger_config import (
    bind_request_context,
    configure_structlog,
    rename_event_to_message,
)


def test_bind_request_context_replaces_previous_bindings() -> None:
    bind_request_context("req-1", school="abc")
    rid = bind_request_context("req-2")
    assert rid == "req-2"
    assert get_contextvars() == {"request_id": "req-2"}


def test_bind_request_context_generates_id() -> None:
    rid = bind_request_context()
    assert len(rid) == 32
    assert get_contextvars()["request_id"] == rid


def test_rename_event_to_message() -> None:
    event = rename_event_to_message(None, "info", {"event": "curriculum_gate_selected", "grade": 10})
    assert event == {"message": "curriculum_gate_selected", "grade": 10}


def test_configure_structlog_emits_json(caplog) -> None:
    configure_structlog()
    bind_request_context("req-json")
    structlog.get_logger("thandi.test").warning("curriculum_gate_degraded", operation="select")
    assert '"message": "curriculum_gate_degraded"' in caplog.text
    assert '"request_id": "req-json"' in caplog.text
