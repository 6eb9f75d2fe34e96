import json
import logging

from user_api.logs import OPLOG_LOGGER, LogContext


def test_log_context_writes_one_json_line(caplog):
    log = LogContext("CREATE_USER")
    log.set_entity("USER", 1)
    log.set_payload({"name": "Ana"})
    log.set_after({"id": 1, "name": "Ana"})
    with caplog.at_level(logging.INFO, logger=OPLOG_LOGGER):
        rec = log.write("OK")
    lines = [r for r in caplog.records if r.name == OPLOG_LOGGER]
    assert len(lines) == 1
    parsed = json.loads(lines[0].getMessage())
    assert parsed["action"] == "CREATE_USER"
    assert parsed["entity_id"] == "1"
    assert parsed["result"] == "OK"
    assert parsed == rec


def test_errors_log_at_warning(caplog):
    log = LogContext("DELETE_USER")
    with caplog.at_level(logging.INFO, logger=OPLOG_LOGGER):
        log.write("ERROR", "user not found")
    rec = [r for r in caplog.records if r.name == OPLOG_LOGGER][0]
    assert rec.levelno == logging.WARNING
    assert json.loads(rec.getMessage())["err_msg"] == "user not found"


def test_mutating_routes_emit_oplog(client, caplog):
    with caplog.at_level(logging.INFO, logger=OPLOG_LOGGER):
        client.post("/api/v1/users", json={"name": "Ana", "email": "ana@example.com", "age": 22})
        client.delete("/api/v1/users/1")
    actions = [json.loads(r.getMessage())["action"] for r in caplog.records if r.name == OPLOG_LOGGER]
    assert actions == ["CREATE_USER", "DELETE_USER"]


def test_write_returns_record_without_extra_state():
    log = LogContext("UPDATE_USER")
    rec = log.write("OK")
    assert rec["action"] == "UPDATE_USER"
    assert not hasattr(log, "written")
