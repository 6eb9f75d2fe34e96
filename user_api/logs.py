import json, logging, logging.config, time, uuid, datetime as dt
from typing import Optional

OPLOG_LOGGER = "user_api.oplog"

oplog = logging.getLogger(OPLOG_LOGGER)


def configure_logging(level: str = "INFO"):
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "level": level.upper(),
                }
            },
            "root": {"handlers": ["default"], "level": level.upper()},
        }
    )


class LogContext:
    def __init__(self, action: str, user: str = "api"):
        self.action = action
        self.user = user
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.before = None
        self.after = None
        self.payload = None
        self.entity_type = None
        self.entity_id = None

    def set_entity(self, etype: str, eid):
        self.entity_type = etype
        self.entity_id = str(eid)

    def set_before(self, obj): self.before = obj
    def set_after(self, obj): self.after = obj
    def set_payload(self, obj): self.payload = obj

    def write(self, result: str = "OK", err: Optional[str] = None) -> dict:
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        rec = {
            "ts": dt.datetime.now().astimezone().isoformat(),
            "user": self.user,
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "before": self.before,
            "after": self.after,
            "payload": self.payload,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }
        level = logging.INFO if result == "OK" else logging.WARNING
        oplog.log(level, json.dumps(rec, ensure_ascii=False, default=str))
        return rec
