"""Crash handling for the race CLI."""

import json
import os
import sys
import traceback
import uuid

from utils.timestamp import format_timestamp

_crash_log = "logs/crash.log"


def configure(crash_file):
    """Point crash records at `crash_file`. None disables the file."""
    global _crash_log
    _crash_log = crash_file


def _append_record(record):
    if not _crash_log:
        return
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a") as file:
            file.write(json.dumps(record, default=str) + "\n")
    except OSError:
        pass


def _build_record(exc_name, exc_msg, tb, context=None):
    record = {"id": uuid.uuid4().hex, "timestamp": format_timestamp(),
              "type": exc_name, "msg": exc_msg, "traceback": tb}
    if context:
        record["context"] = context
    return record


def log_crash(exc_type, exc_value, exc_tb):
    """sys.excepthook replacement: banner on stderr plus a crash record."""
    exc_name = exc_type.__name__ if exc_type else "Unknown"
    tb = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    record = _build_record(exc_name, str(exc_value) if exc_value else "", tb)

    rule = "=" * 60
    sys.stderr.write(f"\n{rule}\nRACE CRASH [{record['id']}] {record['timestamp']}\n{rule}\n")
    sys.stderr.write(f"{exc_name}: {record['msg']}\n{'-' * 60}\n{tb}{rule}\n\n")
    _append_record(record)
    return record


def log_async_crash(exc, context, logger=None):
    """Record an exception reported by the event loop."""
    exc_name = type(exc).__name__ if exc else "AsyncError"
    exc_msg = str(exc) if exc else context.get("message", "Unknown")
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)) if exc else None

    if logger:
        logger.error("async task crashed", error=exc_msg, task=str(context.get("task", context.get("future", "unknown"))))

    record = _build_record(exc_name, exc_msg, tb, {"message": context.get("message", "")})
    _append_record(record)
    return record


def create_async_handler(logger=None):
    """Exception handler for `loop.set_exception_handler`."""
    def handler(loop, context):
        log_async_crash(context.get("exception"), context, logger)
    return handler


def install_crash_handler():
    sys.excepthook = log_crash
