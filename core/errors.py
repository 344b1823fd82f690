"""Race errors with tracking IDs."""

import uuid

from utils.timestamp import format_timestamp


class BaseRaceError(Exception):
    """Base error carrying a short tracking id, timestamp and context."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = uuid.uuid4().hex[:12]
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class ArenaError(BaseRaceError):
    """Operation on an arena that can no longer serve it (e.g. stopped)."""

    def __init__(self, message, arena_id=None, **kwargs):
        context = kwargs.pop("context", {})
        if arena_id:
            context["arena_id"] = arena_id
        super().__init__(message, context=context, **kwargs)


class ConfigError(BaseRaceError):
    """Invalid or unknown race option."""

    def __init__(self, message, option=None, **kwargs):
        context = kwargs.pop("context", {})
        if option:
            context["option"] = option
        super().__init__(message, context=context, **kwargs)
