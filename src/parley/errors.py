"""
Parley error types.
"""

from typing import Any, Optional


class ParleyError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ServerStatusError(ParleyError):
    """The responder answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__("http_error", f"HTTP {status_code}: {body[:200]}", {"status_code": status_code})
        self.status_code = status_code


class MalformedReplyError(ParleyError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("malformed_reply", message, details)


class ConfigError(ParleyError):
    def __init__(self, message: str):
        super().__init__("config_error", message)
