"""Errors raised while preparing a build run and their process exit codes."""

import errno

SUCCESS = 0
# Reported when a trigger fails before any HTTP response is received.
TRANSPORT_FAILURE = errno.EIO


class JenkinsBuilderError(Exception):
    """Base class for errors that abort the run before any build is triggered."""

    exit_code: int = errno.EINVAL


class FileReadError(JenkinsBuilderError):
    """Raised when the credentials file cannot be read completely."""


class InvalidJSONError(JenkinsBuilderError):
    """Raised when the credentials file does not contain valid JSON."""

    exit_code = 1


class MissingFieldError(JenkinsBuilderError):
    """Raised when the credentials file lacks a string ``user`` or ``token``."""

    EXIT_CODES = {"user": 2, "token": 3}

    def __init__(self, field: str) -> None:
        super().__init__(f"Credentials file is missing valid '{field}' key")
        self.field = field
        self.exit_code = self.EXIT_CODES[field]


class ConfigError(JenkinsBuilderError):
    """Raised when required configuration is absent from the environment."""


def exit_status(code: int) -> int:
    """Process exit status for a result code.

    The OS keeps only the low 8 bits, so a failing HTTP status such as 256 or
    512 is reported as 1 instead of 0.
    """
    if code != SUCCESS and code % 256 == 0:
        return 1
    return code
