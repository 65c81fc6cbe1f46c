"""Models for build trigger results."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class TriggerResult:
    """Outcome of a single build trigger.

    ``status`` is 0 on success, otherwise the HTTP status code returned by
    Jenkins or the transport failure sentinel.
    """

    project: str
    url: str
    status: int = 0
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the trigger was accepted."""
        return self.status == 0
