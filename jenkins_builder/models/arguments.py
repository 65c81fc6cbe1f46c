"""Models for command line arguments."""

from pathlib import Path

from pydantic import Field

from jenkins_builder.models.base import Model


class Arguments(Model):
    """Validated command line arguments."""

    credential_file: Path = Field(..., description="Path to the JSON credentials file")
    jenkins_host: str = Field(
        ..., min_length=1, description="Base URL of Jenkins, without trailing slash"
    )
