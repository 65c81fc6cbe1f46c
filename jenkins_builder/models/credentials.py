"""Models for the Jenkins credentials file."""

from pydantic import Field, SecretStr, StrictStr

from jenkins_builder.models.base import Model


class Credentials(Model):
    """User credentials loaded from the JSON credentials file.

    Field order matters: validation errors are reported in declaration order,
    so a file missing both keys is reported as missing ``user``.
    """

    user: StrictStr = Field(..., description="Jenkins user name")
    token: SecretStr = Field(..., description="Jenkins API token or password")
