"""Project list parsing."""

from collections.abc import Sequence

from jenkins_builder.errors import ConfigError

PROJECTS_ENV_VAR = "PROJECTS"
PROJECT_SEPARATOR = ":"


def load_projects(env_value: str | None) -> Sequence[str]:
    """Split the ``PROJECTS`` value into project names, preserving order.

    Names are neither trimmed nor validated, and empty segments are kept.

    Raises:
        ConfigError: If the variable is not set

    """
    if env_value is None:
        raise ConfigError(f"{PROJECTS_ENV_VAR} is not set in the environment!")
    return env_value.split(PROJECT_SEPARATOR)
