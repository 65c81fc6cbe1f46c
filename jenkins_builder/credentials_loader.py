"""Load Jenkins credentials from a JSON file."""

import asyncio
import logging
from pathlib import Path

from pydantic import ValidationError

from jenkins_builder.errors import FileReadError, InvalidJSONError, MissingFieldError
from jenkins_builder.models.credentials import Credentials

log = logging.getLogger(__name__)


def read_file_contents(path: Path) -> bytes:
    """Read the whole file, failing if fewer bytes arrive than stat reported.

    Raises:
        FileReadError: If the file cannot be stat'd, opened or fully read

    """
    try:
        expected_size = path.stat().st_size
        with path.open("rb") as input_file:
            contents = input_file.read(expected_size)
    except OSError as e:
        raise FileReadError(
            f"Couldn't open credentials file: {e.strerror or e}"
        ) from e

    if len(contents) != expected_size:
        raise FileReadError(
            f"Read size was not expected size: read {len(contents)} of "
            f"{expected_size} bytes from {path}"
        )

    return contents


def parse_credentials(contents: bytes) -> Credentials:
    """Parse and validate credentials JSON.

    Raises:
        InvalidJSONError: If contents are not valid JSON
        MissingFieldError: If ``user`` or ``token`` is absent or not a string

    """
    try:
        return Credentials.model_validate_json(contents)
    except ValidationError as e:
        errors = e.errors()
        if any(error["type"] == "json_invalid" for error in errors):
            raise InvalidJSONError(
                "Credentials file doesn't contain valid JSON"
            ) from e

        # A non-object document fails at the root, before any field is checked.
        first_loc = errors[0]["loc"]
        field = str(first_loc[0]) if first_loc else "user"
        raise MissingFieldError(field) from e


async def load_credentials(path: Path) -> Credentials:
    """Load credentials from a JSON file.

    Args:
        path: Path to a file shaped like ``{"user": "...", "token": "..."}``

    Returns:
        Validated credentials, independent of the file buffer

    Raises:
        FileReadError: If the file cannot be read
        InvalidJSONError: If the file is not valid JSON
        MissingFieldError: If ``user`` or ``token`` is missing or not a string

    """
    log.debug("Reading credentials from %s", path)
    contents = await asyncio.to_thread(read_file_contents, path)
    return parse_credentials(contents)
