"""Jenkins build trigger client."""

import base64
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp
from yarl import URL

from jenkins_builder.errors import TRANSPORT_FAILURE
from jenkins_builder.models.credentials import Credentials
from jenkins_builder.models.result import TriggerResult

log = logging.getLogger(__name__)


def build_project_url(jenkins_host: str, project: str) -> str:
    """Return the build trigger URL for a project.

    The project name is inserted verbatim: reserved characters such as ``/``,
    ``?`` or ``#`` are not escaped.
    """
    return f"{jenkins_host}/job/{project}/build"


def basic_auth_header(credentials: Credentials) -> str:
    """Return the Basic ``Authorization`` value for the credentials.

    Built by hand and UTF-8 encoded: user names may contain ``:`` and either
    value may fall outside latin-1.
    """
    auth_string = f"{credentials.user}:{credentials.token.get_secret_value()}"
    auth_bytes = base64.b64encode(auth_string.encode("utf-8")).decode("ascii")
    return f"Basic {auth_bytes}"


@dataclass(frozen=True, kw_only=True)
class JenkinsClient:
    """Triggers Jenkins builds over one authenticated HTTP session."""

    jenkins_host: str
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_credentials(
        cls, jenkins_host: str, credentials: Credentials
    ) -> AsyncGenerator["JenkinsClient", None]:
        """Create client with managed session lifecycle."""
        async with aiohttp.ClientSession(
            headers={"Authorization": basic_auth_header(credentials)},
            raise_for_status=True,
        ) as session:
            yield cls(jenkins_host=jenkins_host, session=session)

    async def trigger_build(self, project: str) -> TriggerResult:
        """POST to the project's build endpoint.

        Any response that is not an HTTP error counts as success and its body
        is ignored. HTTP errors report their status code, and failures without
        a response report ``TRANSPORT_FAILURE``.
        """
        url = build_project_url(self.jenkins_host, project)
        log.info("Triggering build: project=%s, url=%s", project, url)

        try:
            # encoded=True keeps yarl from quoting the concatenated URL
            async with self.session.post(URL(url, encoded=True), data=b""):
                pass
        except aiohttp.ClientResponseError as e:
            log.error(
                "Couldn't build project '%s': %s %s", project, e.status, e.message
            )
            return TriggerResult(
                project=project,
                url=url,
                status=e.status or TRANSPORT_FAILURE,
                message=f"{e.status} {e.message}",
            )
        except (aiohttp.ClientError, TimeoutError) as e:
            log.error("Couldn't build project '%s': %s", project, e)
            return TriggerResult(
                project=project,
                url=url,
                status=TRANSPORT_FAILURE,
                message=str(e) or type(e).__name__,
            )

        log.info("Build triggered for %s", project)
        return TriggerResult(project=project, url=url)
