"""Sequential build triggering across a list of projects."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from jenkins_builder.client import JenkinsClient
from jenkins_builder.errors import SUCCESS
from jenkins_builder.models.result import TriggerResult

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class BuildOrchestrator:
    """Triggers builds one project at a time, halting on the first failure."""

    client: JenkinsClient

    async def trigger_builds(self, projects: Sequence[str]) -> Sequence[TriggerResult]:
        """Trigger builds in order.

        Args:
            projects: Project names in the order they should be triggered

        Returns:
            Results for every attempted project; the last one is the failure
            when the run stopped early

        """
        results: list[TriggerResult] = []
        for project in projects:
            result = await self.client.trigger_build(project)
            results.append(result)
            if not result.succeeded:
                log.info(
                    "Stopping after failed build of %s (%d project(s) skipped)",
                    project,
                    len(projects) - len(results),
                )
                break
        return results


def exit_code_for(results: Sequence[TriggerResult]) -> int:
    """Exit code of the last attempted trigger, or success when none ran."""
    if not results:
        return SUCCESS
    return results[-1].status
