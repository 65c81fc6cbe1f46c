"""Tests for build orchestrator."""

from unittest.mock import AsyncMock, Mock, call

import pytest

from jenkins_builder.errors import SUCCESS, TRANSPORT_FAILURE
from jenkins_builder.models.result import TriggerResult
from jenkins_builder.orchestrator import BuildOrchestrator, exit_code_for
from jenkins_builder.testing.factories import TriggerResultFactory


def make_client(statuses: dict[str, int]) -> Mock:
    """Create a mock client returning the given status per project."""

    async def trigger_build(project: str) -> TriggerResult:
        return TriggerResultFactory.build(
            project=project, status=statuses.get(project, 0)
        )

    client = Mock()
    client.trigger_build = AsyncMock(side_effect=trigger_build)
    return client


class TestTriggerBuilds:
    """Tests for trigger_builds method."""

    async def test_triggers_all_projects_in_order(self) -> None:
        """Triggers every project in the given order when all succeed."""
        client = make_client({})
        orchestrator = BuildOrchestrator(client=client)

        results = await orchestrator.trigger_builds(["c", "a", "b"])

        assert [r.project for r in results] == ["c", "a", "b"]
        assert client.trigger_build.await_args_list == [call("c"), call("a"), call("b")]
        assert all(r.succeeded for r in results)

    async def test_stops_at_first_failure(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Does not trigger projects after the first failure."""
        client = make_client({"p2": 500})
        orchestrator = BuildOrchestrator(client=client)

        with caplog.at_level("INFO"):
            results = await orchestrator.trigger_builds(["p1", "p2", "p3", "p4"])

        assert [r.project for r in results] == ["p1", "p2"]
        assert results[-1].status == 500
        assert client.trigger_build.await_count == 2
        assert "2 project(s) skipped" in caplog.text

    async def test_stops_on_first_project_failure(self) -> None:
        """A failing first project prevents every other trigger."""
        client = make_client({"p1": TRANSPORT_FAILURE})
        orchestrator = BuildOrchestrator(client=client)

        results = await orchestrator.trigger_builds(["p1", "p2"])

        assert len(results) == 1
        client.trigger_build.assert_awaited_once_with("p1")

    async def test_no_projects(self) -> None:
        """Returns no results for an empty project list."""
        client = make_client({})
        orchestrator = BuildOrchestrator(client=client)

        assert await orchestrator.trigger_builds([]) == []
        client.trigger_build.assert_not_awaited()


class TestExitCodeFor:
    """Tests for exit_code_for function."""

    def test_success_when_empty(self) -> None:
        """No attempted triggers is a success."""
        assert exit_code_for([]) == SUCCESS

    def test_success_when_all_succeeded(self) -> None:
        """All successful triggers give exit code 0."""
        results = TriggerResultFactory.batch(3)

        assert exit_code_for(results) == SUCCESS

    def test_last_result_status(self) -> None:
        """The last attempted trigger decides the exit code."""
        results = [
            TriggerResultFactory.build(),
            TriggerResultFactory.build(status=404),
        ]

        assert exit_code_for(results) == 404
