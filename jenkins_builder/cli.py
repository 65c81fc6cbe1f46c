"""CLI entry point for triggering Jenkins builds."""

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from jenkins_builder.client import JenkinsClient
from jenkins_builder.credentials_loader import load_credentials
from jenkins_builder.errors import JenkinsBuilderError, exit_status
from jenkins_builder.models.arguments import Arguments
from jenkins_builder.models.result import TriggerResult
from jenkins_builder.orchestrator import BuildOrchestrator, exit_code_for
from jenkins_builder.projects import PROJECTS_ENV_VAR, load_projects

PROG = "jenkins-builder"
VERSION = "0.1.0"

STATUS_SYMBOLS = {
    True: "✅",
    False: "❌",
}


def log_results_summary(
    log: logging.Logger, trigger_results: Sequence[TriggerResult]
) -> None:
    """Log a summary line for every attempted build trigger."""
    log.info("Build Trigger Summary:")
    for result in trigger_results:
        symbol = STATUS_SYMBOLS[result.succeeded]
        log.info("%s %s: %d", symbol, result.project, result.status)
        if result.message:
            log.info("  Message: %s", result.message)


async def run(arguments: Arguments, projects_env: str | None) -> int:
    """Trigger builds for every project and return the exit code."""
    log = logging.getLogger("jenkins_builder")

    try:
        projects = load_projects(projects_env)
        credentials = await load_credentials(arguments.credential_file)
    except JenkinsBuilderError as e:
        log.error("%s", e)
        return e.exit_code

    log.info(
        "Triggering %d project(s) on %s as %s",
        len(projects),
        arguments.jenkins_host,
        credentials.user,
    )

    async with JenkinsClient.from_credentials(
        arguments.jenkins_host, credentials
    ) as client:
        orchestrator = BuildOrchestrator(client=client)
        trigger_results = await orchestrator.trigger_builds(projects)

    log_results_summary(log, trigger_results)

    return exit_code_for(trigger_results)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; ``-h`` is the host, so help is ``--help`` only."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Trigger Jenkins builds for the projects listed in $PROJECTS",
        epilog="Report bugs to <ethan.twardy@gmail.com>.",
        add_help=False,
    )
    parser.add_argument(
        "-c",
        "--credential-file",
        metavar="FILE",
        help="Read user credentials from this JSON file",
    )
    parser.add_argument(
        "-h",
        "--jenkins-host",
        metavar="HOST",
        help="Base URL of Jenkins",
    )
    parser.add_argument(
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="Show this help message and exit",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{PROG} {VERSION}",
    )
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> Arguments:
    """Parse command line flags, exiting with a usage error when one is missing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.credential_file:
        parser.error("A credentials file is required")
    if not args.jenkins_host:
        parser.error("A Jenkins host URL is required")

    return Arguments(
        credential_file=args.credential_file,
        jenkins_host=args.jenkins_host,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    arguments = parse_arguments(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(run(arguments, os.environ.get(PROJECTS_ENV_VAR)))
    sys.exit(exit_status(exit_code))


if __name__ == "__main__":  # pragma: no cover
    main()
