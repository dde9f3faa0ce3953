"""
ci-term command line interface.

Starts the interactive dashboard, or prints one listing and exits.

Usage:
    ci-term [OPTIONS] [ui]
    ci-term projects [--json]
    ci-term builds PROJECT_ID [--asc] [--json]
    ci-term jobs BUILD_ID [--desc] [--json]
    ci-term log JOB_ID
"""

import json
import logging
import sys

import click

from ci_client.client import HTTPBuildStore
from ci_common.errors import CITermError
from ci_service.contexts import Controller
from ci_service.service import BuildService

from .app import DashboardApp
from .config import get_log_file, get_request_timeout, get_server_url
from .formatting import format_duration, format_time
from .router import Router

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file=None) -> None:
    """
    Configure logging once for the whole process.

    The interactive dashboard owns the terminal, so it logs to a file.
    One-shot commands log to stderr.
    """
    kwargs = {}
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        kwargs["filename"] = str(log_file)
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, **kwargs)


def get_service(ctx: click.Context) -> BuildService:
    """Get the service instance for the configured server."""
    store = HTTPBuildStore(ctx.obj["server_url"], timeout=ctx.obj["timeout"])
    return BuildService(store)


def fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.option("--server-url", help="CI API server URL (default: CI_SERVER_URL env, ~/.ci/config or http://localhost:7745)")
@click.option("--timeout", type=float, help="Seconds to wait for each API request (default: CI_REQUEST_TIMEOUT env or 10)")
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Logging level (default: INFO)",
)
@click.option("--log-file", help="Dashboard log file (default: CI_TERM_LOG_FILE env or ~/.ci/ci-term.log)")
@click.pass_context
def cli(ctx, server_url, timeout, log_level, log_file):
    """ci-term - Browse CI projects, builds, jobs and logs from the terminal."""
    interactive = ctx.invoked_subcommand in (None, "ui")
    configure_logging(log_level, get_log_file(log_file) if interactive else None)

    ctx.ensure_object(dict)
    ctx.obj["server_url"] = get_server_url(server_url)
    ctx.obj["timeout"] = get_request_timeout(timeout)

    if ctx.invoked_subcommand is None:
        ctx.invoke(ui)


@cli.command()
@click.pass_context
def ui(ctx):
    """Start the interactive dashboard."""
    logger.info(f"Starting dashboard against {ctx.obj['server_url']}")
    router = Router(Controller(get_service(ctx)))
    DashboardApp(router).run()
    logger.info("Dashboard stopped")


@cli.command()
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def projects(ctx, json_output: bool):
    """List all projects, sorted by name."""
    try:
        project_list = get_service(ctx).get_projects()
    except CITermError as e:
        fail(e)

    if json_output:
        click.echo(json.dumps([p.to_dict() for p in project_list], indent=2))
        return

    if not project_list:
        click.echo("No projects found.")
        return

    click.echo(f"\n{'ID':<70} {'Name':<30}")
    click.echo("-" * 100)
    for p in project_list:
        click.echo(f"{p.id:<70} {p.name:<30}")
    click.echo()


@cli.command()
@click.argument("project_id")
@click.option("--asc", is_flag=True, help="Oldest builds first")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def builds(ctx, project_id: str, asc: bool, json_output: bool):
    """List the builds of a project, most recent first."""
    service = get_service(ctx)
    try:
        project = service.get_project(project_id)
        build_list = service.get_project_builds(project, desc=not asc)
    except CITermError as e:
        fail(e)

    if json_output:
        click.echo(json.dumps([b.to_dict() for b in build_list], indent=2))
        return

    if not build_list:
        click.echo(f"No builds found for project {project.name}.")
        return

    click.echo(f"\n{'ID':<28} {'Event':<12} {'Status':<10} {'Started':<20}")
    click.echo("-" * 72)
    for b in build_list:
        click.echo(
            f"{b.id:<28} {(b.type or '-'):<12} {b.status:<10} {format_time(b.start_time):<20}"
        )
    click.echo()


@cli.command()
@click.argument("build_id")
@click.option("--desc", is_flag=True, help="Most recent jobs first")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def jobs(ctx, build_id: str, desc: bool, json_output: bool):
    """List the jobs of a build, in execution order."""
    try:
        job_list = get_service(ctx).get_build_jobs(build_id, desc=desc)
    except CITermError as e:
        fail(e)

    if json_output:
        click.echo(json.dumps([j.to_dict() for j in job_list], indent=2))
        return

    if not job_list:
        click.echo(f"No jobs found for build {build_id}.")
        return

    click.echo(f"\n{'ID':<40} {'Name':<20} {'Status':<10} {'Started':<20} {'Duration':<10}")
    click.echo("-" * 104)
    for j in job_list:
        click.echo(
            f"{j.id:<40} {j.name:<20} {j.status:<10} "
            f"{format_time(j.start_time):<20} {format_duration(j.duration):<10}"
        )
    click.echo()


@cli.command()
@click.argument("job_id")
@click.pass_context
def log(ctx, job_id: str):
    """Print the complete log of a job."""
    try:
        data = get_service(ctx).get_job_log(job_id)
    except CITermError as e:
        fail(e)

    click.echo(data.decode("utf-8", errors="replace"), nl=False)


def main():
    """Main entry point for the ci-term CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
