"""CLI interface for jitic."""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from jitic.config import get_settings
from jitic.core.errors import ConfigurationError, JiticError
from jitic.core.messages import ErrorMessages
from jitic.core.models import Policy, RunResult
from jitic.services.jira_service import JiraService
from jitic.validation.orchestrator import ValidationOrchestrator
from jitic.validation.registry import fixed_projects, load_projects

logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="jitic",
    help="jitic - JIRA Ticket in Commit. Checks that issue keys in a message exist.",
    no_args_is_help=True,
)
console = Console(stderr=True)

EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(verbose: bool, level: str = "WARNING") -> None:
    """Configure logging once per process."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_time=verbose)],
        force=True,
    )
    # Request level chatter from the HTTP stack is only useful when debugging
    if not verbose:
        logging.getLogger("atlassian").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def report(result: RunResult) -> None:
    """Print the outcome of a failed run."""
    if result.success or result.error is None:
        return
    console.print(f"[red]Error:[/red] {escape(result.error.message)}", style="bold red")
    if result.text:
        console.print(f"[dim]Message: {escape(result.text)}[/dim]")


@app.command()
def check(
    tickets: Optional[str] = typer.Option(
        None, "--tickets", "-t", help="Message to retrieve the tickets from."
    ),
    stdin: bool = typer.Option(
        False,
        "--stdin",
        help='Stream the message via stdin instead of "--tickets". '
        'If set "--tickets" will be ignored.',
    ),
    url: Optional[str] = typer.Option(
        None,
        "--url",
        help="JIRA instance URL (format: scheme://[username[:password]@]host[:port]/).",
    ),
    username: Optional[str] = typer.Option(None, "--user", help="JIRA Username."),
    password: Optional[str] = typer.Option(None, "--pass", help="JIRA Password."),
    require_one: bool = typer.Option(
        False,
        "--require-one",
        "--infix",
        help="Succeed if at least one ticket exists instead of all of them.",
    ),
    projects: Optional[list[str]] = typer.Option(
        None,
        "--project",
        "-p",
        help="Project key to accept (repeatable). Skips fetching projects from JIRA.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Write more information about the run."
    ),
) -> None:
    """Check that all JIRA tickets referenced in a message exist.

    Example:
        git log -1 --pretty=%s | jitic check --url https://jira.example.com --stdin
    """
    settings = get_settings()
    setup_logging(verbose, settings.log_level)

    policy = (
        Policy.ONE_MUST_PASS
        if require_one or settings.require_one
        else Policy.ALL_MUST_PASS
    )

    try:
        if not stdin and not tickets:
            raise ConfigurationError(ErrorMessages.MISSING_INPUT)
        if not (url or settings.jira_url):
            raise ConfigurationError(ErrorMessages.MISSING_URL)

        tracker = JiraService(settings, url=url, username=username, password=password)
        project_keys = projects or settings.projects
        prefixes = (
            fixed_projects(project_keys) if project_keys else load_projects(tracker)
        )

        orchestrator = ValidationOrchestrator(prefixes, tracker, policy=policy, log=logger)
        if stdin:
            result = orchestrator.run_stream(sys.stdin)
        else:
            result = orchestrator.run(tickets or "")
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}", style="bold red")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    except JiticError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}", style="bold red")
        raise typer.Exit(code=EXIT_FAILURE)

    if not result.success:
        report(result)
        raise typer.Exit(code=EXIT_FAILURE)

    logger.info("All checks passed")


@app.command()
def version() -> None:
    """Show jitic version."""
    from jitic import __version__

    typer.echo(f"jitic v{__version__}")


if __name__ == "__main__":
    app()
