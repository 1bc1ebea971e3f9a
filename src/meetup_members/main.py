# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands to read the member count and inspect cache and logging state

from pathlib import Path

import asyncclick as click
from rich.console import Console

from meetup_members.config import Config, get_config
from meetup_members.core.service import MeetupMembersService
from meetup_members.errors import MeetupMembersError
from meetup_members.utils.logging import LoggingMode, configure_logging, command_context, get_logging_status
from meetup_members.utils.rich_tables import create_cache_status_table, create_logging_status_table, print_rich_table

console = Console()


def _command_config(url: str | None = None, cache_file: Path | None = None) -> Config:
    """Apply per-invocation overrides on top of the environment configuration."""
    overrides = {}
    if url:
        overrides["meetup_url"] = url
    if cache_file:
        overrides["cache_file"] = cache_file
    return get_config().model_copy(update=overrides)


@click.command()
@click.option("--url", help="Meetup group page to read (overrides MEETUP_MEMBERS_MEETUP_URL)")
@click.option("--cache-file", type=click.Path(dir_okay=False, path_type=Path), help="Cache slot to use")
@click.pass_context
async def count(ctx, url: str | None, cache_file: Path | None):
    """
    👥 Print the member count of the meetup group.

    Uses the cached value while it is fresh, otherwise fetches the page.
    """
    json_output = ctx.obj["json_output"]
    config = _command_config(url, cache_file)

    with command_context("count", url=config.meetup_url) as logger:
        async with MeetupMembersService(config=config) as service:
            try:
                if json_output:
                    members = await service.get_count()
                else:
                    with console.status(f"🔎 Reading member count from {config.meetup_url}"):
                        members = await service.get_count()
            except MeetupMembersError as e:
                logger.error("Member count unavailable", error=str(e))
                error = str(e)
                members = None

        if members is not None:
            logger.info("Member count resolved", count=members)

    if members is None:
        if json_output:
            console.print_json(data={"error": error})
        else:
            console.print(f"[red]❌ {error}[/red]")
        raise click.exceptions.Exit(1)

    if json_output:
        console.print_json(data={"count": members})
    else:
        console.print(f"✅ [bold green]{members:,}[/bold green] members")


@click.command(name="cache-status")
@click.option("--cache-file", type=click.Path(dir_okay=False, path_type=Path), help="Cache slot to inspect")
@click.pass_context
async def cache_status(ctx, cache_file: Path | None):
    """
    💾 Show the cached member count and whether it is still fresh.
    """
    async with MeetupMembersService(config=_command_config(cache_file=cache_file)) as service:
        status = await service.get_cache_status()

    if ctx.obj["json_output"]:
        console.print_json(data=status)
        return

    print_rich_table(console, create_cache_status_table(status))


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output JSON instead of rich formatting")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    👥 Meetup Members - cached member counts for meetup group pages

    Reads the member count from a meetup group page and keeps it in a small
    on-disk cache so repeated site builds do not scrape the page every time.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(count)
app.add_command(cache_status)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
