# ABOUTME: Rich table helpers for the CLI's status displays
# ABOUTME: Key-value tables for cache slot and logging configuration

from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two-column Field/Value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, width=None, no_wrap=False)
    table.add_column("Value", style=value_style, width=None, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_cache_status_table(status: dict[str, Any]) -> Table:
    """Create a table describing the cached member count.

    Args:
        status: Cache status dictionary from MeetupMembersService.get_cache_status

    Returns:
        Styled cache status table
    """
    if not status["cached"]:
        cache_data = {
            "📁 Cache File": status["cache_file"],
            "📦 Cached": "❌ No",
        }
    else:
        cache_data = {
            "📁 Cache File": status["cache_file"],
            "📦 Cached": "✅ Yes",
            "👥 Members": f"{status['count']:,}",
            "🕒 Observed At": status["observed_at"],
            "⏳ Age": f"{status['age_seconds']}s",
            "🌱 Fresh": "✅ Yes" if status["fresh"] else "❌ No (next call refetches)",
        }

    return create_key_value_table(title="💾 Member Count Cache", data=cache_data)


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "🎚️ Level": status["level"],
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    # Add log files if they exist
    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing and style.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()  # Add spacing before
    console.print(table)
    console.print()  # Add spacing after
