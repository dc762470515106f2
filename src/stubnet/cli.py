"""stubnet CLI - inspect and exercise the interceptors."""

import re
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from stubnet.config import (
    create_project_config_template,
    find_project_dir,
    load_settings,
)
from stubnet.constants import RESERVED_PATTERN, RESERVED_REPLACEMENT
from stubnet.installer import installed_components
from stubnet.network import normalize_target
from stubnet.substitution import substitute as reserved_substitute
from stubnet.utils.debug import debug_print, set_debug_enabled

app = typer.Typer(
    name="stubnet",
    help="Loopback normalization and reserved substitution for test runs",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    debug: bool = typer.Option(False, "--debug", help="Print debug details."),
) -> None:
    set_debug_enabled(debug)


@app.command()
def version() -> None:
    """Show the installed stubnet version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as pkg_version

    try:
        current_version = pkg_version("stubnet")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"stubnet {current_version}")


@app.command()
def init() -> None:
    """Create a .stubnet/.env template in the current directory."""
    env_path = create_project_config_template(Path.cwd())
    console.print(f"[green]Project config:[/green] {env_path}")


@app.command()
def status() -> None:
    """Show effective settings and which interceptors are active."""
    project_dir = find_project_dir()
    settings = load_settings(project_dir)
    active = installed_components()

    table = Table(title="stubnet")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in settings.as_dict().items():
        table.add_row(key, "[green]on[/green]" if value else "[dim]off[/dim]")
    console.print(table)

    console.print(f"Project: {project_dir or '[dim]none[/dim]'}")
    for name, on in active.items():
        state = "[green]installed[/green]" if on else "[dim]not installed[/dim]"
        console.print(f"  {name}: {state}")


@app.command()
def normalize(target: str = typer.Argument(..., help="URL or host[:port] to normalize")) -> None:
    """Print TARGET with the loopback alias rewritten."""
    if "//" in target:
        result = normalize_target(target)
    else:
        result = normalize_target({"host": target})["host"]
    debug_print("network", "normalize", Input=target, Output=result)
    console.print(result, markup=False, highlight=False)


@app.command()
def substitute(
    text: str = typer.Argument(..., help="Text to run the reserved substitution on"),
    ignore_case: bool = typer.Option(
        True,
        "--ignore-case/--case-sensitive",
        help="Match case-insensitively and preserve each match's casing.",
    ),
    count: int = typer.Option(0, "--count", min=0, help="Maximum replacements (0 = all)."),
) -> None:
    """Apply the reserved Yale -> Fale substitution to TEXT."""
    flags = re.IGNORECASE if ignore_case else 0
    result = reserved_substitute(RESERVED_PATTERN, RESERVED_REPLACEMENT, text, count=count, flags=flags)
    debug_print("substitution", "substitute", Input=text, Output=result, Flags=flags, Count=count)
    console.print(result, markup=False, highlight=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
