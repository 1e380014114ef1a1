"""Init CLI command."""

from pathlib import Path

import click
import yaml
from rich.console import Console

from cli.config import get_paths, load_config

console = Console()

MINIMAL_CONFIG = {
    "paths": {
        "data_dir": "~/moodlog/data",
        "users_file": "~/moodlog/data/users.txt",
        "log_file": "~/moodlog/moodlog.log",
    },
    "report": {"max_blocks": 35, "save": True},
    "auth": {"max_login_attempts": 3},
    "logging": {"level": "WARNING"},
}


@click.command()
@click.option(
    "--config-path",
    type=click.Path(path_type=Path),
    default=Path.home() / "moodlog" / "config.yaml",
    show_default=True,
    help="Where to write the default config",
)
def init(config_path: Path):
    """Initialize moodlog directories and config."""
    config = load_config()
    paths = get_paths(config)

    paths["data_dir"].mkdir(parents=True, exist_ok=True)
    console.print(f"[green]✓[/] data_dir: {paths['data_dir']}")
    for name in ("users_file", "log_file"):
        paths[name].parent.mkdir(parents=True, exist_ok=True)
        console.print(f"[green]✓[/] {name}: {paths[name]}")

    config_path = Path(config_path).expanduser()
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            yaml.dump(MINIMAL_CONFIG, f, default_flow_style=False)
        console.print(f"[green]✓[/] Created config: {config_path}")

    console.print("\n[bold]Next steps:[/]")
    console.print("  1. Run [cyan]moodlog register[/] to create an account")
    console.print("  2. Run [cyan]moodlog add -u <name>[/] to write your first entry")
    console.print("  3. Run [cyan]moodlog report -u <name>[/] to see your mood statistics")
