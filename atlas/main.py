"""
Atlas — command-line design system generator.

Usage:
  python -m atlas.main generate --theme cyberpunk --seed my-project
  python -m atlas.main gen -t minimal -s acme -f css json tailwind html
  python -m atlas.main gen --custom-theme brand/theme.json
  python -m atlas.main gen -i                 # interactive
  python -m atlas.main themes
  python -m atlas.main recommend -k "fintech dashboard"
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.rule import Rule
from rich.table import Table

from . import __version__
from .config import Settings, load_settings
from .design_system import build_design_system
from .errors import AtlasError
from .themes import list_themes, recommend_themes
from .writers import FORMATS, write_output_files

console = Console()

logger = logging.getLogger(__name__)

RECOMMENDATION_LIMIT = 5
INTERACTIVE_CHOICES = 6


# ── CLI ───────────────────────────────────────────────────────────────────────

def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atlas",
        description="Atlas — deterministic design-token generator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: ATLAS_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    gen = sub.add_parser(
        "generate",
        aliases=["gen", "g"],
        help="Generate a complete design system",
    )
    gen.add_argument("-t", "--theme", default=None, help=f"Theme key (default: {settings.theme})")
    gen.add_argument("-s", "--seed", default=None, help=f"Seed for deterministic output (default: {settings.seed})")
    gen.add_argument("-o", "--output", default=None, help=f"Output directory (default: {settings.output_dir})")
    gen.add_argument(
        "-f", "--format",
        nargs="+",
        default=None,
        metavar="FORMAT",
        help=f"Output formats: {', '.join(FORMATS)} (default: {' '.join(settings.formats)})",
    )
    gen.add_argument("--custom-theme", default=None, metavar="FILE", help="Load the theme from a JSON file")
    gen.add_argument("--no-components", action="store_true", help="Skip component tokens")
    gen.add_argument("-i", "--interactive", action="store_true", help="Pick theme and seed interactively")

    sub.add_parser("themes", help="List available themes")

    rec = sub.add_parser("recommend", help="Recommend themes for a project description")
    rec.add_argument("-k", "--keywords", default=None, help="Words describing your project")

    return parser


# ── Commands ──────────────────────────────────────────────────────────────────

def show_quick_help() -> None:
    console.print(Rule("[bold cyan]Atlas[/bold cyan]"))
    console.print("  Design system generator for hackathons\n")
    console.print("  [dim]Quick commands:[/dim]")
    console.print("    atlas generate -i             [dim]# interactive mode[/dim]")
    console.print("    atlas gen --theme cyberpunk   [dim]# generate with a specific theme[/dim]")
    console.print("    atlas themes                  [dim]# list all available themes[/dim]")
    console.print("    atlas recommend               [dim]# get theme recommendations[/dim]\n")
    console.print("  Run [cyan]atlas --help[/cyan] for detailed options\n")


def cmd_themes() -> int:
    table = Table(title="Available Themes", show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Mood", style="dim")
    table.add_column("Best for", style="dim")
    for key, theme in list_themes():
        table.add_row(key, theme.name, theme.description, theme.mood, theme.use_case)
    console.print(table)
    return 0


def cmd_recommend(keywords: Optional[str]) -> int:
    if not keywords:
        keywords = Prompt.ask(
            "Describe your project (e.g. 'fintech productivity app')",
            default="web app",
        )

    console.print(Rule("[bold]Top Recommendations[/bold]"))
    for i, rec in enumerate(recommend_themes(keywords)[:RECOMMENDATION_LIMIT], start=1):
        score = f" [dim](score: {rec.score})[/dim]" if rec.score > 0 else ""
        console.print(f"  [bold cyan]{i}[/bold cyan] [bold]{rec.theme.name}[/bold]{score}")
        console.print(f"     [dim]{rec.theme.description}[/dim]")
        console.print(f"     Use: [cyan]atlas gen --theme {rec.key}[/cyan]\n")
    return 0


def interactive_choices(default_seed: str) -> tuple:
    """Ask for project name, description, theme and seed. Returns (theme_key, seed)."""
    console.print("  [dim]Let's create your design system![/dim]\n")
    project = Prompt.ask("What's your project name?", default="my-app")
    keywords = Prompt.ask("Describe your project (e.g. 'fintech app', 'gaming platform')", default="")

    recommendations = recommend_themes(keywords)[:INTERACTIVE_CHOICES]
    for i, rec in enumerate(recommendations, start=1):
        console.print(f"  [bold cyan]{i}[/bold cyan] {rec.theme.name} [dim]— {rec.theme.description}[/dim]")

    pick = Prompt.ask(
        "Choose a design theme",
        choices=[str(i) for i in range(1, len(recommendations) + 1)],
        default="1",
    )
    theme_key = recommendations[int(pick) - 1].key
    seed = Prompt.ask("Project seed (use the project name for stable colors)", default=project or default_seed)
    return theme_key, seed


def cmd_generate(args: argparse.Namespace, settings: Settings) -> int:
    theme_name = args.theme
    seed = args.seed

    if args.interactive and not args.custom_theme:
        theme_name, seed = interactive_choices(seed or settings.seed)

    theme_name = theme_name or settings.theme
    seed = seed if seed is not None else settings.seed
    output_dir = Path(args.output) if args.output else settings.output_dir
    formats: List[str] = args.format or settings.formats
    include_components = not args.no_components

    console.print(Rule("[bold magenta]Atlas[/bold magenta]"))
    console.print(
        f"  Theme: [bold]{args.custom_theme or theme_name}[/bold]  |  "
        f"Seed: [bold]{seed}[/bold]  |  "
        f"Output: [bold]{output_dir}[/bold]"
    )

    t0 = time.time()
    ds = build_design_system(
        theme_name,
        seed,
        custom_theme_path=args.custom_theme,
        include_components=include_components,
    )
    files = write_output_files(ds, output_dir, formats, include_components=include_components)

    file_list = "\n".join(f"  - {p}" for p in files)
    console.print(
        Panel(
            f"Theme: [bold]{ds.theme}[/bold]  |  Seed: [bold]{ds.seed}[/bold]\n"
            f"{len(files)} file(s) in [bold]{output_dir}[/bold] — {time.time() - t0:.2f}s\n\n"
            f"{file_list}\n\n"
            "[dim]Re-run with the same seed to reproduce these tokens exactly.[/dim]",
            title="[bold green]✓ Design system generated[/bold green]",
            border_style="green",
        )
    )
    return 0


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
    )

    try:
        if args.command in ("generate", "gen", "g"):
            return cmd_generate(args, settings)
        if args.command == "themes":
            return cmd_themes()
        if args.command == "recommend":
            return cmd_recommend(args.keywords)
    except AtlasError as exc:
        console.print(f"[bold red]✗ Error:[/bold red] {exc}")
        logger.debug("Generation failed", exc_info=True)
        return 1

    show_quick_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
