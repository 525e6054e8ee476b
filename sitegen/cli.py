"""Command-line interface for SiteGen.

Usage::

    python -m sitegen presets [--tier L2] [--mode quickstart]
    python -m sitegen run pizza-L1 saas-L2 [--deploy] [--cleanup] [--backend-url URL]
    python -m sitegen layouts [--industry pizza] [--css warm-inviting]
    python -m sitegen render fixture.json [--layout ID] [--format html|json] [-o DIR]
"""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from sitegen.backends import Collaborators, HttpGenerationBackend
from sitegen.config import Config
from sitegen.errors import PresetValidationError, TemplateNotFoundError
from sitegen.layouts import (
    get_available_industry_layouts,
    get_available_layouts,
    layout_css_block,
    normalize_industry,
)
from sitegen.models import BusinessFixture
from sitegen.presets import get_all_presets, get_presets_by_mode, get_presets_by_tier
from sitegen.render import HtmlRenderer, JsonRenderer, write_site
from sitegen.router import GenerationRouter
from sitegen.templates import SiteOptions, generate_site
from sitegen.tracker import RunStore, RunTracker
from sitegen.utils import console, print_error, print_success, print_summary_table, print_warning


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_presets(args: argparse.Namespace) -> int:
    if args.tier:
        presets = get_presets_by_tier(args.tier)
    elif args.mode:
        presets = get_presets_by_mode(args.mode)
    else:
        presets = get_all_presets()

    table = Table(title="Generation Presets", show_header=True, header_style="bold cyan")
    table.add_column("ID", no_wrap=True)
    table.add_column("Mode")
    table.add_column("Tier")
    table.add_column("Industry")
    table.add_column("Description", style="dim")
    for preset in presets:
        table.add_row(
            escape(preset.id),
            preset.mode,
            preset.tier or "-",
            preset.industry or "-",
            escape(preset.description),
        )
    console.print(table)
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    config = Config.from_env()
    if args.backend_url:
        config.backend.url = args.backend_url

    backend = HttpGenerationBackend.from_config(config.backend)
    router = GenerationRouter(
        Collaborators.http(backend),
        backend=backend,
        timeout=config.backend.timeout,
        test_mode=config.test_mode,
    )
    store = RunStore()
    tracker = RunTracker(router, store, config=config)

    if args.deploy:
        print_warning("No deploy service configured; --deploy will be skipped.")
    if args.cleanup:
        print_warning("No cleanup service configured; --cleanup will be skipped.")

    try:
        runs = asyncio.run(tracker.run_batch(args.presets, deploy=args.deploy, cleanup=args.cleanup))
    except PresetValidationError as exc:
        print_error(escape(str(exc)))
        return 2

    summary = store.summary()
    print_summary_table(
        {
            "Total": str(summary.total),
            "Passed": str(summary.passed),
            "Failed": str(summary.failed),
            "Pass rate": summary.pass_rate,
            "Total duration": summary.total_duration,
            "Average duration": summary.average_duration,
            "Total cost": summary.total_cost,
        },
        title="Test Summary",
    )
    return 0 if all(run.success for run in runs) else 1


def cmd_layouts(args: argparse.Namespace) -> int:
    if args.css:
        console.print(layout_css_block(args.css), markup=False, highlight=False)
        return 0

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Hero")
    table.add_column("Cards")
    table.add_column("Spacing")

    if args.industry:
        industry = normalize_industry(args.industry)
        table.title = f"Layouts for {industry}"
        table.add_column("Default")
        for layout, is_default in get_available_industry_layouts(industry):
            table.add_row(
                layout.id,
                layout.name,
                layout.style.hero_style,
                layout.style.card_style,
                layout.style.spacing,
                "yes" if is_default else "",
            )
    else:
        table.title = "Layouts"
        for layout in get_available_layouts():
            table.add_row(
                layout.id,
                layout.name,
                layout.style.hero_style,
                layout.style.card_style,
                layout.style.spacing,
            )
    console.print(table)
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    fixture_path = Path(args.fixture)
    if not fixture_path.exists():
        print_error(f"Fixture file not found: {escape(str(fixture_path))}")
        return 1

    try:
        fixture = BusinessFixture.model_validate(json.loads(fixture_path.read_text(encoding="utf-8")))
    except ValueError as exc:
        print_error(f"Invalid fixture {escape(str(fixture_path))}: {escape(str(exc))}")
        return 1

    try:
        site = generate_site(fixture, SiteOptions(layout=args.layout))
    except TemplateNotFoundError as exc:
        print_error(escape(str(exc)))
        return 1

    output = args.output or Config.from_env().output_dir
    renderer = JsonRenderer() if args.format == "json" else HtmlRenderer()
    written = asyncio.run(write_site(site, output, renderer))
    layout_id = site.layout.id if site.layout is not None else "-"
    print_success(
        f"Rendered {len(site.pages)} pages ({layout_id}) to {escape(str(output))}: {len(written)} files"
    )
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitegen",
        description="SiteGen -- website generation orchestration engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m sitegen presets --tier L2\n"
            "  python -m sitegen run pizza-L1 orchestrate-saas --cleanup\n"
            "  python -m sitegen render fixture.json --layout warm-inviting -o ./site\n"
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_presets = sub.add_parser("presets", help="List generation presets")
    p_presets.add_argument("--tier", default=None, help="Only presets of this tier (L1-L4)")
    p_presets.add_argument("--mode", default=None, help="Only presets of this mode")
    p_presets.set_defaults(func=cmd_presets)

    p_run = sub.add_parser("run", help="Run presets through the generation backend")
    p_run.add_argument("presets", nargs="+", help="Preset ids to run")
    p_run.add_argument("--deploy", action="store_true", help="Deploy successful runs")
    p_run.add_argument("--cleanup", action="store_true", help="Delete generated projects afterwards")
    p_run.add_argument("--backend-url", default=None, help="Override SITEGEN_BACKEND_URL")
    p_run.set_defaults(func=cmd_run)

    p_layouts = sub.add_parser("layouts", help="List layouts")
    p_layouts.add_argument("--industry", default=None, help="Show the variants for one industry")
    p_layouts.add_argument("--css", default=None, metavar="LAYOUT_ID", help="Print a layout's CSS variables")
    p_layouts.set_defaults(func=cmd_layouts)

    p_render = sub.add_parser("render", help="Generate a site from a JSON business fixture")
    p_render.add_argument("fixture", help="Path to the fixture JSON file")
    p_render.add_argument("--layout", default=None, help="Layout id (default: recommended for the industry)")
    p_render.add_argument("--format", choices=("html", "json"), default="html")
    p_render.add_argument(
        "--output", "-o", default=None, help="Output directory (default: SITEGEN_OUTPUT_DIR or ./generated)"
    )
    p_render.set_defaults(func=cmd_render)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)
