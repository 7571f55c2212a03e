"""Command-line interface for rpsprites.

Running ``rpsprites`` with no arguments regenerates every sprite under
./assets from ./assets/sources.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from rpsprites.core.catalog import expected_output_count
from rpsprites.core.compositing import CompositingError, MagickCompositor, RecordingCompositor
from rpsprites.core.config import AppConfig, configure_logging, load_app_config
from rpsprites.core.generator import AssetGenerator, GenerationReport
from rpsprites.core.utils.json import write_json

console = Console()
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Apply command-line flags on top of the loaded config."""
    generation = config.generation.model_copy(
        update={
            "keep_going": config.generation.keep_going or args.keep_going,
            "check_sources": config.generation.check_sources or args.check_sources,
            "prune_stale": config.generation.prune_stale or args.prune_stale,
        }
    )
    update: dict[str, object] = {"generation": generation}
    if args.log_level:
        update["logging"] = config.logging.model_copy(update={"level": args.log_level.upper()})
    return config.model_copy(update=update)


def list_outputs(config: AppConfig) -> int:
    """Print the planned output names without rendering anything."""
    generator = AssetGenerator.from_config(config, RecordingCompositor())
    combinations = generator.plan(config.elements, config.augments)
    for combination in combinations:
        console.print(combination.filename, markup=False, highlight=False, soft_wrap=True)

    expected = expected_output_count(len(config.elements), len(config.augments))
    console.print(f"\n[bold]{len(combinations)}[/bold] outputs (expected {expected})")
    return EXIT_OK


def dry_run(config: AppConfig) -> int:
    """Print every compositing command a real run would execute."""
    magick = MagickCompositor(binary=config.compositor.binary)
    recorder = RecordingCompositor()
    generator = AssetGenerator.from_config(config, recorder)
    generator.prune_stale = False

    report = generator.run(config.elements, config.augments)
    for job in recorder.jobs:
        console.print(magick.format_command(job), markup=False, highlight=False, soft_wrap=True)

    console.print(f"\n[bold]{len(recorder.jobs)}[/bold] commands (dry run, nothing written)")
    if report.skipped:
        console.print(f"[yellow]{len(report.skipped)} outputs would be skipped[/yellow]")
    if config.generation.prune_stale:
        for path in generator.find_stale(report.planned):
            console.print(f"[yellow]would prune[/yellow] {escape(str(path))}")
    return EXIT_OK


def print_report(report: GenerationReport) -> None:
    """Print a run summary."""
    console.print(
        f"[green]✅ Wrote {len(report.written)}/{len(report.planned)} sprites[/green]"
        if report.success
        else f"[red]❌ Wrote {len(report.written)}/{len(report.planned)} sprites[/red]"
    )
    if report.skipped:
        console.print(f"[yellow]Skipped {len(report.skipped)} (missing sources):[/yellow]")
        for name in report.skipped:
            console.print(f"   - {name}", markup=False)
    if report.failed:
        console.print(f"[red]Failed {len(report.failed)}:[/red]")
        for failed in report.failed:
            console.print(f"   - {failed.name}: {failed.error}", markup=False, soft_wrap=True)
    if report.pruned:
        console.print(f"Pruned {len(report.pruned)} stale outputs")


def write_report(report: GenerationReport, path: Path) -> None:
    """Write the run report as JSON."""
    write_json(path, report.to_dict())
    console.print(f"Report written to {path}", highlight=False)


def generate(config: AppConfig, report_path: Path | None = None) -> int:
    """Render every sprite with ImageMagick.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    compositor = MagickCompositor(
        binary=config.compositor.binary,
        timeout_s=config.compositor.timeout_seconds,
    )
    generator = AssetGenerator.from_config(config, compositor)

    try:
        report = generator.run(config.elements, config.augments)
    except CompositingError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        if report_path is not None and e.report is not None:
            write_report(e.report, report_path)
        return EXIT_FAILED

    print_report(report)
    if report_path is not None:
        write_report(report, report_path)
    return EXIT_OK if report.success else EXIT_FAILED


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="rpsprites",
        description="Composite element/augment/aspect sprites with ImageMagick",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to config file (.yaml/.yml/.json; default: rpsprites.yaml if present)",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--dry-run", action="store_true", help="Print commands without running them")
    mode.add_argument("--list", action="store_true", help="List planned output files")
    p.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue past failures and report them at the end",
    )
    p.add_argument(
        "--check-sources",
        action="store_true",
        help="Skip outputs whose source images are missing",
    )
    p.add_argument(
        "--prune-stale",
        action="store_true",
        help="Delete outputs not produced by the current identity sets",
    )
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Override the configured log level",
    )
    p.add_argument("--report", default=None, help="Write a JSON run report to this path")
    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    try:
        config = _apply_overrides(load_app_config(args.config), args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(
            f"[red]ERROR: Invalid configuration: {escape(str(e))}[/red]",
            highlight=False,
            soft_wrap=True,
        )
        return EXIT_CONFIG

    configure_logging(config)

    if args.list:
        return list_outputs(config)
    if args.dry_run:
        return dry_run(config)
    return generate(config, Path(args.report) if args.report else None)


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
