"""CLI to validate a content corpus and fail the build on error findings."""
import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from curriculum.config import get_settings
from curriculum.models.report import ValidationReport
from curriculum.tools.content_io import load_json_dir, read_roadmaps, roadmap_modules
from curriculum.tools.normalize import describe_validation_error
from curriculum.tools.registry import build_registry


console = Console()


def main(argv=None) -> int:
    load_dotenv()
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]✗ Invalid configuration:[/red] {describe_validation_error(e)}")
        return 2

    parser = argparse.ArgumentParser(
        description="Validate curriculum content and report every finding"
    )
    parser.add_argument(
        "--package",
        type=str,
        default=settings.content_package,
        help="Python package holding the content modules and roadmap index"
    )
    parser.add_argument(
        "--json-dir",
        type=Path,
        help="Validate a directory of exported JSON modules as one corpus instead"
    )
    parser.add_argument(
        "--roadmap",
        type=str,
        help="Only validate this roadmap slug (package mode)"
    )
    parser.add_argument(
        "--phase-id-scope",
        choices=["global", "domain"],
        default=settings.phase_id_scope,
        help="Whether phase ids must be unique across the corpus or per roadmap"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as failures too"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    # Configure logging
    if args.debug:
        log_level = logging.DEBUG
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif args.verbose:
        log_level = logging.INFO
        log_format = "%(asctime)s - %(levelname)s - %(message)s"
    else:
        log_level = getattr(logging, settings.log_level, logging.WARNING)
        log_format = "%(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging level set to: {logging.getLevelName(log_level)}")

    reports: dict[str, ValidationReport] = {}

    if args.json_dir:
        try:
            modules = load_json_dir(args.json_dir)
        except (FileNotFoundError, ValueError) as e:
            console.print(f"[red]✗ {e}[/red]")
            return 2
        registry = build_registry(
            modules,
            phase_id_scope=args.phase_id_scope,
            question_types=settings.question_types,
        )
        reports[str(args.json_dir)] = registry.report
    else:
        roadmaps = read_roadmaps(args.package)
        if args.roadmap:
            roadmaps = [r for r in roadmaps if r.slug == args.roadmap]
            if not roadmaps:
                console.print(f"[red]✗ Unknown roadmap: {args.roadmap}[/red]")
                return 2
        for roadmap in roadmaps:
            if roadmap.coming_soon or not roadmap.modules:
                logger.info(f"Skipping {roadmap.slug}: coming soon")
                continue
            modules, findings = roadmap_modules(roadmap, args.package)
            registry = build_registry(
                modules,
                domain=roadmap.slug,
                phase_id_scope=args.phase_id_scope,
                question_types=settings.question_types,
                findings=findings,
            )
            reports[roadmap.slug] = registry.report

    failed = False
    for corpus, report in reports.items():
        _print_report(corpus, report)
        if report.errors or (args.strict and report.warnings):
            failed = True

    total_errors = sum(len(r.errors) for r in reports.values())
    total_warnings = sum(len(r.warnings) for r in reports.values())
    if failed:
        console.print(
            f"\n[bold red]✗ Content check failed:[/bold red] "
            f"{total_errors} error(s), {total_warnings} warning(s)"
        )
        return 1

    console.print(
        f"\n[bold green]✓ Content OK[/bold green] "
        f"({len(reports)} corpus/corpora, {total_warnings} warning(s))"
    )
    return 0


def _print_report(corpus: str, report: ValidationReport) -> None:
    if not report.findings():
        console.print(f"✓ [green]{corpus}[/green]: no findings")
        return

    table = Table(title=f"Findings: {corpus}")
    table.add_column("Severity", style="bold")
    table.add_column("Code", style="cyan")
    table.add_column("Phase")
    table.add_column("Topic")
    table.add_column("Message")

    for finding in report.findings():
        severity = "[red]error[/red]" if finding.severity == "error" else "[yellow]warning[/yellow]"
        table.add_row(
            severity,
            finding.code,
            finding.phase_id or "-",
            finding.topic_id or "-",
            finding.message,
        )

    console.print(table)


if __name__ == "__main__":
    sys.exit(main())
