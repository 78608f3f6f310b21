"""CLI to search topics or list a question bank from the bundled roadmaps."""
import argparse
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from curriculum.config import get_settings
from curriculum.tools.content_io import load_catalog
from curriculum.tools.normalize import describe_validation_error
from curriculum.tools.query import count_questions, list_by_type, search
from curriculum.tools.registry import LoadError


console = Console()


def main(argv=None) -> int:
    load_dotenv()
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]✗ Invalid configuration:[/red] {describe_validation_error(e)}")
        return 2

    parser = argparse.ArgumentParser(
        description="Search curriculum topics or list interview questions by type"
    )
    parser.add_argument(
        "term",
        nargs="?",
        default="",
        help="Text to look for in topic titles and explanations"
    )
    parser.add_argument(
        "--roadmap",
        type=str,
        help="Only search this roadmap slug"
    )
    parser.add_argument(
        "--type",
        dest="question_type",
        type=str,
        help="List interview questions of this type instead of searching"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else getattr(logging, settings.log_level, logging.WARNING),
        format="%(levelname)s - %(message)s",
    )

    if not args.term and not args.question_type:
        parser.error("give a search term or --type")

    try:
        catalog = load_catalog()
    except LoadError as e:
        # Never show a partially valid curriculum
        console.print(f"[red]Content temporarily unavailable:[/red] {e}")
        return 1

    roadmaps = [
        r for r in catalog.roadmaps()
        if catalog.registry(r.slug) is not None and (not args.roadmap or r.slug == args.roadmap)
    ]
    if args.roadmap and not roadmaps:
        console.print(f"[red]✗ No published roadmap named {args.roadmap}[/red]")
        return 2

    if args.question_type:
        table = Table(title=f"Interview questions: {args.question_type}")
        table.add_column("Roadmap", style="cyan")
        table.add_column("Phase")
        table.add_column("Topic", style="yellow")
        table.add_column("Question")
        found = 0
        for roadmap in roadmaps:
            registry = catalog.registry(roadmap.slug)
            for ref in list_by_type(registry, args.question_type):
                table.add_row(roadmap.slug, ref.phase.title, ref.topic.title, ref.question.q)
                found += 1
        if not found:
            counts: dict[str, int] = {}
            for roadmap in roadmaps:
                for qtype, n in count_questions(catalog.registry(roadmap.slug)).items():
                    counts[qtype] = counts.get(qtype, 0) + n
            available = ", ".join(f"{t} ({n})" for t, n in sorted(counts.items()))
            console.print(f"No {args.question_type!r} questions. Available: {available}")
            return 0
        console.print(table)
        return 0

    table = Table(title=f"Topics matching {args.term!r}")
    table.add_column("Roadmap", style="cyan")
    table.add_column("Topic id", style="yellow")
    table.add_column("Title")
    found = 0
    for roadmap in roadmaps:
        for topic in search(catalog.registry(roadmap.slug), args.term):
            table.add_row(roadmap.slug, topic.id, topic.title)
            found += 1

    if not found:
        console.print(f"No topics match {args.term!r}")
        return 0
    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
