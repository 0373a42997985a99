import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from structextract.config.exceptions import ConfigurationError
from structextract.config.settings import Settings
from structextract.encoding.encoder import FileEncoder, is_supported_media_type
from structextract.encoding.models import SourceFile
from structextract.export.markdown import to_markdown_table
from structextract.extraction.factory import ExtractorFactory
from structextract.logging.logger import Log
from structextract.orchestrator.orchestrator import BatchOrchestrator
from structextract.presentation.console import StatusPrinter, render_results

EXIT_OK = 0
EXIT_ALL_FAILED = 1
EXIT_CONFIGURATION = 2


def collect_sources(paths: Sequence[Path]) -> list[SourceFile]:
    """Expand directories (non-recursively) and keep PDFs and images only."""
    sources: list[SourceFile] = []
    for path in paths:
        if path.is_dir():
            candidates = sorted(p for p in path.iterdir() if p.is_file())
        elif path.exists():
            candidates = [path]
        else:
            Log.warning(f"Skipping {path}: no such file or directory")
            continue
        for candidate in candidates:
            source = SourceFile.from_path(candidate)
            if not is_supported_media_type(source.media_type):
                Log.warning(f"Skipping {candidate}: unsupported type {source.media_type}")
                continue
            sources.append(source)
    return sources


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structextract",
        description="Extract column reinforcement schedules from structural drawings",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="PDF/image files or directories")
    parser.add_argument(
        "--markdown",
        type=Path,
        default=None,
        help="Write the consolidated table as Markdown to this file",
    )
    parser.add_argument(
        "--provider",
        default=None,
        help="Override EXTRACTION_PROVIDER (e.g. openai, gemini, example)",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: configure -> collect files -> process batch -> report."""
    args = build_parser().parse_args(argv)
    overrides = {"extraction_provider": args.provider} if args.provider else {}
    settings = Settings(**overrides)
    Log.configure(args.log_level or settings.log_level)

    try:
        extractor = ExtractorFactory.create(settings)
    except ConfigurationError as exc:
        Log.error(f"Configuration error: {exc}")
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION

    sources = collect_sources(args.paths)
    if not sources:
        print("No PDF or image files to process.", file=sys.stderr)
        return EXIT_ALL_FAILED

    orchestrator = BatchOrchestrator(
        FileEncoder(),
        extractor,
        max_concurrency=settings.max_concurrent_extractions,
    )
    printer = StatusPrinter()
    orchestrator.subscribe(printer)

    records = asyncio.run(orchestrator.run(sources))
    summary = orchestrator.summary()
    printer.print_summary(summary)

    if records:
        print()
        print(render_results(records))
        if args.markdown is not None:
            args.markdown.write_text(to_markdown_table(records) + "\n", encoding="utf-8")
            Log.info(f"Wrote Markdown table to {args.markdown}")

    return EXIT_ALL_FAILED if summary.succeeded == 0 else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
