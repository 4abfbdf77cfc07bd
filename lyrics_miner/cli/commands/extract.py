"""CLI command for extracting vocabulary from lyrics."""

import sys
from pathlib import Path

from lyrics_miner.config import create_default_config
from lyrics_miner.exceptions import LyricsMinerException
from lyrics_miner.orchestration import LyricsProcessor
from lyrics_miner.presenters import ConsolePresenter, ConsoleProgressCallback
from lyrics_miner.services import ExportService, FugashiTokenizerService, TokenFilterService


def extract_command(args) -> int:
    """Execute the extract subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    # Create config
    overrides = {}
    if args.export_dir:
        overrides["export_directory"] = args.export_dir
    config = create_default_config(
        legacy_collation=args.legacy_collation,
        tagger_args=args.tagger_args,
        lyrics_encoding=args.encoding,
        **overrides,
    )

    # Create presenter and progress callback
    presenter = ConsolePresenter(preview_limit=None if args.all else config.preview_limit)
    progress = ConsoleProgressCallback()

    lyric_files = [Path(f) for f in args.files]
    if not lyric_files and args.text is None and not args.stdin:
        presenter.show_error("No lyrics given. Pass files, --text or --stdin.")
        return 1

    try:
        tokenizer = FugashiTokenizerService(config)
    except LyricsMinerException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    processor = LyricsProcessor(
        config=config,
        tokenizer=tokenizer,
        token_filter=TokenFilterService(config),
        presenter=presenter,
    )

    try:
        if args.text is not None:
            presenter.show_extraction_result(processor.process_text(args.text))

        if args.stdin:
            presenter.show_extraction_result(
                processor.process_text(sys.stdin.read(), source="standard input")
            )

        if lyric_files:
            results = processor.process_files(lyric_files, progress_callback=progress)
            for result in results:
                presenter.show_extraction_result(result)
            if not results and args.text is None and not args.stdin:
                presenter.show_error("None of the lyrics files could be read")
                return 1

        entries = processor.entries()
        presenter.show_vocabulary(entries, show_readings=args.table)

        if args.export:
            # Absolute paths replace the export directory when joined
            output_path = config.export_directory / args.export
            written = ExportService(config).export(entries, output_path, fmt=args.format)
            presenter.show_success(f"Exported {written} words to {output_path}")

        return 0

    except LyricsMinerException as e:
        presenter.show_error(f"Error: {e}")
        return 1
