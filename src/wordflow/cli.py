"""
Command line entry point.

    wordflow contexts
    wordflow reflow post.json --context "Night" --output night.json
    wordflow compose post.txt --mood Peaceful --seed 42 --context Paper
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wordflow import __version__
from wordflow.core.models import ContentSource
from wordflow.core.schemas import ValidationError
from wordflow.core.utils import load_content_json, save_content_json, serialize_result
from wordflow.layout import ReflowResult, available_contexts, get_layout, process
from wordflow.templates import Mood, generate_styled_layout
from wordflow.utils import save_previews

logger = logging.getLogger("wordflow")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def _read_content(path: Path, strict: bool) -> ContentSource:
    """JSON payloads are parsed; anything else is one flat text block."""
    if path.suffix.lower() == ".json":
        return load_content_json(path, strict=strict)
    return ContentSource.from_text(path.read_text(encoding="utf-8"))


def _emit(result: ReflowResult, output: Optional[Path], preview_dir: Optional[Path]) -> None:
    payload = json.dumps(serialize_result(result), indent=2, ensure_ascii=False)
    if output is None:
        print(payload)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload + "\n", encoding="utf-8")
        logger.info(f"Wrote {result.page_count} pages to {output}")

    if preview_dir is not None:
        save_previews(result, preview_dir)


def _cmd_contexts(args: argparse.Namespace) -> int:
    for context in available_contexts():
        profile = get_layout(context)
        print(
            f"{context.value:<16} {profile.max_lines_per_page:>3} lines x "
            f"{profile.max_characters_per_line:>3} chars"
            f"{'' if profile.preserve_empty_lines else '  (drops blank lines)'}"
        )
    return 0


def _cmd_reflow(args: argparse.Namespace) -> int:
    content = _read_content(args.input, args.strict)
    result = process(content, args.context)
    _emit(result, args.output, args.preview_dir)
    return 0


def _cmd_compose(args: argparse.Namespace) -> int:
    text = args.input.read_text(encoding="utf-8")
    moods = [Mood(name) for name in args.mood]
    layout = generate_styled_layout(text, moods, seed=args.seed)
    logger.info(f"Template {layout.template_name}, seed {layout.seed}")

    if args.styled_output is not None:
        save_content_json(layout.to_content(), args.styled_output)

    result = process(layout.to_content(), args.context)
    _emit(result, args.output, args.preview_dir)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordflow",
        description="Reflow text into pages for a presentation context",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    contexts = sub.add_parser("contexts", help="List presentation contexts and their budgets")
    contexts.set_defaults(func=_cmd_contexts)

    def add_output_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--context", default=None, help="Presentation context (unknown keys use the default profile)")
        p.add_argument("--output", type=Path, default=None, help="Write layout JSON here instead of stdout")
        p.add_argument("--preview-dir", type=Path, default=None, help="Also write PNG page previews here")

    reflow = sub.add_parser("reflow", help="Reflow a content payload or text file")
    reflow.add_argument("input", type=Path, help="Content .json payload or plain text file")
    reflow.add_argument("--strict", action="store_true", help="Validate JSON payloads against the schema")
    add_output_args(reflow)
    reflow.set_defaults(func=_cmd_reflow)

    compose = sub.add_parser("compose", help="Style authored text by mood, then reflow it")
    compose.add_argument("input", type=Path, help="Plain text file (three newlines = page break)")
    compose.add_argument(
        "--mood", action="append", default=[], choices=[m.value for m in Mood],
        help="Mood tag (repeatable)",
    )
    compose.add_argument("--seed", type=int, default=None, help="Layout seed for reproducible styling")
    compose.add_argument("--styled-output", type=Path, default=None, help="Save the styled content payload")
    add_output_args(compose)
    compose.set_defaults(func=_cmd_compose)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return args.func(args)
    except ValidationError as e:
        where = f" at {e.path}" if e.path else ""
        logger.error(f"Invalid content{where}: {e}")
        return 1
    except OSError as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
