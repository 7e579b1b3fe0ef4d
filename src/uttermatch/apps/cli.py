"""CLI entry point for uttermatch.

Loads an interaction model, resolves each utterance offline and prints
the winning intent and slot values.

Exit codes:
    0  every utterance matched an intent
    1  at least one utterance did not match
    2  the model could not be loaded or is malformed
"""

import argparse
import json
import logging
import os
import sys

from uttermatch.core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_LEVEL_ENV,
    DEFAULT_MODEL_ENV,
    LOGGER_NAME,
)
from uttermatch.core.resolve import Resolution

_log = logging.getLogger(LOGGER_NAME)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Resolve utterances to intents of an interaction model, offline"
    )
    parser.add_argument(
        "utterances",
        nargs="*",
        help="Utterances to resolve (default: one per line from stdin)",
    )
    parser.add_argument(
        "-m",
        "--model",
        default=os.environ.get(DEFAULT_MODEL_ENV),
        help=f"Interaction model JSON file (default: ${DEFAULT_MODEL_ENV})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per utterance instead of a table",
    )
    parser.add_argument(
        "--list-intents",
        action="store_true",
        help="List the model's intents and sample counts, then exit",
    )
    parser.add_argument(
        "--no-builtins",
        action="store_true",
        help="Do not add builtin slot types and builtin intent utterances",
    )
    return parser


def _read_utterances(args: argparse.Namespace) -> list[str]:
    if args.utterances:
        return list(args.utterances)
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def _resolution_json(resolution: Resolution) -> str:
    evaluation = resolution.evaluation
    return json.dumps(
        {
            "utterance": resolution.utterance,
            "matched": resolution.matched,
            "intent": resolution.intent_name,
            "slots": resolution.slots(),
            "sample": evaluation.phrase.template if evaluation else None,
        }
    )


def run(args: argparse.Namespace) -> int:
    """Resolve the requested utterances. Returns exit code."""
    from rich.console import Console

    from uttermatch.api import load_interaction_model, resolve_all
    from uttermatch.core.errors import UttermatchError
    from uttermatch.ui import render_intents, render_resolutions

    console = Console()
    try:
        model = load_interaction_model(args.model, include_builtins=not args.no_builtins)
    except (OSError, UttermatchError) as exc:
        _log.error("Could not load model %s: %s", args.model, exc)
        return 2

    if args.list_intents:
        console.print(render_intents(model))
        return 0

    try:
        resolutions = resolve_all(model, _read_utterances(args))
    except UttermatchError as exc:
        _log.error("Malformed model %s: %s", args.model, exc)
        return 2

    if args.json:
        for resolution in resolutions:
            print(_resolution_json(resolution))
    else:
        console.print(render_resolutions(resolutions))

    return 0 if all(r.matched for r in resolutions) else 1


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code."""
    from rich.console import Console
    from rich.logging import RichHandler

    log_level = os.environ.get(DEFAULT_LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                rich_tracebacks=False,
            )
        ],
    )

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if not args.model:
        parser.error(f"no model given; use --model or set {DEFAULT_MODEL_ENV}")

    return run(args)
