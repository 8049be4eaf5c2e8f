"""Command-line entry point.

Usage::

    koans                      # walk every topic
    koans AboutStrings         # one topic
    koans AboutStrings --koan 3
    koans --list
"""

from __future__ import annotations

import argparse
import sys

from colorama import just_fix_windows_console

from src.config import settings
from src.engine import KoanRunner, Reporter, summarize
from src.koans import build_registry
from src.koans.registry import KoanRegistry
from src.utils.exceptions import KoanError
from src.utils.logging import get_logger, setup_logging

EXIT_OK = 0
EXIT_UNRESOLVED = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="koans",
        description="Walk the path to enlightenment, one koan at a time.",
    )
    parser.add_argument("topic", nargs="?", help="run only this topic (e.g. AboutHashes)")
    parser.add_argument(
        "--koan",
        type=int,
        metavar="N",
        help="run only koan N of the selected topic",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        default=settings.fail_fast,
        help="skip the rest of a topic after its first failure",
    )
    parser.add_argument(
        "--koans-dir",
        default=settings.koans_dir,
        metavar="DIR",
        help="load about_*.py koans from DIR instead of the bundled ones",
    )
    parser.add_argument("--list", action="store_true", help="list topics and exit")
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=settings.color,
        help="disable colored output",
    )
    parser.add_argument(
        "--traceback",
        action="store_true",
        default=settings.show_traceback,
        help="show the full traceback of the koan to fix next",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.debug,
        help="enable debug logging on stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.koan is not None and not args.topic:
        parser.error("--koan requires a topic")

    setup_logging(debug=args.debug, json_logs=settings.json_logs)
    logger = get_logger("main")
    just_fix_windows_console()

    try:
        registry = build_registry(args.koans_dir)

        if args.list:
            print(_list_topics(registry))
            return EXIT_OK

        runner = KoanRunner(registry, fail_fast=args.fail_fast)
        if args.topic:
            topic = registry.get_topic(args.topic)
            results = {topic.name: runner.run(topic.name, only=args.koan)}
        else:
            results = runner.run_all()

    except KoanError as exc:
        logger.error("startup_failed", error=str(exc))
        print(f"koans: error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    summary = summarize(results)
    reporter = Reporter(color=args.color, show_traceback=args.traceback)
    print(reporter.render(results, summary))

    logger.info(
        "run_summary",
        passed=summary.passed,
        failed=summary.failed,
        errored=summary.errored,
        not_run=summary.not_run,
    )
    return EXIT_OK if summary.all_passed else EXIT_UNRESOLVED


def _list_topics(registry: KoanRegistry) -> str:
    return "\n".join(f"{topic.name} ({len(topic)} koans)" for topic in registry.all_topics())


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
