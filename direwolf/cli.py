"""Command-line interface for direwolf."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from . import __version__
from .config import Settings, load_environment
from .exceptions import DirewolfError
from .logging_utils import configure_logging
from .models import Response
from .options import Cookies, Data, DataForm, Headers, Params
from .session import Session


def _header(value: str) -> tuple[str, str]:
    name, sep, content = value.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError("Headers must look like 'Name: value'")
    return name.strip(), content.strip()


def _pair(value: str) -> tuple[str, str]:
    key, sep, content = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError("Expected key=value")
    return key, content


def _collect(pairs: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    collected: dict[str, list[str]] = {}
    for key, value in pairs:
        collected.setdefault(key, []).append(value)
    return collected


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="direwolf",
        description="Send an HTTP request built from headers, params, form data and cookies.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("method", help="HTTP method, e.g. GET or POST")
    parser.add_argument("url", help="Absolute URL to request")
    parser.add_argument("-H", "--header", action="append", type=_header, default=[], help="Request header 'Name: value' (repeatable)")
    parser.add_argument("-p", "--param", action="append", type=_pair, default=[], help="Query parameter key=value (repeatable)")
    parser.add_argument("-d", "--form", action="append", type=_pair, default=[], help="Form field key=value (repeatable)")
    parser.add_argument("-c", "--cookie", action="append", type=_pair, default=[], help="Cookie name=value (repeatable)")
    parser.add_argument("--data", help="Raw request body")
    parser.add_argument("--strict", action="store_true", help="Reject unsupported request options")
    parser.add_argument("-i", "--include", action="store_true", help="Print the status line and response headers")
    parser.add_argument("--log-json", action="store_true", help="Emit structured JSON logs to the log file")
    parser.add_argument("--log-file", type=Path, help="Write logs to the specified path")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Enable debug logging")
    verbosity.add_argument("--quiet", action="store_true", help="Reduce logging output")
    return parser


def build_options(args: argparse.Namespace) -> list[object]:
    options: list[object] = []
    if args.header:
        options.append(Headers(_collect(args.header)))
    if args.param:
        options.append(Params(_collect(args.param)))
    if args.form:
        options.append(DataForm(_collect(args.form)))
    if args.data is not None:
        options.append(Data(args.data))
    if args.cookie:
        options.append(Cookies(dict(args.cookie)))
    return options


def configure_cli_logging(args: argparse.Namespace, settings: Settings) -> None:
    level = settings.log_level
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    configure_logging(
        level=level,
        json_logs=args.log_json or settings.log_json,
        logfile=args.log_file or settings.log_file,
    )


def render_response(response: Response, *, include: bool = False) -> str:
    lines: list[str] = []
    if include:
        lines.append(f"HTTP {response.status_code} {response.reason}".rstrip())
        lines.extend(f"{name}: {value}" for name, value in response.headers.items())
        lines.append("")
    lines.append(response.text)
    return "\n".join(lines)


def main(argv: Optional[Iterable[str]] = None) -> int:
    load_environment()
    settings = Settings.from_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_cli_logging(args, settings)
    logger = logging.getLogger("direwolf.cli")

    try:
        with Session(strict=args.strict or settings.strict_options) as session:
            response = session.request(args.method, args.url, *build_options(args))
    except DirewolfError as exc:
        logger.error("Request failed: %s", exc)
        return 1

    logger.info("HTTP %s %s from %s", response.status_code, response.reason, response.url)
    print(render_response(response, include=args.include))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
