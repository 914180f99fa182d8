"""Command-line entrypoint: parse arguments and dispatch to a splitter."""
from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence

from pydantic import ValidationError

from splitter.config import configure_logging, get_settings
from splitter.exceptions import UsageError
from splitter.models import SplitMode, SplitRequest
from splitter.services import run_split

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str]) -> SplitRequest:
    """Turn ``<file path> <-size|-count> <value>`` into a :class:`SplitRequest`."""

    if len(argv) != 3:
        raise UsageError("")

    file_path, flag, raw_value = argv
    try:
        return SplitRequest(path=file_path, mode=SplitMode.parse(flag), value=raw_value)
    except ValidationError as exc:
        failed = {error["loc"][0] for error in exc.errors() if error["loc"]}
        if "value" in failed:
            raise UsageError(f"ERROR: Argument '{raw_value}' is not a valid Int64.") from exc
        if "mode" in failed:
            raise UsageError(f"ERROR: Unknown option '{flag}'.") from exc
        raise UsageError(f"ERROR: Argument '{raw_value}' is too large for {flag.lower()}.") from exc


def help_lines(program: str) -> List[str]:
    return [
        "Usages:",
        "",
        "Option 1 - Splits the file into pre-defined size files "
        "(the remainder is placed in an additional last file):",
        f"{program} <file path> -size <size in bytes>",
        "",
        "Option 2 - Splits the file into equally sized files:",
        f"{program} <file path> -count <number of files>",
        "",
    ]


def display_help(program: str) -> None:
    for line in help_lines(program):
        print(line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    settings = get_settings()
    args = list(sys.argv[1:] if argv is None else argv)

    print(settings.app_name)

    try:
        request = parse_args(args)
    except UsageError as exc:
        logger.debug(f"Rejected arguments {args!r}: {exc}")
        if str(exc):
            print(exc)
        display_help(settings.app_name)
        return 1

    result = run_split(request)
    if result.success:
        return 0

    logger.info(f"Split of {request.path} failed ({result.error_kind}): {result.error}")
    display_help(settings.app_name)
    return 1


if __name__ == "__main__":
    sys.exit(main())
