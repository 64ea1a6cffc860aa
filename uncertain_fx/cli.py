from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence

from .converter import ConversionRequest, convert, parse_request, validate
from .errors import ConversionError
from .log import setup_logging
from .random_source import RandomSource, make_random_source
from .report import format_report
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)

PROGRAM = "uncertain-fx"


def _program_name(argv0: str) -> str:
    name = os.path.basename(argv0)
    if not name or name == "__main__.py":
        return PROGRAM
    return name


def _configure_logging() -> None:
    #Settings only affect diagnostics on stderr, never stdout or the exit code
    try:
        settings = load_settings()
    except ValueError as e:
        setup_logging(Settings().log_level)
        logger.warning("Ignoring invalid setting: %s", e)
        return
    setup_logging(settings.log_level)


def run(request: ConversionRequest, random_source: Optional[RandomSource] = None) -> int:
    """Seed, convert and print a validated request. Returns the exit code."""
    if random_source is None:
        random_source = make_random_source()
    try:
        result = convert(request, random_source)
    except ConversionError as e:
        logger.info("Conversion of %s failed: %s", request, e.message)
        print(e.message)
        return e.exit_code
    print(format_report(result))
    return 0


def main(argv: Optional[Sequence[str]] = None, random_source: Optional[RandomSource] = None) -> int:
    if argv is None:
        program = _program_name(sys.argv[0])
        argv = sys.argv[1:]
    else:
        program = PROGRAM

    try:
        request = parse_request(argv, program=program)
        validate(request)
    except ConversionError as e:
        print(e.message)
        return e.exit_code

    _configure_logging()
    logger.debug("Validated %s", request)
    return run(request, random_source)


if __name__ == "__main__":
    sys.exit(main())
