import argparse
import logging
import sys
from typing import Optional, Sequence

import pandas as pd

from amdis.__version__ import APP_DESCRIPTION, APP_NAME, __version__
from amdis.constants import (
    APP_DIR,
    DEFAULT_LOG_LEVEL,
    LOG_DATEFMT,
    LOG_FILE_NAME,
    LOG_FORMAT,
)
from amdis.msl.document import Document

logger = logging.getLogger("amdis_logger")


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    APP_DIR.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=[
            logging.FileHandler(APP_DIR / LOG_FILE_NAME, encoding="utf-8"),  # log file
            logging.StreamHandler(),  # console
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_DESCRIPTION)
    parser.add_argument("path", help="MSL file to read")
    parser.add_argument(
        "--peaks", action="store_true", help="print one row per peak instead of per record"
    )
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL)
    parser.add_argument("--version", action="version", version=f"{APP_NAME} v{__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level.upper())

    try:
        doc = Document.from_path(args.path)
    except FileNotFoundError as e:
        logger.error(f"MSL file not found: {e}")
        return 1

    table = doc.peaks_dataframe() if args.peaks else doc.to_dataframe()
    with pd.option_context("display.max_rows", None, "display.width", None):
        print(table.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
