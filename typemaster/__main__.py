from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .app import TypemasterApp
from .config import default_data_dir, load_settings
from .errors import TypemasterError

logger = logging.getLogger("typemaster")


def setup_logging(log_file: Path, level: str = "INFO") -> None:
    # the terminal belongs to the TUI, so only log to a file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.FileHandler(log_file, encoding="utf-8")],
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="typemaster", description="60 second terminal typing test.")
    parser.add_argument("--config", type=Path, default=None, help="path to a JSON config file")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=default_data_dir() / "typemaster.log",
        help="where to write the log (default: %(default)s)",
    )
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        setup_logging(args.log_file, args.log_level)
    except OSError as exc:
        print(f"typemaster: cannot open log file {args.log_file}: {exc}", file=sys.stderr)
        return 1
    try:
        settings = load_settings(args.config)
        app = TypemasterApp(settings)
    except TypemasterError as exc:
        logger.error("%s", exc)
        print(f"typemaster: {exc}", file=sys.stderr)
        return 1
    logger.info("starting")
    try:
        app.run()
    finally:
        app.session.cancel_round()
    logger.info("exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
