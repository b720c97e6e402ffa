"""Command line front end for filtering a schedule without the GUI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .api_client import ApiClient
from .config import configure_logging, load_config
from .controller import SubmissionController
from .download import DownloadTrigger, save_to_directory
from .models import BreakWindow, FormState, SourceFile
from .time_fields import HOUR_MAX, MINUTE_MAX, SECOND_MAX, compose_time, normalize_component

_MAXIMA = (HOUR_MAX, MINUTE_MAX, SECOND_MAX)


def _time_argument(value: Optional[str]) -> str:
    """Normalize ``H[:M[:S]]`` the way the time inputs of the form do."""

    if not value:
        return ""
    parts = value.split(":")
    if len(parts) > 3:
        raise argparse.ArgumentTypeError(f"invalid time: {value}")
    parts += [""] * (3 - len(parts))
    components = [normalize_component(part, top) for part, top in zip(parts, _MAXIMA)]
    return compose_time(*components, fill=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="driver-filter",
        description="Filter a schedule spreadsheet down to one driver.",
    )
    parser.add_argument("file", type=Path, help="Schedule spreadsheet (.xlsx)")
    parser.add_argument("--driver", required=True, help="Driver name")
    parser.add_argument("--break-date", default="", help="Break date (YYYY-MM-DD)")
    parser.add_argument("--break-start", type=_time_argument, default="", help="Break start (HH:MM:SS)")
    parser.add_argument("--break-end", type=_time_argument, default="", help="Break end (HH:MM:SS)")
    parser.add_argument("--off-date", default="", help="Off day (YYYY-MM-DD)")
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Directory for the filtered file. Default: configured download dir or the current directory",
    )
    parser.add_argument("--backend-url", default=None, help="Override the configured service URL")
    return parser


def form_from_args(args: argparse.Namespace) -> FormState:
    add_break = bool(args.break_date or args.break_start or args.break_end)
    return FormState(
        source_file=SourceFile(args.file),
        driver_name=args.driver,
        add_break=add_break,
        break_window=BreakWindow(date=args.break_date, start_time=args.break_start, end_time=args.break_end),
        give_off=bool(args.off_date),
        off_date=args.off_date,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    configure_logging(config.log_level)

    if not args.file.exists():
        print(f"Error: file not found: {args.file}", file=sys.stderr)
        return 1

    out_dir = args.out_dir or config.download_dir or Path.cwd()
    api_client = ApiClient(args.backend_url or config.backend_url, timeout=config.request_timeout)
    controller = SubmissionController(api_client, DownloadTrigger(save_to_directory(out_dir)))
    controller.load(form_from_args(args))

    result = controller.submit()
    if not result.succeeded:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1
    print(out_dir / result.filename)
    return 0


if __name__ == "__main__":
    sys.exit(main())
