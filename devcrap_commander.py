# devcrap_commander.py
# Command-line entry point: 'search' finds oversized directories, 'remove' deletes them.

import argparse
import logging
import math
import sys
import time
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from config import DESCRIPTION, VERSION, MATCH_LIST_FILENAME, LOG_FOLDER
from directory_remover import remove_directories
from file_handler import display_path, search_directories
from logger_setup import setup_global_logger
from match_list import MatchListError
from performance_logger import PerformanceLogger

def _make_console(stderr=False):
    stream = sys.stderr if stderr else sys.stdout
    if stream.isatty():
        return Console(stderr=stderr, soft_wrap=True)
    # Captured or redirected output: no styling
    return Console(stderr=stderr, width=200, force_terminal=False, no_color=True, highlight=False, soft_wrap=True)

console = _make_console()
error_console = _make_console(stderr=True)

def threshold_mb(value):
    """argparse type for the size threshold: a finite, non-negative number of megabytes."""
    try:
        threshold = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold {value!r}: not a number")
    if not math.isfinite(threshold) or threshold < 0:
        raise argparse.ArgumentTypeError(
            f"invalid threshold {value!r}: must be a non-negative number of megabytes"
        )
    return threshold

def run_search(args, run_stats):
    save_path = args.match_list if args.save else None
    run_stats.update(
        folder=args.directory, threshold=args.threshold, saved_to=save_path, directories_scanned=0
    )

    with console.status("Scanning...") as status:
        def on_progress(path):
            run_stats["directories_scanned"] += 1
            status.update(f"Scanning: {escape(display_path(path))}")

        def on_match(match):
            console.print(f"Match found: {escape(display_path(match.path))} | Size: {match.size:.2f} MB")

        matches = search_directories(
            args.directory, args.threshold, save_path=save_path,
            progress_callback=on_progress, match_callback=on_match
        )

    run_stats["matches_found"] = len(matches)
    console.print(f"Found {len(matches)} directories larger than {args.threshold:g} MB")
    if save_path is not None:
        console.print(f"Saved the found directories to {escape(display_path(str(save_path)))}")
    return 0

def run_remove(args, run_stats):
    run_stats["match_list"] = args.match_list

    def on_removed(result):
        if result.removed:
            console.print(f"Removed directory: {escape(display_path(result.path))}")
        else:
            error_console.print(f"[bold red]Error:[/] {escape(display_path(result.error))}")

    results = remove_directories(args.match_list, progress_callback=on_removed)
    failed_paths = [result.path for result in results if not result.removed]
    removed_count = len(results) - len(failed_paths)
    run_stats.update(
        directories_listed=len(results), directories_removed=removed_count,
        removals_failed=len(failed_paths), failed_paths=failed_paths
    )
    console.print(f"Removed {removed_count} of {len(results)} directories")
    return 1 if failed_paths else 0

def build_parser():
    parser = argparse.ArgumentParser(prog="devcrap", description=DESCRIPTION)
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument("-m", "--match-list", default=MATCH_LIST_FILENAME, metavar="PATH",
                        help=f"File that 'search --save' writes and 'remove' reads (default: {MATCH_LIST_FILENAME})")
    parser.add_argument("-l", "--log-dir", default=LOG_FOLDER, metavar="PATH",
                        help="Folder for the log files (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print debug logging to stderr")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    search_parser = subparsers.add_parser(
        "search", help="Find directories with total size greater than a given threshold in MB"
    )
    search_parser.add_argument("directory", help="Directory to search")
    search_parser.add_argument("threshold", type=threshold_mb, help="Size threshold in MB")
    search_parser.add_argument("-s", "--save", action="store_true",
                               help="Save the found directories to a JSON file")
    search_parser.set_defaults(handler=run_search)

    remove_parser = subparsers.add_parser(
        "remove", help="Remove directories listed in the match list file"
    )
    remove_parser.set_defaults(handler=run_remove)
    return parser

def main(argv=None):
    """
    Runs one command and returns the process exit code:
    0 on success, 1 if the command failed or any removal failed.
    Usage errors exit with 2 from argparse.
    """
    args = build_parser().parse_args(argv)
    try:
        setup_global_logger(args.log_dir, args.verbose)
        performance_logger = PerformanceLogger(args.log_dir)
    except OSError as e:
        error_console.print(f"[bold red]Error:[/] Could not set up logging: {escape(display_path(str(e)))}")
        return 1

    run_stats = {"timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"), "command": args.command}
    start_time = time.monotonic()
    try:
        exit_code = args.handler(args, run_stats)
        run_stats["status"] = "completed" if exit_code == 0 else "completed with errors"
    except (OSError, MatchListError) as e:
        logging.error(f"The {args.command} command failed: {e}", exc_info=True)
        error_console.print(f"[bold red]Error:[/] {escape(display_path(str(e)))}")
        run_stats["status"] = "failed"
        run_stats["error"] = str(e)
        exit_code = 1

    run_stats["total_time"] = time.monotonic() - start_time
    performance_logger.log_run(run_stats)
    return exit_code

if __name__ == "__main__":
    sys.exit(main())
