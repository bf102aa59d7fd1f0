# performance_logger.py

import logging
from pathlib import Path
from config import LOG_FOLDER, PERFORMANCE_LOG_FILENAME, FAILED_SAMPLE_SIZE

class PerformanceLogger:
    def __init__(self, log_folder=None):
        log_folder_path = Path(log_folder or LOG_FOLDER)
        log_folder_path.mkdir(parents=True, exist_ok=True)
        self.log_path = log_folder_path / PERFORMANCE_LOG_FILENAME
        self._check_log_file()

    def _check_log_file(self):
        """Creates the log file with a header if it doesn't exist."""
        if not self.log_path.exists():
            try:
                self.log_path.write_text("--- Performance Log for DevCrap Commander ---\n\n", encoding="utf-8")
            except OSError as e:
                logging.error(f"Could not create performance log file: {e}")

    def log_run(self, stats_dict):
        """Writes a formatted summary of a search or remove run to the log file."""
        try:
            with self.log_path.open("a", encoding="utf-8", errors="backslashreplace") as f:
                f.write(f"--- Run: {stats_dict.get('timestamp')} ---\n")
                f.write(f"Command: {stats_dict.get('command', 'N/A')}\n")
                f.write(f"Total time: {stats_dict.get('total_time', 0):.2f} seconds\n")
                f.write(f"Status: {stats_dict.get('status', 'N/A')}\n")

                f.write("\n[Settings]\n")
                if stats_dict.get('command') == 'search':
                    f.write(f"  Folder: {stats_dict.get('folder', 'N/A')}\n")
                    f.write(f"  Threshold (MB): {stats_dict.get('threshold', 'N/A')}\n")
                    f.write(f"  Saved to: {stats_dict.get('saved_to') or 'not saved'}\n")
                else:
                    f.write(f"  Match list: {stats_dict.get('match_list', 'N/A')}\n")

                f.write("\n[Result]\n")
                if stats_dict.get('command') == 'search':
                    f.write(f"  Directories scanned: {stats_dict.get('directories_scanned', 'N/A')}\n")
                    f.write(f"  Matches found: {stats_dict.get('matches_found', 'N/A')}\n")
                else:
                    f.write(f"  Directories listed: {stats_dict.get('directories_listed', 'N/A')}\n")
                    f.write(f"  Directories removed: {stats_dict.get('directories_removed', 'N/A')}\n")
                    f.write(f"  Removals failed: {stats_dict.get('removals_failed', 'N/A')}\n")

                if stats_dict.get('error'):
                    f.write(f"  Error: {stats_dict['error']}\n")

                failed_paths = stats_dict.get('failed_paths', [])
                if failed_paths:
                    f.write("\n[Failed Removals (sample)]\n")
                    for failed_path in failed_paths[:FAILED_SAMPLE_SIZE]:
                        f.write(f"  - {failed_path}\n")
                    if len(failed_paths) > FAILED_SAMPLE_SIZE:
                        f.write(f"  ... and {len(failed_paths) - FAILED_SAMPLE_SIZE} more.\n")

                f.write("-" * 50 + "\n\n")
        except OSError as e:
            logging.error(f"Could not write to performance log: {e}")
