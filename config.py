# config.py

import os

# --- Application ---
APP_NAME = "DevCrap Commander"
VERSION = "1.0.0"
DESCRIPTION = (
    "DevCrapCommander: Find directories with total size greater than a given threshold in MB"
)

# --- Match List ---
# The file written by 'search --save' and read by 'remove'.
# A relative name is resolved against the current working directory.
MATCH_LIST_FILENAME = "foundDirectories.json"
# Indentation used when writing the match list.
MATCH_LIST_INDENT = 2

# --- Sizes ---
# Directory sizes are reported in megabytes of 1024 * 1024 bytes.
BYTES_PER_MB = 1024 * 1024

# --- Logging ---
# The folder for log files. Can be overridden with --log-dir.
LOG_FOLDER = os.path.join(os.path.expanduser("~"), ".devcrap_commander", "Logs")
# The main log file for the application's operations.
LOG_FILENAME = "devcrap_commander.log"
# The log file with one summary block per run.
PERFORMANCE_LOG_FILENAME = "performance_log.txt"
# The main log file is moved aside once it grows past this size.
LOG_ROTATE_BYTES = 5 * 1024 * 1024

# --- Reporting ---
# How many failed removals are listed in a run summary.
FAILED_SAMPLE_SIZE = 20
