# match_list.py
# Reads and writes the JSON file that carries matches from 'search' to 'remove'.

import json
import logging
from dataclasses import asdict
from pathlib import Path

from config import MATCH_LIST_FILENAME, MATCH_LIST_INDENT
from data_models import DirectoryMatch

class MatchListError(Exception):
    """Raised when the match list is missing, unreadable, or malformed."""

def save_matches(matches, path=MATCH_LIST_FILENAME):
    """
    Writes the matches as a JSON array, replacing any previous contents.
    """
    list_path = Path(path)
    payload = json.dumps([asdict(match) for match in matches], indent=MATCH_LIST_INDENT)
    list_path.write_text(payload, encoding="utf-8")
    logging.info(f"Saved {len(matches)} matches to {list_path}")
    return list_path

def _to_match(record, index):
    if not isinstance(record, dict):
        raise MatchListError(f"Entry {index} is not an object")
    entry_path = record.get("path")
    size = record.get("size")
    if not isinstance(entry_path, str) or not entry_path:
        raise MatchListError(f"Entry {index} has no valid 'path'")
    # bool is an int subclass, but never a valid size
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        raise MatchListError(f"Entry {index} has no valid 'size'")
    return DirectoryMatch(path=entry_path, size=float(size))

def load_matches(path=MATCH_LIST_FILENAME):
    """
    Reads a match list written by save_matches. The whole file is validated
    before anything is returned, so a bad entry anywhere fails the load.
    """
    list_path = Path(path)
    try:
        data = list_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MatchListError(f"Match list not found: {list_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise MatchListError(f"Could not read match list {list_path}: {e}") from e

    try:
        records = json.loads(data)
    except json.JSONDecodeError as e:
        raise MatchListError(f"Match list {list_path} is not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise MatchListError(f"Match list {list_path} must contain a JSON array")

    matches = [_to_match(record, index) for index, record in enumerate(records)]
    logging.info(f"Loaded {len(matches)} matches from {list_path}")
    return matches
