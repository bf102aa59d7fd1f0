# directory_remover.py
import os
import shutil
import logging

from config import MATCH_LIST_FILENAME
from data_models import RemovalResult
from file_handler import display_path
from match_list import load_matches

def remove_directories(match_list_path=MATCH_LIST_FILENAME, progress_callback=None):
    """
    Deletes every directory named in the match list, in list order.

    The list is loaded and validated before anything is deleted, so a bad
    match list raises MatchListError and leaves the filesystem untouched.
    A directory that no longer exists counts as removed. One that cannot
    be removed is recorded as failed and the remaining entries are still
    attempted.
    """
    matches = load_matches(match_list_path)
    results = []
    for match in matches:
        try:
            shutil.rmtree(match.path)
            logging.info(f"REMOVED: {display_path(match.path)}")
            result = RemovalResult(path=match.path, removed=True)
        except FileNotFoundError:
            # Usually removed along with a matching parent earlier in the list
            logging.warning(f"ALREADY GONE: {display_path(match.path)}")
            result = RemovalResult(path=match.path, removed=True)
        except OSError as e:
            logging.error(f"ERROR while removing {display_path(match.path)}: {display_path(str(e))}")
            result = RemovalResult(path=match.path, removed=False, error=str(e))
        results.append(result)
        if progress_callback:
            progress_callback(result)

    removed_count = sum(1 for result in results if result.removed)
    logging.info(
        f"Removed {removed_count} of {len(results)} directories listed in "
        f"{os.path.basename(str(match_list_path))}."
    )
    return results
