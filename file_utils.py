# file_utils.py
#
# Purpose:
# Saves a worth result to disk as JSON and loads GitHub usernames from a
# text file for batch lookups.

import json
import logging
import os
from datetime import datetime

logger = logging.getLogger(__name__)

REPORTS_DIR = "reports"


def ensure_reports_dir(reports_dir=REPORTS_DIR):
    os.makedirs(reports_dir, exist_ok=True)


def _timestamp():
    """Timestamp for filenames, e.g. 20260228_014512."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _jsonable(obj):
    """Replace float("inf") (the last tier's upper bound) with None."""
    if isinstance(obj, float) and obj == float("inf"):
        return None
    if isinstance(obj, dict):
        return {k: _jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_jsonable(v) for v in obj]
    return obj


def save_result_json(result, reports_dir=REPORTS_DIR):
    """
    Save a worth result as JSON.
    Returns the saved file path.

    An unbounded tier max_value is written as null.
    """
    ensure_reports_dir(reports_dir)

    username = result.get("username") or "unknown"
    path = os.path.join(reports_dir, f"{username}_worth_{_timestamp()}.json")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(_jsonable(result), f, indent=2, ensure_ascii=False)

    logger.info("Saved %s", path)
    return path


def load_usernames(path="usernames.txt"):
    """
    Load GitHub usernames from a text file (one per line).
    Blank lines and lines starting with '#' are skipped.
    Returns [] if the file doesn't exist.
    """
    if not os.path.exists(path):
        logger.warning("Usernames file not found: %s", path)
        return []

    usernames = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            u = line.strip()
            if u and not u.startswith("#"):
                usernames.append(u)

    return usernames
