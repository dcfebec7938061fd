import json
import logging

from models import JobRecord

logger = logging.getLogger(__name__)


def load_seen_jobs(path: str = "seen-jobs.json") -> set[str]:
    """Read the seen-job ids. A missing or unreadable file means nothing has been seen yet."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return set()
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable seen-jobs file {path}: {e}")
        return set()

    if not isinstance(data, list):
        logger.warning(f"Ignoring seen-jobs file {path}: expected a JSON array")
        return set()
    return {str(item) for item in data}


def save_seen_jobs(seen: set[str], path: str = "seen-jobs.json") -> None:
    """Overwrite the seen-jobs file with the full set."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(sorted(seen), f, indent=2)


def find_new_jobs(jobs: list[JobRecord], seen: set[str]) -> list[JobRecord]:
    """Jobs whose id has not been seen before, in their original order."""
    return [job for job in jobs if job.id not in seen]
