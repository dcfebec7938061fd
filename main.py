#!/usr/bin/env python3
"""WordPress Jobs Monitor: one fetch, diff and notify cycle per invocation."""

import logging
import sys
from datetime import datetime, timezone

from config import ConfigError, Settings, load_settings
from dedup import find_new_jobs, load_seen_jobs, save_seen_jobs
from emailer import notify_new_jobs
from models import JobRecord
from sources.base import BaseSource
from sources.wordpress_jobs import WordPressJobsSource

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def run_check(settings: Settings, source: BaseSource | None = None) -> list[JobRecord]:
    """Run one check. Returns the newly discovered jobs (possibly empty)."""
    logger.info(f"[{datetime.now(timezone.utc).isoformat()}] Checking for new jobs...")
    logger.info(f"Email configured: {settings.email_user} -> {settings.email_to}")

    seen = load_seen_jobs(settings.seen_jobs_path)
    logger.info(f"Loaded {len(seen)} previously seen jobs")

    if source is None:
        source = WordPressJobsSource(url=settings.jobs_url, timeout=settings.http_timeout)

    logger.info(f"Fetching jobs from {source.url}")
    result = source.safe_collect()

    if not result.jobs:
        if result.fetch_failed:
            logger.warning("No jobs found - fetch failed, leaving seen jobs untouched")
        elif result.containers:
            logger.warning(
                f"No jobs found - {result.containers} listing containers matched but none "
                "had a title and link; selectors may be stale"
            )
        else:
            logger.warning("No jobs found - site structure may have changed")
            logger.warning("This might be normal if there are no jobs posted currently.")
        return []

    logger.info(f"Found {len(result.jobs)} total jobs on the site")

    new_jobs = find_new_jobs(result.jobs, seen)
    if not new_jobs:
        logger.info("No new jobs found")
        return []

    logger.info(f"Found {len(new_jobs)} new job(s)!")

    notified = notify_new_jobs(new_jobs, settings)
    if not notified.sent:
        logger.error(f"Failed to send email: {notified.error}")

    seen.update(job.id for job in new_jobs)
    save_seen_jobs(seen, settings.seen_jobs_path)
    logger.info("Updated seen jobs list")

    return new_jobs


def main() -> int:
    """Command-line entry point. Returns the process exit code."""
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error(str(e))
        logger.error("Please set: EMAIL_USER, EMAIL_PASS, EMAIL_TO")
        return 1

    try:
        run_check(settings)
    except KeyboardInterrupt:
        logger.info("Check interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
