"""Selector-cascade extraction of job records from listing-page HTML.

Third-party job boards change their markup without notice, so nothing here
relies on a single selector. Each piece of a record (title+link, then every
auxiliary field) is resolved by trying an ordered list of selectors or
strategies and keeping the first non-empty result.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from models import Extraction, JobRecord

logger = logging.getLogger(__name__)

# A title/link strategy looks at one listing container and returns (title, href) or None.
TitleLinkStrategy = Callable[[Tag], tuple[str, str] | None]


@dataclass
class ExtractionRules:
    containers: list[str]
    title_link: list[TitleLinkStrategy]
    fallback_link_marker: str
    fallback_labels: list[str]
    fields: dict[str, list[str]] = field(default_factory=dict)
    skip_classes: set[str] = field(default_factory=set)


def clean_text(text: str) -> str:
    """Trim and collapse internal whitespace runs."""
    return " ".join(text.split())


def _href(anchor: Tag) -> str:
    return (anchor.get("href") or "").strip()


def first_text(container: Tag, selectors: list[str]) -> str:
    """Text of the first element, across selectors in priority order, that has any."""
    for selector in selectors:
        for el in container.select(selector):
            text = clean_text(el.get_text(" "))
            if text:
                return text
    return ""


def link_in(selector: str) -> TitleLinkStrategy:
    """Anchor matched by `selector`; the anchor's own text is the title."""

    def strategy(container: Tag):
        for anchor in container.select(selector):
            title = clean_text(anchor.get_text(" "))
            href = _href(anchor)
            if title and href:
                return title, href
        return None

    return strategy


def wrapping_link(label_selectors: list[str]) -> TitleLinkStrategy:
    """Clickable wrapper: an anchor around the whole card, titled by a heading inside it."""

    def strategy(container: Tag):
        anchors = container.select("a[href]")
        if container.name == "a" and _href(container):
            anchors.insert(0, container)
        for anchor in anchors:
            title = first_text(anchor, label_selectors)
            href = _href(anchor)
            if title and href:
                return title, href
        return None

    return strategy


def link_matching(marker: str) -> TitleLinkStrategy:
    """Any anchor whose URL contains `marker`, titled by its own text."""
    return link_in(f'a[href*="{marker}"]')


def normalize_link(href: str, origin: str) -> str:
    if href.startswith("http"):
        return href
    return urljoin(origin.rstrip("/") + "/", href)


def _is_skipped(container: Tag, skip_classes: set[str]) -> bool:
    return bool(skip_classes.intersection(container.get("class") or []))


def find_containers(soup: BeautifulSoup, rules: ExtractionRules) -> list[Tag]:
    """Containers matched by the first selector that matches anything besides header rows.

    Matches that enclose another match of the same selector are layout wrappers, not listings.
    """
    for selector in rules.containers:
        matches = [
            c for c in soup.select(selector)
            if not _is_skipped(c, rules.skip_classes) and c.select_one(selector) is None
        ]
        if matches:
            logger.debug(f"Container selector {selector!r} matched {len(matches)} elements")
            return matches
    return []


def resolve_title_link(container: Tag, rules: ExtractionRules) -> tuple[str, str]:
    for strategy in rules.title_link:
        found = strategy(container)
        if found:
            return found

    # Fallback: a job URL anywhere in the container plus a separate label
    href = ""
    for anchor in container.select(f'a[href*="{rules.fallback_link_marker}"]'):
        href = _href(anchor)
        if href:
            break
    return first_text(container, rules.fallback_labels), href


def parse_container(container: Tag, rules: ExtractionRules, origin: str) -> JobRecord | None:
    title, href = resolve_title_link(container, rules)
    if not title or not href:
        return None

    link = normalize_link(href, origin)
    extras = {}
    for name, selectors in rules.fields.items():
        value = first_text(container, selectors)
        if value:
            extras[name] = value

    return JobRecord(id=link, title=title, link=link, **extras)


def extract_jobs(html: str, rules: ExtractionRules, origin: str) -> Extraction:
    """Parse page HTML into job records in document order. Duplicates are kept."""
    soup = BeautifulSoup(html or "", "html.parser")
    containers = find_containers(soup, rules)

    jobs = []
    for container in containers:
        job = parse_container(container, rules, origin)
        if job is None:
            continue
        jobs.append(job)
        logger.info(f"  Found: {job.title} ({job.job_type}) - {job.location} [{job.date_posted}]")

    return Extraction(jobs=jobs, containers=len(containers))
