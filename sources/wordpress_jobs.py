from config import DEFAULT_JOBS_URL
from extractor import ExtractionRules, extract_jobs, link_in, link_matching, wrapping_link
from models import Extraction
from sources.base import BaseSource

JOBS_URL = DEFAULT_JOBS_URL
SITE_ORIGIN = "https://jobs.wordpress.net"

# Selectors in priority order. The board currently renders one div.row per listing.
WORDPRESS_RULES = ExtractionRules(
    containers=[
        "li.job_listing",
        "tr.job_listing",
        ".row",
        "article",
    ],
    skip_classes={"row-head", "job-list-col-labels"},
    title_link=[
        link_in(".job-title a[href]"),
        wrapping_link([".position h3", "h3", "h2"]),
        link_in("h2 a[href], h3 a[href], h4 a[href]"),
        link_matching("/job/"),
    ],
    fallback_link_marker="/job",
    fallback_labels=[".job-title", ".position h3", "h3", "h2", ".title", "strong"],
    fields={
        "company": [".job-company", ".company strong", ".company"],
        "location": [".job-location", ".location"],
        "date_posted": [".job-date", ".date time", "time", ".date"],
        "job_type": [".job-type", ".job-types li", ".type"],
    },
)


class WordPressJobsSource(BaseSource):
    name = "jobs.wordpress.net"
    url = JOBS_URL

    def parse(self, html: str) -> Extraction:
        return extract_jobs(html, WORDPRESS_RULES, SITE_ORIGIN)
