"""Render the new-jobs digest email (subject, HTML body, plain-text body)."""

import html
from datetime import datetime

from models import JobRecord

ACCENT = "#0073aa"

# (field, label) in display order
DETAIL_FIELDS = [
    ("company", "Company"),
    ("job_type", "Type"),
    ("location", "Location"),
    ("date_posted", "Posted"),
]


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def digest_subject(count: int) -> str:
    return f"{count} New WordPress Job{_plural(count)} Available!"


def render_digest(jobs: list[JobRecord], checked_at: datetime | None = None) -> tuple[str, str, str]:
    """Build (subject, html_body, text_body) for a non-empty list of new jobs."""
    checked_at = checked_at or datetime.now()
    stamp = checked_at.strftime("%Y-%m-%d %H:%M:%S")
    count = len(jobs)

    blocks = "\n".join(_render_job_html(job) for job in jobs)
    html_body = f"""<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h2 style="color: {ACCENT}; border-bottom: 2px solid {ACCENT}; padding-bottom: 10px;">New WordPress Jobs Posted</h2>
  <p style="font-size: 16px; color: #333;">Found <strong>{count}</strong> new job posting{_plural(count)} on the WordPress Jobs board:</p>
{blocks}
  <hr style="margin: 30px 0; border: none; border-top: 1px solid #ddd;">
  <p style="color: #999; font-size: 12px; text-align: center;">
    Automated notification from WordPress Jobs Monitor<br>
    Checked at {stamp}
  </p>
</div>
"""

    text_lines = [f"Found {count} new job posting{_plural(count)} on the WordPress Jobs board:", ""]
    for job in jobs:
        text_lines.extend(_render_job_text(job))
    text_lines.append(f"Checked at {stamp}")

    return digest_subject(count), html_body, "\n".join(text_lines)


def _render_job_html(job: JobRecord) -> str:
    details = "".join(
        f'    <p style="margin: 5px 0; color: #555;"><strong>{label}:</strong> {html.escape(getattr(job, name))}</p>\n'
        for name, label in DETAIL_FIELDS
        if job.has(name)
    )
    return (
        f'  <div style="margin-bottom: 20px; padding: 15px; border-left: 4px solid {ACCENT}; background: #f9f9f9;">\n'
        f'    <h3 style="margin: 0 0 10px 0; color: {ACCENT};">{html.escape(job.title)}</h3>\n'
        f"{details}"
        f'    <p style="margin: 10px 0 0 0;"><a href="{html.escape(job.link, quote=True)}" '
        f'style="display: inline-block; padding: 8px 16px; background: {ACCENT}; color: white; '
        f'text-decoration: none; border-radius: 4px;">View Job Details &rarr;</a></p>\n'
        f"  </div>"
    )


def _render_job_text(job: JobRecord) -> list[str]:
    lines = [f"* {job.title}"]
    for name, label in DETAIL_FIELDS:
        if job.has(name):
            lines.append(f"  {label}: {getattr(job, name)}")
    lines.append(f"  {job.link}")
    lines.append("")
    return lines
