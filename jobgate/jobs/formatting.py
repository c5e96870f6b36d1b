# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import List, Optional, Sequence

from .normalize import JobListing

DIVIDER = "\n\n---\n\n"


def _where(where: Optional[str]) -> str:
    return f" in {where}" if where else ""


def format_listing(index: int, job: JobListing) -> str:
    """Render one listing: core fields in fixed order, then whichever extras exist."""
    lines: List[str] = [
        f"**{index}. {job.title}**",
        f"🏢 **Company:** {job.company}",
        f"📍 **Location:** {job.location}",
        f"⏰ **Posted:** {job.posted_at}",
        f"🔗 **Link:** {job.url}",
    ]
    if job.salary:
        lines.append(f"💰 **Salary:** {job.salary}")
    if job.employment_type:
        lines.append(f"🏠 **Type:** {job.employment_type}")
    if job.applicant_count:
        lines.append(f"👥 **Applicants:** {job.applicant_count}")
    if job.company_rating:
        lines.append(f"⭐ **Company Rating:** {job.company_rating}")
    if job.description:
        lines.append(f"📄 **Description:** {job.description}")
    return "\n".join(lines)


def format_no_results(query: str, where: Optional[str]) -> str:
    return f'No jobs found for "{query}"{_where(where)}. Try different search terms or location.'


def format_search_results(
    source: str,
    query: str,
    where: Optional[str],
    total: int,
    listings: Sequence[JobListing],
) -> str:
    """
    Header with the search and counts, then one block per listing.

    `total` is the number of raw items the actor returned; `listings` is what
    survived the limit. Nothing to show renders the "no results" message.
    """
    if total == 0 or not listings:
        return format_no_results(query, where)

    body = DIVIDER.join(format_listing(i, job) for i, job in enumerate(listings, start=1))
    return (
        f"# {source} Jobs Search Results\n\n"
        f'**Search Query:** "{query}"{_where(where)}\n'
        f"**Found:** {total} jobs (showing {len(listings)})\n\n"
        f"{body}"
    )
