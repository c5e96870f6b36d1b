# SPDX-License-Identifier: Apache-2.0
# jobgate/jobs/normalize.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

NA = "N/A"
DESCRIPTION_LIMIT = 200
ELLIPSIS = "..."


@dataclass(frozen=True)
class FieldAliases:
    """
    Raw keys to try for each logical field, first non-empty value wins.
    Actor output drifts between versions, so every field gets a list.
    """
    title: Tuple[str, ...]
    company: Tuple[str, ...]
    location: Tuple[str, ...]
    posted_at: Tuple[str, ...]
    url: Tuple[str, ...]
    salary: Tuple[str, ...] = ()
    employment_type: Tuple[str, ...] = ()
    applicant_count: Tuple[str, ...] = ()
    company_rating: Tuple[str, ...] = ()
    description: Tuple[str, ...] = ("description",)


LINKEDIN_ALIASES = FieldAliases(
    title=("title", "jobTitle"),
    company=("companyName", "company"),
    location=("location", "jobLocation"),
    posted_at=("publishedAt", "postedAt", "datePosted"),
    url=("jobUrl", "url", "link"),
    salary=("salary", "salaryRange"),
    employment_type=("jobType", "employmentType"),
    applicant_count=("applicants", "applicantsCount"),
)

INDEED_ALIASES = FieldAliases(
    title=("positionName", "title", "jobTitle"),
    company=("company", "companyName"),
    location=("location", "jobLocation"),
    posted_at=("postedAt", "datePosted", "posted"),
    url=("url", "jobUrl", "link"),
    salary=("salary", "salaryRange", "estimatedSalary"),
    employment_type=("jobType", "employmentType", "schedule"),
    company_rating=("rating", "companyRating"),
)


@dataclass(frozen=True)
class JobListing:
    """Uniform job record. Core fields are never empty; extras are None when absent."""
    title: str
    company: str
    location: str
    posted_at: str
    url: str
    salary: Optional[str] = None
    employment_type: Optional[str] = None
    applicant_count: Optional[str] = None
    company_rating: Optional[str] = None
    description: Optional[str] = None


def first_value(record: Mapping[str, Any], keys: Iterable[str]) -> Optional[Any]:
    for key in keys:
        value = record.get(key)
        # 0, "", [] and None all count as missing
        if value:
            return value
    return None


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ", ".join(_text(v) for v in value if v is not None)
    return str(value)


def _optional(record: Mapping[str, Any], keys: Tuple[str, ...]) -> Optional[str]:
    value = first_value(record, keys)
    return _text(value) if value is not None else None


def _required(record: Mapping[str, Any], keys: Tuple[str, ...]) -> str:
    return _optional(record, keys) or NA


def truncate(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def normalize_listing(record: Mapping[str, Any], aliases: FieldAliases) -> JobListing:
    description = _optional(record, aliases.description)
    return JobListing(
        title=_required(record, aliases.title),
        company=_required(record, aliases.company),
        location=_required(record, aliases.location),
        posted_at=_required(record, aliases.posted_at),
        url=_required(record, aliases.url),
        salary=_optional(record, aliases.salary),
        employment_type=_optional(record, aliases.employment_type),
        applicant_count=_optional(record, aliases.applicant_count),
        company_rating=_optional(record, aliases.company_rating),
        description=truncate(description) if description is not None else None,
    )


def normalize_listings(items: Iterable[Any], aliases: FieldAliases, limit: int) -> List[JobListing]:
    """Map raw actor items to at most `limit` listings, keeping input order."""
    listings: List[JobListing] = []
    for item in items:
        if len(listings) >= limit:
            break
        if not isinstance(item, Mapping):
            logger.debug("Skipping non-object dataset item: %r", type(item).__name__)
            continue
        listings.append(normalize_listing(item, aliases))
    return listings
