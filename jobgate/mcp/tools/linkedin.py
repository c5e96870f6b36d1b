# SPDX-License-Identifier: Apache-2.0
"""
LinkedIn job search backed by an Apify actor.

- Builds the actor input from validated tool arguments.
- Runs the actor in the mode configured for it (sync or async-poll).
- Normalizes and renders the dataset items as one text block.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from ...apify.client import ActorClient, JobRequest
from ...jobs.formatting import format_search_results
from ...jobs.normalize import LINKEDIN_ALIASES, normalize_listings
from ...settings import SETTINGS, ActorConfig
from ..registry import ToolRegistry
from ..schema import ParamSpec, ToolSpec

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "United States"

EXPERIENCE_LEVELS = ("Internship", "Entry level", "Associate", "Mid-Senior level", "Director", "Executive")
JOB_TYPES = ("Full-time", "Part-time", "Contract", "Temporary", "Volunteer", "Internship", "Other")

# LinkedIn search filter codes (f_E / f_JT)
_EXPERIENCE_CODES = {
    "Internship": "1",
    "Entry level": "2",
    "Associate": "3",
    "Mid-Senior level": "4",
    "Director": "5",
    "Executive": "6",
}
_JOB_TYPE_CODES = {
    "Full-time": "F",
    "Part-time": "P",
    "Contract": "C",
    "Temporary": "T",
    "Volunteer": "V",
    "Internship": "I",
    "Other": "O",
}

LINKEDIN_PARAMS = (
    ParamSpec("jobTitle", "string", "Job title to search for (e.g., 'Software Engineer', 'Marketing Manager')", required=True),
    ParamSpec("location", "string", "Location for the job search (e.g., 'San Francisco, CA', 'Remote')"),
    ParamSpec("companyName", "array", "Array of company names to filter by", items="string"),
    ParamSpec("companyId", "array", "Array of LinkedIn company IDs to filter by", items="string"),
    ParamSpec("experienceLevel", "string", "Experience level filter", choices=EXPERIENCE_LEVELS),
    ParamSpec("jobType", "string", "Employment type filter", choices=JOB_TYPES),
    ParamSpec("maxResults", "integer", "Maximum number of jobs to return (1-100)", default=10, minimum=1, maximum=100),
)


def build_linkedin_input(
    job_title: str,
    location: Optional[str] = None,
    company_name: Optional[List[str]] = None,
    company_id: Optional[List[str]] = None,
    experience_level: Optional[str] = None,
    job_type: Optional[str] = None,
    max_results: int = 10,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "title": job_title or "",
        "location": location or DEFAULT_LOCATION,
        "rows": max_results,
        "proxy": {
            "useApifyProxy": True,
            "apifyProxyGroups": ["RESIDENTIAL"],
        },
    }
    # Filters only when provided
    if company_name:
        payload["companyName"] = list(company_name)
    if company_id:
        payload["companyId"] = list(company_id)
    if experience_level:
        payload["experienceLevel"] = _EXPERIENCE_CODES[experience_level]
    if job_type:
        payload["contractType"] = _JOB_TYPE_CODES[job_type]
    return payload


def register_linkedin_tools(
    registry: ToolRegistry,
    *,
    actor: Optional[ActorConfig] = None,
    client_factory: Optional[Callable[[], ActorClient]] = None,
) -> None:
    """
    Register scrape_linkedin_jobs. `actor` and `client_factory` default to the
    configured LinkedIn actor and ActorClient.from_settings.
    """

    async def scrape_linkedin_jobs(
        jobTitle: str,
        location: Optional[str] = None,
        companyName: Optional[List[str]] = None,
        companyId: Optional[List[str]] = None,
        experienceLevel: Optional[str] = None,
        jobType: Optional[str] = None,
        maxResults: int = 10,
    ) -> str:
        cfg = actor or SETTINGS.linkedin
        request = JobRequest(
            actor_id=cfg.actor_id,
            input=build_linkedin_input(
                jobTitle, location, companyName, companyId, experienceLevel, jobType, maxResults
            ),
            mode=cfg.mode,
        )
        logger.info("LinkedIn search: title='%s', location='%s', max=%s", jobTitle, location or "", maxResults)

        client = (client_factory or ActorClient.from_settings)()
        try:
            items = await client.run(request)
        finally:
            client.close()

        listings = normalize_listings(items, LINKEDIN_ALIASES, maxResults)
        return format_search_results("LinkedIn", jobTitle, location, len(items), listings)

    registry.register(
        ToolSpec(
            name="scrape_linkedin_jobs",
            handler=scrape_linkedin_jobs,
            params=LINKEDIN_PARAMS,
            description="Search LinkedIn job postings by title, location and company filters.",
            error_prefix="Error scraping LinkedIn jobs",
        )
    )
