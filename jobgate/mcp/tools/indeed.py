# SPDX-License-Identifier: Apache-2.0
# jobgate/mcp/tools/indeed.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from ...apify.client import ActorClient, JobRequest
from ...jobs.formatting import format_search_results
from ...jobs.normalize import INDEED_ALIASES, normalize_listings
from ...settings import SETTINGS, ActorConfig
from ..registry import ToolRegistry
from ..schema import ParamSpec, ToolSpec

logger = logging.getLogger(__name__)

INDEED_PARAMS = (
    ParamSpec("position", "string", "Job position to search for (e.g., 'web developer', 'marketing manager')", required=True),
    ParamSpec("country", "string", "Country code (e.g., 'US', 'CA', 'UK', 'DE')", default="US"),
    ParamSpec("location", "string", "Location for the job search (e.g., 'San Francisco', 'New York', 'Remote')"),
    ParamSpec("maxItems", "integer", "Maximum number of jobs to return (1-100)", default=50, minimum=1, maximum=100),
    ParamSpec("parseCompanyDetails", "boolean", "Whether to parse detailed company information", default=False),
    ParamSpec("saveOnlyUniqueItems", "boolean", "Whether to save only unique job items", default=True),
    ParamSpec("followApplyRedirects", "boolean", "Whether to follow apply redirects for more details", default=False),
)


def build_indeed_input(
    position: str,
    country: str = "US",
    location: Optional[str] = None,
    max_items: int = 50,
    parse_company_details: bool = False,
    save_only_unique_items: bool = True,
    follow_apply_redirects: bool = False,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "position": position,
        "country": country,
        "maxItems": max_items,
        "parseCompanyDetails": parse_company_details,
        "saveOnlyUniqueItems": save_only_unique_items,
        "followApplyRedirects": follow_apply_redirects,
    }
    if location:
        payload["location"] = location
    return payload


def register_indeed_tools(
    registry: ToolRegistry,
    *,
    actor: Optional[ActorConfig] = None,
    client_factory: Optional[Callable[[], ActorClient]] = None,
) -> None:

    async def scrape_indeed_jobs(
        position: str,
        country: str = "US",
        location: Optional[str] = None,
        maxItems: int = 50,
        parseCompanyDetails: bool = False,
        saveOnlyUniqueItems: bool = True,
        followApplyRedirects: bool = False,
    ) -> str:
        """Run the Indeed actor and render its results."""
        cfg = actor or SETTINGS.indeed
        request = JobRequest(
            actor_id=cfg.actor_id,
            input=build_indeed_input(
                position,
                country,
                location,
                maxItems,
                parseCompanyDetails,
                saveOnlyUniqueItems,
                followApplyRedirects,
            ),
            mode=cfg.mode,
        )
        logger.info("Indeed search: q='%s', l='%s', country=%s, max=%s", position, location or "", country, maxItems)

        client = (client_factory or ActorClient.from_settings)()
        try:
            items = await client.run(request)
        finally:
            client.close()

        # Header falls back to the country when no location was given
        where = location or country
        listings = normalize_listings(items, INDEED_ALIASES, maxItems)
        return format_search_results("Indeed", position, where, len(items), listings)

    registry.register(
        ToolSpec(
            name="scrape_indeed_jobs",
            handler=scrape_indeed_jobs,
            params=INDEED_PARAMS,
            description="Search Indeed job postings by position, country and location.",
            error_prefix="Error scraping Indeed jobs",
        )
    )
