# SPDX-License-Identifier: Apache-2.0
"""
Job listing normalization and text rendering shared by the scraper tools.
"""
__all__ = [
    "JobListing",
    "FieldAliases",
    "LINKEDIN_ALIASES",
    "INDEED_ALIASES",
    "normalize_listings",
    "format_search_results",
    "format_no_results",
]
from .normalize import JobListing, FieldAliases, LINKEDIN_ALIASES, INDEED_ALIASES, normalize_listings
from .formatting import format_search_results, format_no_results
