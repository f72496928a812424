from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, urlparse

from jobgpt.ai.types import TextGenerator
from jobgpt.schemas.jobs import JobSearchResult
from jobgpt.services.extraction import run_extraction
from jobgpt.services.prompts import build_job_search_prompt

logger = logging.getLogger(__name__)

JOB_SEARCH_BASE_URL = "https://www.linkedin.com/jobs/search/"
PLACEHOLDER_DOMAINS = ("example.com", "example.org", "example.net")

# Characters encodeURIComponent leaves untouched besides [A-Za-z0-9_.-~].
_URI_COMPONENT_SAFE = "!*'()"


def _encode(value: Any) -> str:
    if value is None:
        return ""
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def build_search_url(title: Any, location: Any) -> str:
    return f"{JOB_SEARCH_BASE_URL}?keywords={_encode(title)}&location={_encode(location)}"


def is_placeholder_url(url: Any) -> bool:
    if not isinstance(url, str) or not url.strip():
        return True
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return True
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        return True
    host = (parsed.hostname or "").lower()
    if not host:
        return True
    return any(host == domain or host.endswith("." + domain) for domain in PLACEHOLDER_DOMAINS)


def normalize_job_links(jobs: list[Any]) -> list[dict[str, Any]]:
    normalized: list[dict[str, Any]] = []
    for job in jobs:
        if not isinstance(job, dict):
            logger.info("job_search_entry_dropped type=%s", type(job).__name__)
            continue
        entry = dict(job)
        if is_placeholder_url(entry.get("url")):
            entry["url"] = build_search_url(entry.get("title"), entry.get("location"))
        normalized.append(entry)
    return normalized


def query_fallback(query: str) -> dict[str, Any]:
    return {
        "jobs": [
            {
                "title": f"{query} Position",
                "company": "Growing Startup",
                "location": "Remote",
                "salary": "$60,000 - $90,000",
                "description": "Exciting opportunity to grow your career in a dynamic environment.",
                "matchScore": 70,
                "matchReasons": ["Relevant to your search", "Remote flexibility"],
                "url": "",
            }
        ]
    }


def default_jobs(query: str) -> dict[str, Any]:
    return {
        "jobs": [
            {
                "title": "Software Engineer" if "Software" in query else "Professional",
                "company": "TechCorp Inc.",
                "location": "San Francisco, CA",
                "salary": "$80,000 - $120,000",
                "description": (
                    "Join our team and work on exciting projects with cutting-edge technology."
                ),
                "matchScore": 75,
                "matchReasons": [
                    "Matches your search query",
                    "Good growth opportunities",
                    "Competitive salary",
                ],
                "url": "",
            }
        ]
    }


async def search_jobs(client: TextGenerator, query: str) -> dict[str, Any]:
    result = await run_extraction(
        client,
        tool="search-jobs",
        prompt=build_job_search_prompt(query),
        model=JobSearchResult,
        on_missing=lambda _raw: query_fallback(query),
        on_invalid=lambda: default_jobs(query),
    )
    result["jobs"] = normalize_job_links(result["jobs"])
    return result
