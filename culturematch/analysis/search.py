"""Glassdoor / LinkedIn culture snippets via the Google Custom Search JSON API."""
from __future__ import annotations

import requests

from culturematch.analysis.base import AnalysisError
from culturematch.analysis.static import tags_from_text
from culturematch.domain import company_name
from culturematch.log import get_logger
from culturematch.models import Insight
from culturematch.retry import is_client_error, retry

log = get_logger(__name__)

CSE_URL = "https://www.googleapis.com/customsearch/v1"

QUERIES: tuple[tuple[str, str], ...] = (
    ("glassdoor", "site:glassdoor.com {name} reviews culture"),
    ("linkedin", "site:linkedin.com/company {name} culture"),
)


class SearchAnalyzer:
    name = "search"

    def __init__(self, api_key: str, cse_id: str, *, timeout: float = 10, max_insights: int = 6) -> None:
        self.api_key = api_key
        self.cse_id = cse_id
        self.timeout = timeout
        self.max_insights = max_insights

    @retry(
        max_attempts=2, base_delay=1.0,
        retryable=(requests.RequestException, OSError), give_up=is_client_error,
    )
    def _fetch(self, query: str, num: int) -> list[dict]:
        r = requests.get(
            CSE_URL,
            params={"key": self.api_key, "cx": self.cse_id, "q": query, "num": num},
            timeout=self.timeout,
        )
        r.raise_for_status()
        items = r.json().get("items", [])
        if not isinstance(items, list):
            raise AnalysisError("Malformed search response: 'items' is not a list")
        return items

    def collect(self, domain: str) -> list[Insight]:
        name = company_name(domain)
        if not name:
            return []

        per_query = max(1, min(10, self.max_insights // len(QUERIES)))
        insights: list[Insight] = []
        seen: set[str] = set()

        for source, template in QUERIES:
            query = template.format(name=name)
            try:
                items = self._fetch(query, per_query)
            except Exception as exc:
                log.warning("Search query=%r error: %s", query, exc)
                continue
            for item in items:
                url = item.get("link", "")
                if not url or url in seen:
                    continue
                seen.add(url)
                insights.append(
                    Insight(
                        source=source,
                        title=item.get("title", ""),
                        snippet=" ".join((item.get("snippet") or "").split()),
                        url=url,
                    )
                )
            log.debug("Search query=%r returned %d item(s)", query, len(items))

        return insights[: self.max_insights]

    @staticmethod
    def tags_for(insights: list[Insight]) -> list[str]:
        text = " ".join(f"{i.title} {i.snippet}" for i in insights)
        return tags_from_text(text)
