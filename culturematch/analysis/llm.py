"""Summarize a company's homepage into culture tags with an LLM (Groq or OpenAI)."""
from __future__ import annotations

import json
from typing import Any

import requests
from bs4 import BeautifulSoup

from culturematch.analysis.base import AnalysisError, CultureAnalyzer
from culturematch.analysis.static import tags_from_text
from culturematch.domain import clean_domain
from culturematch.log import get_logger
from culturematch.models import CompanySummary
from culturematch.retry import is_client_error, retry

log = get_logger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
USER_AGENT = "Mozilla/5.0 (compatible; CultureMatch/1.0)"

SYSTEM_PROMPT = "You are a cultural analyst for company websites."

_USER_PROMPT = """\
Based on the following homepage text, identify cultural values or signals \
(e.g., DEI, flexibility, climate focus, hybrid work, inclusion, purpose, innovation, etc.).
Return ONLY a JSON object with these keys:

{{
  "summary": "2-3 sentence summary of the company's culture",
  "tags": ["short-hyphenated-tag", "another-tag"]
}}

Prefer tags such as remote-friendly, flexible-hours, work-life-balance, flat-hierarchy,
transparent-communication, diverse-workforce, inclusive-environment, women-leadership,
professional-growth, learning-culture, micro-managed, long-hours, top-down.

Text:
{text}
"""


@retry(
    max_attempts=2, base_delay=1.0,
    retryable=(requests.RequestException,), give_up=is_client_error,
)
def fetch_homepage_text(domain: str, timeout: float = 10) -> str:
    """Visible text of ``https://<domain>`` with scripts and styles removed."""
    r = requests.get(
        f"https://{clean_domain(domain)}",
        headers={"User-Agent": USER_AGENT},
        timeout=timeout,
    )
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")
    for node in soup(["script", "style", "noscript", "template"]):
        node.decompose()
    body = soup.body or soup
    return " ".join(body.get_text(separator=" ").split())


@retry(max_attempts=2, base_delay=2.0, retryable=(Exception,), give_up=is_client_error)
def _call_llm(api_key: str, model: str, prompt: str, base_url: str | None, timeout: float) -> str:
    from openai import OpenAI

    client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)
    r = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        temperature=0.4,
        max_tokens=400,
    )
    return (r.choices[0].message.content or "").strip()


def parse_reply(raw: str) -> CompanySummary:
    """Turn the model's reply into a summary.

    A reply without a JSON object is kept verbatim as the summary, with tags
    picked out of its wording.
    """
    raw = (raw or "").strip()
    if not raw:
        raise AnalysisError("LLM returned an empty reply")

    data: Any = None
    start = raw.find("{")
    end = raw.rfind("}") + 1
    if start != -1 and end > start:
        try:
            data = json.loads(raw[start:end])
        except ValueError:
            data = None

    if not isinstance(data, dict):
        log.debug("LLM reply was not JSON, keeping it as plain text")
        return CompanySummary(raw, tags_from_text(raw), "llm")

    summary = str(data.get("summary") or "").strip()
    if not summary:
        raise AnalysisError("LLM reply has no summary")
    tags = data.get("tags") or []
    if isinstance(tags, str):
        tags = tags.split(",")
    elif not isinstance(tags, list):
        tags = [tags]
    return CompanySummary(summary, [str(t).strip() for t in tags if str(t).strip()], "llm")


class LLMAnalyzer(CultureAnalyzer):
    name = "llm"

    def __init__(
        self,
        api_key: str,
        model: str,
        *,
        base_url: str | None = None,
        timeout: float = 10,
        homepage_chars: int = 5000,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.homepage_chars = homepage_chars

    def analyze(self, domain: str) -> CompanySummary:
        text = fetch_homepage_text(domain, timeout=self.timeout)
        if not text:
            raise AnalysisError(f"No readable text on {domain}")
        prompt = _USER_PROMPT.format(text=text[: self.homepage_chars])
        raw = _call_llm(self.api_key, self.model, prompt, self.base_url, self.timeout)
        result = parse_reply(raw)
        log.info("LLM analysis for %s → %d tag(s)", domain, len(result.tags))
        return result
