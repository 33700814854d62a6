"""
Culture enrichment for one company.

Runs: clean domain → summary (LLM, else static) → search insights → match score.
Downstream failures fall back to static content and are never raised.
"""
from __future__ import annotations

from typing import Any, Callable

from culturematch.analysis import StaticAnalyzer, get_analyzers, get_search
from culturematch.config import get_env, load_settings
from culturematch.domain import clean_domain, is_linkedin_company
from culturematch.log import get_logger
from culturematch.models import CompanySummary, EnrichmentResult, Insight
from culturematch.scorer import compute_match
from culturematch.taxonomy import normalize_tags

log = get_logger(__name__)


class MissingDomainError(ValueError):
    pass


def _summarize(domain: str, analyzers: list) -> CompanySummary:
    if is_linkedin_company(domain):
        analyzers = [a for a in analyzers if isinstance(a, StaticAnalyzer)] or [StaticAnalyzer()]

    for analyzer in analyzers:
        try:
            return analyzer.analyze(domain)
        except Exception as exc:
            log.warning("[%s] analysis failed for %s (%s), falling back", analyzer.name, domain, exc)
    return StaticAnalyzer().analyze(domain)


def _collect_insights(domain: str, search) -> list[Insight]:
    if search is None or is_linkedin_company(domain):
        return []
    try:
        return search.collect(domain)
    except Exception as exc:
        log.warning("Search failed for %s (%s), continuing without insights", domain, exc)
        return []


def enrich(
    domain: str | None,
    preferences: Any = None,
    *,
    settings: dict[str, Any] | None = None,
    env_getter: Callable[[str], str] = get_env,
) -> EnrichmentResult:
    cleaned = clean_domain(domain)
    if not cleaned:
        raise MissingDomainError("Missing domain")

    settings = settings if settings is not None else load_settings()
    analyzers = get_analyzers(settings, env_getter)
    search = get_search(settings, env_getter)

    summary = _summarize(cleaned, analyzers)
    insights = _collect_insights(cleaned, search)
    if insights:
        known = set(normalize_tags(summary.tags))
        summary.tags.extend(t for t in search.tags_for(insights) if t not in known)

    match = compute_match(summary.tags, preferences)
    log.info(
        "Enriched %s — source=%s, tags=%d, insights=%d, score=%d%%",
        cleaned, summary.source, len(summary.tags), len(insights), match.score,
    )
    return EnrichmentResult(domain=cleaned, summary=summary, match=match, insights=insights)
