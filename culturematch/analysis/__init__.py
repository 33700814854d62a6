from .base import AnalysisError, CultureAnalyzer
from .llm import GROQ_BASE_URL, LLMAnalyzer
from .search import SearchAnalyzer
from .static import StaticAnalyzer, tags_from_text

from culturematch.log import get_logger

log = get_logger(__name__)

__all__ = [
    "AnalysisError", "CultureAnalyzer", "LLMAnalyzer", "SearchAnalyzer",
    "StaticAnalyzer", "tags_from_text", "get_analyzers", "get_search",
]


def get_analyzers(settings: dict, env_getter) -> list[CultureAnalyzer]:
    """Summary analyzers in fallback order; the static analyzer is always last."""
    cfg = settings.get("analysis") or {}
    timeout = float(cfg.get("request_timeout", 10))
    analyzers: list[CultureAnalyzer] = []

    if cfg.get("use_llm", True):
        if env_getter("GROQ_API_KEY"):
            analyzers.append(LLMAnalyzer(
                env_getter("GROQ_API_KEY"),
                env_getter("GROQ_LLM_MODEL") or "llama-3.3-70b-versatile",
                base_url=GROQ_BASE_URL,
                timeout=timeout,
                homepage_chars=int(cfg.get("homepage_chars", 5000)),
            ))
            log.debug("Registered analyzer: LLM (Groq)")
        elif env_getter("OPENAI_API_KEY"):
            analyzers.append(LLMAnalyzer(
                env_getter("OPENAI_API_KEY"),
                env_getter("OPENAI_MODEL") or "gpt-4o-mini",
                timeout=timeout,
                homepage_chars=int(cfg.get("homepage_chars", 5000)),
            ))
            log.debug("Registered analyzer: LLM (OpenAI)")

    analyzers.append(StaticAnalyzer(seed=cfg.get("seed")))
    return analyzers


def get_search(settings: dict, env_getter) -> SearchAnalyzer | None:
    cfg = settings.get("analysis") or {}
    if not cfg.get("use_search", True):
        return None
    if not (env_getter("GOOGLE_API_KEY") and env_getter("GOOGLE_CSE_ID")):
        return None
    log.debug("Registered search: Google Custom Search")
    return SearchAnalyzer(
        env_getter("GOOGLE_API_KEY"),
        env_getter("GOOGLE_CSE_ID"),
        timeout=float(cfg.get("request_timeout", 10)),
        max_insights=int(cfg.get("max_insights", 6)),
    )
