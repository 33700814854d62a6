"""Data models for company analysis and match results."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CompanySummary:
    summary: str
    tags: list[str] = field(default_factory=list)
    source: str = "static"

    def to_dict(self) -> dict[str, Any]:
        return {"summary": self.summary, "tags": list(self.tags)}


@dataclass
class Insight:
    source: str
    title: str
    snippet: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {
            "source": self.source,
            "title": self.title,
            "snippet": self.snippet,
            "url": self.url,
        }


@dataclass
class MatchResult:
    score: int
    reasons: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "reasons": list(self.reasons)}


@dataclass
class EnrichmentResult:
    domain: str
    summary: CompanySummary
    match: MatchResult
    insights: list[Insight] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "domain": self.domain,
            "summary": self.summary.to_dict(),
        }
        if self.insights:
            payload["culturalInsights"] = [i.to_dict() for i in self.insights]
        payload["match"] = self.match.to_dict()
        return payload
