"""Clean user-entered company domains."""
from __future__ import annotations

import re
from urllib.parse import quote_plus

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*://")
_LINKEDIN_COMPANY = "linkedin.com/company"


def clean_domain(raw: str | None) -> str:
    """Lower-case, strip scheme, ``www.``, query string and trailing slashes.

    The path is kept so LinkedIn company pages stay recognizable.
    """
    d = (raw or "").strip().lower()
    d = _SCHEME_RE.sub("", d)
    if d.startswith("www."):
        d = d[4:]
    d = d.split("?", 1)[0].split("#", 1)[0]
    return d.rstrip("/")


def is_linkedin_company(domain: str) -> bool:
    return _LINKEDIN_COMPANY in domain


def company_name(domain: str) -> str:
    """Best guess at the company's name: the LinkedIn slug or the first host label."""
    d = clean_domain(domain)
    if is_linkedin_company(d):
        slug = d.split(_LINKEDIN_COMPANY, 1)[1].strip("/").split("/", 1)[0]
        return slug.replace("-", " ")
    host = d.split("/", 1)[0]
    return host.split(".", 1)[0]


def linkedin_search_url(domain: str) -> str:
    """Google search URL for the company's LinkedIn posts."""
    return "https://www.google.com/search?q=site:linkedin.com/company+" + quote_plus(company_name(domain))
