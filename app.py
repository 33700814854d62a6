"""Streamlit UI for CultureMatch."""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from culturematch.config import clear_preferences, load_preferences, save_preferences
from culturematch.domain import linkedin_search_url
from culturematch.log import get_logger
from culturematch.preferences import (
    CATEGORY_TITLES,
    IMPORTANCE_LABELS,
    PREFERENCE_FIELDS,
    empty_sliders,
    to_wire_format,
)
from culturematch.service import MissingDomainError, enrich

log = get_logger(__name__)

_CSS = """
<style>
.tag-pill {
    display: inline-block; margin: 0 0.35rem 0.35rem 0;
    padding: 0.15rem 0.6rem; border-radius: 999px;
    background: rgba(74,144,217,0.12); font-size: 0.85rem;
}
.score {
    font-size: 2.6rem; font-weight: 800; color: #27ae60; text-align: center;
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _saved_sliders() -> dict[str, dict[str, int]]:
    """Saved selections merged over zeroed defaults, clamped to 0–3."""
    sliders = empty_sliders()
    saved = load_preferences() or {}
    for category, fields in sliders.items():
        stored = saved.get(category)
        if not isinstance(stored, dict):
            continue
        for name in fields:
            value = stored.get(name)
            if isinstance(value, int) and not isinstance(value, bool):
                fields[name] = min(max(value, 0), len(IMPORTANCE_LABELS) - 1)
    return sliders


def _init_state() -> None:
    if "sliders" not in st.session_state:
        st.session_state["sliders"] = _saved_sliders()
        st.session_state["step"] = "analysis" if load_preferences() else "preferences"
    st.session_state.setdefault("result", None)


def _reset() -> None:
    clear_preferences()
    for key in [k for k in st.session_state if "." in str(k)]:
        del st.session_state[key]
    st.session_state["sliders"] = empty_sliders()
    st.session_state["result"] = None
    st.session_state["step"] = "preferences"


# ── Sections ─────────────────────────────────────────────────────────────


def _preference_sliders() -> None:
    st.subheader("Step 1 — Your Preferences")
    sliders = st.session_state["sliders"]
    cols = st.columns(3)
    for i, (category, fields) in enumerate(PREFERENCE_FIELDS.items()):
        with cols[i % 3]:
            st.markdown(f"**{CATEGORY_TITLES[category]}**")
            for name, label in fields.items():
                sliders[category][name] = st.select_slider(
                    label,
                    options=list(range(len(IMPORTANCE_LABELS))),
                    value=sliders[category][name],
                    format_func=lambda v: IMPORTANCE_LABELS[v],
                    key=f"{category}.{name}",
                )
    save_preferences(sliders)

    if st.button("Next: Get Match Score", type="primary", use_container_width=True):
        st.session_state["step"] = "analysis"
        st.rerun()


def _analysis_form() -> None:
    st.subheader("Step 2 — Get Your Match Score")
    with st.form("enrich"):
        domain = st.text_input(
            "Company domain",
            placeholder="e.g. acme.org or linkedin.com/company/acme",
        )
        submitted = st.form_submit_button("Get Match Score", type="primary", use_container_width=True)

    c1, c2 = st.columns(2)
    if c1.button("Edit preferences", use_container_width=True):
        st.session_state["step"] = "preferences"
        st.rerun()
    if c2.button("Reset all", use_container_width=True):
        _reset()
        st.rerun()

    if submitted:
        with st.spinner("Analyzing…"):
            try:
                result = enrich(domain, to_wire_format(st.session_state["sliders"]))
                st.session_state["result"] = result.to_dict()
            except MissingDomainError:
                st.error("Please enter a company domain.")
            except Exception as exc:
                log.exception("Enrichment failed")
                st.error(f"Could not enrich company data ({exc}). Please try again.")


def _results() -> None:
    result = st.session_state.get("result")
    if not result:
        return
    st.divider()
    st.subheader(f"Results for {result['domain']}")
    st.markdown(f'<div class="score">{result["match"]["score"]}%</div>', unsafe_allow_html=True)

    st.markdown("**Key insights**")
    for reason in result["match"]["reasons"]:
        st.markdown(f"- {reason}")

    st.markdown("**Culture summary**")
    st.write(result["summary"]["summary"])
    tags = result["summary"]["tags"]
    if tags:
        pills = "".join(f'<span class="tag-pill">#{t}</span>' for t in tags)
        st.markdown(pills, unsafe_allow_html=True)

    insights = result.get("culturalInsights") or []
    if insights:
        with st.expander(f"What people say online ({len(insights)})"):
            for item in insights:
                st.markdown(f"**[{item['title']}]({item['url']})** · {item['source']}")
                st.caption(item["snippet"])

    st.link_button("🔍 View LinkedIn posts via Google", linkedin_search_url(result["domain"]))


# ── Main ─────────────────────────────────────────────────────────────────

st.set_page_config(page_title="CultureMatch", page_icon="🤝", layout="wide")
st.markdown(_CSS, unsafe_allow_html=True)
st.title("CultureMatch")
st.caption("Matching your values with the organization culture.")

_init_state()
if st.session_state["step"] == "preferences":
    _preference_sliders()
else:
    _analysis_form()
    _results()
