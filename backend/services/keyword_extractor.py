"""Keyword extraction and matching for resume-JD analysis.

Matching is deliberately permissive: a skill counts as present when any
word token of the text contains the skill's compacted form, so variants
like "ReactJS" or "Dockerized" still register. The same rule means
"javascript" also yields "java"; match rates depend on that.
"""

import logging
import re
from collections.abc import Iterable

from services.skill_taxonomy import KNOWN_SKILLS, SKILL_TERMS, category_of

logger = logging.getLogger(__name__)

MAX_MISSING_KEYWORDS = 10

_TOKEN_RE = re.compile(r"\b\w+\b", re.ASCII)
_COMPACT_RE = re.compile(r"[.\s]")

# "node.js" -> "nodejs", "project management" -> "projectmanagement".
# Hyphens are kept, so "problem-solving" never matches a word token.
_COMPACT_FORMS: tuple[tuple[str, str], ...] = tuple(
    (skill.term, _COMPACT_RE.sub("", skill.term)) for skill in KNOWN_SKILLS
)


def tokenize(text: str) -> list[str]:
    """Split text into lowercase alphanumeric word tokens."""
    if not text:
        return []
    return _TOKEN_RE.findall(text.lower())


def extract_keywords(text: str) -> list[str]:
    """Return the known skills present in text, in taxonomy order."""
    if not isinstance(text, str):
        return []
    # Substring containment only depends on distinct tokens.
    tokens = set(tokenize(text))
    if not tokens:
        return []
    return [
        term
        for term, compact in _COMPACT_FORMS
        if any(compact in token for token in tokens)
    ]


def match_keywords(
    resume_keywords: Iterable[str], job_keywords: Iterable[str]
) -> tuple[list[str], list[str]]:
    """Compare resume keywords with job description keywords.

    Returns (matched, missing). Both follow taxonomy order; missing is
    capped at MAX_MISSING_KEYWORDS.
    """
    resume_set = set(resume_keywords)
    job_set = set(job_keywords)
    matched = [kw for kw in SKILL_TERMS if kw in resume_set and kw in job_set]
    missing = [kw for kw in SKILL_TERMS if kw in job_set and kw not in resume_set]
    return matched, missing[:MAX_MISSING_KEYWORDS]


def split_by_category(keywords: Iterable[str]) -> tuple[list[str], list[str]]:
    """Partition keywords into (hard_skills, soft_skills), preserving order."""
    hard: list[str] = []
    soft: list[str] = []
    for kw in keywords:
        category = category_of(kw)
        if category == "hard":
            hard.append(kw)
        elif category == "soft":
            soft.append(kw)
        else:
            logger.debug("Ignoring unknown keyword: %s", kw)
    return hard, soft
