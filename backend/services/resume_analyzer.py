"""Score composer: combines keyword, section and formatting signals.

Pipeline:
1. Keyword extraction on the resume and (optionally) the job description
2. Section detection on the resume
3. Formatting audit on the resume
4. Six independently rounded sub-scores, summed into the overall score
5. Rule-ordered recommendations

The analysis is a pure function of its two text inputs.
"""

import logging
import math
import re

from models.responses import (
    AnalysisResult,
    KeywordAnalysis,
    Recommendation,
    ScoreBreakdown,
)
from services import formatting_auditor, keyword_extractor
from services.section_parser import SECTION_KINDS, detect_sections

logger = logging.getLogger(__name__)

# Sub-score ceilings
MAX_KEYWORD_MATCH = 35
MAX_STRUCTURE = 20
MAX_FORMATTING = 15
MAX_IMPACT = 10

# Keyword score when there is no job description to compare against
NO_JD_KEYWORD_SCORE = 25
FORMATTING_PENALTY = 3
IMPACT_PER_METRIC = 2

READABILITY_MIN_LENGTH = 800
READABILITY_MAX_LENGTH = 2000
RELEVANCE_MIN_KEYWORDS = 5
FULL_CREDIT = 10
PARTIAL_CREDIT = 5

MAX_RECOMMENDATIONS = 5

# Quantified achievements: "40%", "$2M", "10+"
_METRICS_RE = re.compile(r"\d+%|\$\d+|\d+\+", re.ASCII)

# (minimum score, label), highest first
RATING_BANDS: tuple[tuple[int, str], ...] = (
    (80, "Excellent"),
    (60, "Good"),
    (40, "Fair"),
)


class EmptyInputError(ValueError):
    """Raised when the resume text is empty or whitespace only."""


def _round(value: float) -> int:
    """Round half up, so 10.5 -> 11 rather than Python's banker's 10."""
    return math.floor(value + 0.5)


def rate_score(score: int) -> str:
    """Map an overall score onto a display label."""
    for minimum, label in RATING_BANDS:
        if score >= minimum:
            return label
    return "Poor"


def _count_metrics(text: str) -> int:
    return len(_METRICS_RE.findall(text))


def _compute_breakdown(
    resume_text: str,
    resume_keywords: list[str],
    jd_keywords: list[str],
    matched: list[str],
    found_sections: int,
    issue_count: int,
) -> ScoreBreakdown:
    if jd_keywords:
        keyword_match = _round(len(matched) / len(jd_keywords) * MAX_KEYWORD_MATCH)
    else:
        keyword_match = NO_JD_KEYWORD_SCORE

    length = len(resume_text)
    readability = (
        FULL_CREDIT
        if READABILITY_MIN_LENGTH <= length < READABILITY_MAX_LENGTH
        else PARTIAL_CREDIT
    )
    relevance = (
        FULL_CREDIT if len(resume_keywords) > RELEVANCE_MIN_KEYWORDS else PARTIAL_CREDIT
    )

    return ScoreBreakdown(
        keyword_match=keyword_match,
        structure=_round(found_sections / len(SECTION_KINDS) * MAX_STRUCTURE),
        formatting=max(0, _round(MAX_FORMATTING - FORMATTING_PENALTY * issue_count)),
        impact=min(MAX_IMPACT, _round(IMPACT_PER_METRIC * _count_metrics(resume_text))),
        readability=readability,
        relevance=relevance,
    )


def _build_recommendations(
    breakdown: ScoreBreakdown,
    missing_sections: tuple[str, ...],
    formatting_issues: list[str],
) -> list[Recommendation]:
    """Evaluate recommendation rules in fixed order.

    The list keeps generation order rather than sorting by impact, and the
    formatting rule only surfaces the first defect.
    """
    recommendations = []
    if breakdown.keyword_match < 20:
        recommendations.append(Recommendation(
            category="Keywords",
            issue="Low keyword match with job description",
            fix="Add more relevant skills and technologies from the job posting",
            impact=15,
        ))
    if len(missing_sections) > 2:
        recommendations.append(Recommendation(
            category="Structure",
            issue="Missing key resume sections",
            fix=f"Add missing sections: {', '.join(missing_sections)}",
            impact=10,
        ))
    if formatting_issues:
        recommendations.append(Recommendation(
            category="Formatting",
            issue="ATS parsing issues detected",
            fix=formatting_issues[0],
            impact=8,
        ))
    return recommendations[:MAX_RECOMMENDATIONS]


def analyze(resume_text: str, job_description: str | None = None) -> AnalysisResult:
    """Score a resume, optionally against a job description.

    Raises EmptyInputError when resume_text is blank. A blank job
    description is treated the same as none.
    """
    if not resume_text or not resume_text.strip():
        raise EmptyInputError("Resume text is empty")

    resume_keywords = keyword_extractor.extract_keywords(resume_text)
    if job_description and job_description.strip():
        jd_keywords = keyword_extractor.extract_keywords(job_description)
    else:
        jd_keywords = []

    matched, missing = keyword_extractor.match_keywords(resume_keywords, jd_keywords)
    hard_skills, soft_skills = keyword_extractor.split_by_category(resume_keywords)

    sections = detect_sections(resume_text)
    formatting_issues = formatting_auditor.audit_formatting(resume_text)

    breakdown = _compute_breakdown(
        resume_text,
        resume_keywords,
        jd_keywords,
        matched,
        len(sections.found),
        len(formatting_issues),
    )
    overall_score = breakdown.total
    recommendations = _build_recommendations(
        breakdown, sections.missing, formatting_issues
    )

    logger.debug(
        "Resume analyzed: score=%d keywords=%d/%d sections=%d issues=%d",
        overall_score,
        len(matched),
        len(jd_keywords),
        len(sections.found),
        len(formatting_issues),
    )

    return AnalysisResult(
        overall_score=overall_score,
        rating=rate_score(overall_score),
        breakdown=breakdown,
        recommendations=tuple(recommendations),
        keyword_analysis=KeywordAnalysis(
            matched=tuple(matched),
            missing=tuple(missing),
            hard_skills=tuple(hard_skills),
            soft_skills=tuple(soft_skills),
        ),
        sections=sections,
        formatting_issues=tuple(formatting_issues),
    )
