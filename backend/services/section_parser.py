"""Resume section detection.

This is a heuristic, not real segmentation: a section counts as present
when its keyword appears anywhere in the text, with no regard to headers
or position.
"""

import re

from models.responses import SectionReport

# Canonical section kinds, in reporting order
SECTION_KINDS: tuple[str, ...] = (
    "contact",
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
)

SECTION_PATTERNS: dict[str, list[str]] = {
    "contact": [r"email", r"phone", r"linkedin", r"github"],
    "summary": [r"summary", r"objective", r"profile"],
    "experience": [r"experience", r"employment", r"work history"],
    "education": [r"education", r"degree", r"university", r"college"],
    "skills": [r"skills", r"technologies", r"competencies"],
    "projects": [r"projects", r"portfolio"],
}

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(rf"(?:{combined})", re.IGNORECASE)


def detect_sections(text: str) -> SectionReport:
    """Report which canonical sections appear in the resume text."""
    found = tuple(kind for kind in SECTION_KINDS if _COMPILED[kind].search(text))
    missing = tuple(kind for kind in SECTION_KINDS if kind not in found)
    return SectionReport(found=found, missing=missing)
