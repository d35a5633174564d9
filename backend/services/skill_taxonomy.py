"""Fixed skill vocabulary shared by the keyword extractor and the analyzer."""

from typing import Literal, NamedTuple

SkillCategory = Literal["hard", "soft"]


class KnownSkill(NamedTuple):
    term: str
    category: SkillCategory


# Order matters: extraction results follow this enumeration.
KNOWN_SKILLS: tuple[KnownSkill, ...] = (
    KnownSkill("javascript", "hard"),
    KnownSkill("python", "hard"),
    KnownSkill("java", "hard"),
    KnownSkill("react", "hard"),
    KnownSkill("node.js", "hard"),
    KnownSkill("sql", "hard"),
    KnownSkill("html", "hard"),
    KnownSkill("css", "hard"),
    KnownSkill("leadership", "soft"),
    KnownSkill("communication", "soft"),
    KnownSkill("teamwork", "soft"),
    KnownSkill("problem-solving", "soft"),
    KnownSkill("analytical", "soft"),
    KnownSkill("project management", "hard"),
    KnownSkill("agile", "hard"),
    KnownSkill("scrum", "hard"),
    KnownSkill("git", "hard"),
    KnownSkill("aws", "hard"),
    KnownSkill("docker", "hard"),
    KnownSkill("kubernetes", "hard"),
)

SKILL_TERMS: tuple[str, ...] = tuple(skill.term for skill in KNOWN_SKILLS)

HARD_SKILLS: frozenset[str] = frozenset(
    skill.term for skill in KNOWN_SKILLS if skill.category == "hard"
)
SOFT_SKILLS: frozenset[str] = frozenset(
    skill.term for skill in KNOWN_SKILLS if skill.category == "soft"
)


def category_of(term: str) -> SkillCategory | None:
    """Return the category of a known skill term, or None if unknown."""
    if term in HARD_SKILLS:
        return "hard"
    if term in SOFT_SKILLS:
        return "soft"
    return None
