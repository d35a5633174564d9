from pydantic import BaseModel, ConfigDict, Field


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword_match: int = Field(0, ge=0, le=35)
    structure: int = Field(0, ge=0, le=20)
    formatting: int = Field(0, ge=0, le=15)
    impact: int = Field(0, ge=0, le=10)
    readability: int = Field(0, ge=0, le=10)
    relevance: int = Field(0, ge=0, le=10)

    @property
    def total(self) -> int:
        return (
            self.keyword_match
            + self.structure
            + self.formatting
            + self.impact
            + self.readability
            + self.relevance
        )


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    issue: str
    fix: str
    impact: int


class KeywordAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    hard_skills: tuple[str, ...] = ()
    soft_skills: tuple[str, ...] = ()


class SectionReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    found: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(0, ge=0, le=100)
    rating: str = ""
    breakdown: ScoreBreakdown = ScoreBreakdown()
    recommendations: tuple[Recommendation, ...] = Field((), max_length=5)
    keyword_analysis: KeywordAnalysis = KeywordAnalysis()
    sections: SectionReport = SectionReport()
    formatting_issues: tuple[str, ...] = ()
