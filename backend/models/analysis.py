from datetime import datetime
from typing import List, Sequence
from pydantic import Field, model_validator
from .evidence import Evidence, WireModel
from .verdicts import Verdict

class EvidenceBreakdown(WireModel):
    supporting_evidence: int = 0
    contradicting_evidence: int = 0
    credible_sources: int = 0
    total_sources: int = 0
    credibility_ratio: float = 0.0

    @classmethod
    def from_evidence(cls, evidence: Sequence[Evidence]) -> "EvidenceBreakdown":
        total = len(evidence)
        credible = sum(1 for e in evidence if e.credibility.is_credible)
        return cls(
            supporting_evidence=sum(1 for e in evidence if e.stance.supports),
            contradicting_evidence=sum(1 for e in evidence if e.stance.contradicts),
            credible_sources=credible,
            total_sources=total,
            credibility_ratio=credible / total if total > 0 else 0.0,
        )

class Explanation(WireModel):
    summary: str
    evidence_breakdown: EvidenceBreakdown
    sources_found: List[str] = Field(default_factory=list)

class AnalysisResult(WireModel):
    """Complete output of one analysis run."""
    verdict: Verdict
    claims: List[str] = Field(default_factory=list, max_length=1)
    explanation: Explanation
    evidence_details: List[Evidence] = Field(default_factory=list)
    processing_stages: List[str] = Field(default_factory=list)
    search_powered: bool = False
    analysis_timestamp: datetime

    @model_validator(mode="after")
    def check_derived_views(self) -> "AnalysisResult":
        expected = EvidenceBreakdown.from_evidence(self.evidence_details)
        if self.explanation.evidence_breakdown != expected:
            raise ValueError("evidence breakdown does not match evidence details")
        if self.verdict.evidence_count != len(self.evidence_details):
            raise ValueError("verdict evidence count does not match evidence details")
        return self
