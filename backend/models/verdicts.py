from typing import Literal, Tuple
from pydantic import Field
from .evidence import WireModel

ClassificationType = Literal["likely_true", "verified_false", "insufficient_evidence"]

class Verdict(WireModel):
    """Categorical verdict plus the figures derived from its score."""
    classification: ClassificationType
    score: float = Field(..., ge=0.0, le=1.0)
    uncertainty_score: float
    confidence_interval: Tuple[float, float]
    conflicting_evidence: bool = False
    evidence_count: int = Field(..., ge=0)
    requires_human_review: bool
