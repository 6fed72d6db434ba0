from .evidence import (
    Stance,
    Credibility,
    Evidence,
)
from .verdicts import (
    ClassificationType,
    Verdict,
)
from .analysis import (
    EvidenceBreakdown,
    Explanation,
    AnalysisResult,
)
from .requests import (
    SearchRequest,
    AnalyzeRequest,
)

__all__ = [
    "Stance",
    "Credibility",
    "Evidence",

    "ClassificationType",
    "Verdict",

    "EvidenceBreakdown",
    "Explanation",
    "AnalysisResult",

    "SearchRequest",
    "AnalyzeRequest",
]
