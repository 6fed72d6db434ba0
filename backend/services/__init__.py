from .analysis import EvidenceAnalyzer, analyze
from .synthesis import build_explanation
from .session import AnalysisSession
from .presentation import present_result, ResultView, EvidenceRow

__all__ = [
    "EvidenceAnalyzer",
    "analyze",
    "build_explanation",
    "AnalysisSession",
    "present_result",
    "ResultView",
    "EvidenceRow",
]
