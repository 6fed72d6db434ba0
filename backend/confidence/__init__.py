from .confidence_scorer import ConfidenceScorer
from .interval_scorer import ConfidenceIntervalScorer
from .review_scorer import HumanReviewScorer

__all__ = [
    "ConfidenceScorer",
    "ConfidenceIntervalScorer",
    "HumanReviewScorer",
]
