from typing import Tuple
from config.constants import ANALYZER_CONFIG


class ConfidenceIntervalScorer:
    """Symmetric interval around a verdict score, clamped to [0, 1]."""
    
    def __init__(self, half_width: float = None):
        """
        Initialize interval scorer.
        Args:
            half_width: Distance from the score to each bound (default: 0.1)
        """
        self.half_width = ANALYZER_CONFIG.CONFIDENCE_HALF_WIDTH if half_width is None else half_width
    
    def score(self, score: float) -> Tuple[float, float]:
        """
        Calculate the confidence interval for a score.
        Args:
            score: Verdict score between 0.0 and 1.0
        Returns:
            (lower, upper) bounds
        """
        return (
            max(0.0, score - self.half_width),
            min(1.0, score + self.half_width),
        )
