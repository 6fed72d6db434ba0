from config.constants import ANALYZER_CONFIG


class HumanReviewScorer:
    """Flags verdicts whose score is too low to publish without a reviewer."""

    def __init__(self, threshold: float = None):
        self.threshold = ANALYZER_CONFIG.HUMAN_REVIEW_THRESHOLD if threshold is None else threshold

    def requires_review(self, score: float) -> bool:
        return score < self.threshold
