from config import logger
from models.verdicts import Verdict, ClassificationType
from .interval_scorer import ConfidenceIntervalScorer
from .review_scorer import HumanReviewScorer


class ConfidenceScorer:
    def __init__(
        self,
        interval_scorer: ConfidenceIntervalScorer = None,
        review_scorer: HumanReviewScorer = None
    ):
        self.interval_scorer = interval_scorer or ConfidenceIntervalScorer()
        self.review_scorer = review_scorer or HumanReviewScorer()
    
    def build_verdict(
        self,
        classification: ClassificationType,
        score: float,
        evidence_count: int
    ) -> Verdict:
        interval = self.interval_scorer.score(score)
        requires_review = self.review_scorer.requires_review(score)

        logger.debug(
            f"Verdict calculation: {classification} score={score} "
            f"interval={interval} evidence={evidence_count} review={requires_review}"
        )

        return Verdict(
            classification=classification,
            score=score,
            uncertainty_score=self.get_uncertainty(score),
            confidence_interval=interval,
            conflicting_evidence=False,
            evidence_count=evidence_count,
            requires_human_review=requires_review,
        )
    
    @staticmethod
    def get_uncertainty(score: float) -> float:
        return 1 - score
