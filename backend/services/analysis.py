import asyncio
from datetime import datetime, timezone
from typing import Optional
from config import logger, get_settings
from config.constants import ANALYZER_CONFIG, AnalyzerConfig, KeywordRule
from confidence import ConfidenceScorer
from models.evidence import Credibility, Evidence, Stance
from models.analysis import AnalysisResult
from .synthesis import build_explanation


class EvidenceAnalyzer:
    """Keyword-driven mock fact-check. Makes no external calls."""

    def __init__(
        self,
        config: AnalyzerConfig = None,
        confidence_scorer: ConfidenceScorer = None,
        delay: Optional[float] = None
    ):
        self.config = config or ANALYZER_CONFIG
        self.confidence_scorer = confidence_scorer or ConfidenceScorer()
        self.delay = delay

    async def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze claim text and produce a verdict with supporting evidence.
        Args:
            text: Claim text; callers reject blank input before calling
        Returns:
            A freshly built AnalysisResult
        """
        delay = self.delay if self.delay is not None else get_settings().ANALYSIS_DELAY_SECONDS
        if delay > 0:
            await asyncio.sleep(delay)

        rule = self.config.find_rule(text.lower())
        if rule:
            classification = rule.classification
            score = rule.score
            evidence = [self._evidence_for_rule(rule)]
        else:
            classification = self.config.DEFAULT_CLASSIFICATION
            score = self.config.DEFAULT_SCORE
            evidence = []

        logger.info(f"Analysis for claim '{text[:50]}' classified as {classification} (score={score}).")

        return AnalysisResult(
            verdict=self.confidence_scorer.build_verdict(classification, score, len(evidence)),
            claims=[text[:self.config.MAX_CLAIM_LENGTH]],
            explanation=build_explanation(classification, evidence),
            evidence_details=evidence,
            processing_stages=list(self.config.PROCESSING_STAGES),
            search_powered=False,
            analysis_timestamp=datetime.now(timezone.utc),
        )

    @staticmethod
    def _evidence_for_rule(rule: KeywordRule) -> Evidence:
        return Evidence(
            title=rule.title,
            snippet=rule.snippet,
            link=rule.link,
            credibility=Credibility(
                is_credible=rule.is_credible,
                type=rule.source_type,
                domain=rule.domain,
            ),
            stance=Stance(rule.stance),
        )


_default_analyzer = EvidenceAnalyzer()

async def analyze(text: str) -> AnalysisResult:
    """Run the default analyzer on ``text``."""
    return await _default_analyzer.analyze(text)
