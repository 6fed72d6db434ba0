from dataclasses import dataclass, field
from typing import Optional, Tuple

@dataclass(frozen=True)
class KeywordRule:
    """A keyword trigger and the canned evidence it produces."""
    keywords: Tuple[str, ...]
    classification: str
    score: float
    stance: str
    title: str
    snippet: str
    link: str
    domain: str
    source_type: str = "authoritative"
    is_credible: bool = True

    def matches(self, text_lower: str) -> bool:
        return any(keyword in text_lower for keyword in self.keywords)

@dataclass(frozen=True)
class AnalyzerConfig:
    DEFAULT_CLASSIFICATION: str = "insufficient_evidence"
    DEFAULT_SCORE: float = 0.5

    CONFIDENCE_HALF_WIDTH: float = 0.1
    HUMAN_REVIEW_THRESHOLD: float = 0.6
    MAX_CLAIM_LENGTH: int = 200

    PROCESSING_STAGES: Tuple[str, ...] = ("Claim Extraction", "Local Analysis")

    # order matters: the first matching rule wins
    RULES: Tuple[KeywordRule, ...] = field(default_factory=lambda: (
        KeywordRule(
            keywords=("nasa", "according to"),
            classification="likely_true",
            score=0.78,
            stance="supports",
            title="Authoritative source",
            snippet="NASA reports warming trends.",
            link="https://nasa.gov",
            domain="nasa.gov",
        ),
        KeywordRule(
            keywords=("bleach", "cure"),
            classification="verified_false",
            score=0.92,
            stance="contradicts",
            title="Debunking study",
            snippet="Health authorities warn against bleach.",
            link="https://cdc.gov",
            domain="cdc.gov",
        ),
    ))

    def find_rule(self, text_lower: str) -> Optional[KeywordRule]:
        for rule in self.RULES:
            if rule.matches(text_lower):
                return rule
        return None

@dataclass(frozen=True)
class SummaryTemplates:
    INSUFFICIENT: str = "Not enough evidence."
    FALSE: str = "Strongly contradicted by health authorities."
    TRUE: str = "Supported by authoritative sources."

    def for_classification(self, classification: str) -> str:
        if classification == "insufficient_evidence":
            return self.INSUFFICIENT
        elif classification == "verified_false":
            return self.FALSE
        else:
            return self.TRUE

@dataclass(frozen=True)
class SearchConfig:
    DEFAULT_NUM_RESULTS: int = 5
    MISSING_KEY_MESSAGE: str = "SERPER_API_KEY not configured on server."
    MISSING_QUERY_MESSAGE: str = "Missing query"
    MISSING_TEXT_MESSAGE: str = "Missing text"

SAMPLE_CLAIM = (
    "According to NASA, global temperatures have increased by 1.1 degrees "
    "Celsius since pre-industrial times."
)

ANALYZER_CONFIG = AnalyzerConfig()
SUMMARY_TEMPLATES = SummaryTemplates()
SEARCH_CONFIG = SearchConfig()
