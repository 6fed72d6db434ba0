from typing import Optional
from config import logger
from config.constants import SAMPLE_CLAIM
from exceptions import AnalysisInProgress
from models.analysis import AnalysisResult
from .analysis import EvidenceAnalyzer


class AnalysisSession:
    """
    State for a single UI instance: the current text, whether an analysis is
    in flight and the last result. The in-flight flag admits one analysis at
    a time.
    """

    def __init__(self, analyzer: EvidenceAnalyzer = None):
        self.analyzer = analyzer or EvidenceAnalyzer()
        self.input_text: str = ""
        self.is_analyzing: bool = False
        self.result: Optional[AnalysisResult] = None

    def set_input(self, text: str) -> None:
        self.input_text = text or ""

    def load_sample(self) -> None:
        self.input_text = SAMPLE_CLAIM

    @property
    def can_analyze(self) -> bool:
        return bool(self.input_text.strip()) and not self.is_analyzing

    async def run(self) -> Optional[AnalysisResult]:
        """
        Analyze the current input and store the result.
        Returns:
            The new result, or None when the input is blank
        Raises:
            AnalysisInProgress: if another run has not finished yet
        """
        if not self.input_text.strip():
            return None
        if self.is_analyzing:
            raise AnalysisInProgress()

        self.is_analyzing = True
        self.result = None
        try:
            self.result = await self.analyzer.analyze(self.input_text)
        finally:
            self.is_analyzing = False

        logger.debug("Session analysis finished: %s", self.result.verdict.classification)
        return self.result
