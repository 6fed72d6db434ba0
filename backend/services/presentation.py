from typing import List
from pydantic import BaseModel
from models.analysis import AnalysisResult
from models.evidence import Evidence


class EvidenceRow(BaseModel):
    title: str
    snippet: str
    link: str
    link_text: str
    badge: str
    credible: bool


class ResultView(BaseModel):
    verdict_label: str
    score_percent: int
    summary: str
    evidence: List[EvidenceRow] = []


def format_classification(classification: str) -> str:
    """'likely_true' -> 'Likely True'"""
    return " ".join(word[:1].upper() + word[1:] for word in classification.split("_"))


def credibility_badge(evidence: Evidence) -> str:
    credibility = evidence.credibility
    if credibility.type:
        return credibility.type.upper()
    return "CREDIBLE" if credibility.is_credible else "UNKNOWN"


def present_result(result: AnalysisResult) -> ResultView:
    """Turn an analysis result into the values the results panel displays."""
    rows = [
        EvidenceRow(
            title=e.title,
            snippet=e.snippet,
            link=e.link,
            link_text=e.credibility.domain or e.link,
            badge=credibility_badge(e),
            credible=e.credibility.is_credible,
        )
        for e in result.evidence_details
    ]
    return ResultView(
        verdict_label=format_classification(result.verdict.classification),
        score_percent=round((result.verdict.score or 0) * 100),
        summary=result.explanation.summary,
        evidence=rows,
    )
