from typing import List
from config.constants import SUMMARY_TEMPLATES
from models.evidence import Evidence
from models.verdicts import ClassificationType
from models.analysis import EvidenceBreakdown, Explanation

def build_explanation(
    classification: ClassificationType,
    evidence: List[Evidence]
) -> Explanation:
    """
    Build the explanation block shown under the verdict.
    Args:
        classification: The verdict classification
        evidence: Evidence items, in the order they will be displayed
    Returns:
        Explanation with summary text and a breakdown derived from the evidence
    """
    return Explanation(
        summary=SUMMARY_TEMPLATES.for_classification(classification),
        evidence_breakdown=EvidenceBreakdown.from_evidence(evidence),
        sources_found=[e.credibility.type for e in evidence],
    )
