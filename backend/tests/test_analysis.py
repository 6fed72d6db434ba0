import pytest
from datetime import datetime
from unittest.mock import AsyncMock, patch
from services.analysis import EvidenceAnalyzer, analyze


@pytest.fixture
def analyzer():
    return EvidenceAnalyzer(delay=0)


@pytest.mark.asyncio
class TestKeywordRules:
    """Tests for the keyword triggers and their precedence."""

    @pytest.mark.parametrize("text", [
        "According to NASA, temperatures rose.",
        "nasa says so",
        "NASA",
        "according to my uncle, it rained",
    ])
    async def test_likely_true_triggers(self, analyzer, text):
        result = await analyzer.analyze(text)
        assert result.verdict.classification == "likely_true"
        assert result.verdict.score == 0.78

    @pytest.mark.parametrize("text", [
        "drinking bleach is a cure",
        "BLEACH kills germs",
        "there is a Cure for everything",
        "keep your passwords secure",
    ])
    async def test_verified_false_triggers(self, analyzer, text):
        result = await analyzer.analyze(text)
        assert result.verdict.classification == "verified_false"
        assert result.verdict.score == 0.92

    @pytest.mark.parametrize("text", ["the sky is blue", "water is wet", "   x   "])
    async def test_no_trigger(self, analyzer, text):
        result = await analyzer.analyze(text)
        assert result.verdict.classification == "insufficient_evidence"
        assert result.verdict.score == 0.5
        assert result.evidence_details == []

    async def test_first_rule_wins_when_both_present(self, analyzer):
        result = await analyzer.analyze("NASA says bleach is a cure")
        assert result.verdict.classification == "likely_true"
        assert result.verdict.score == 0.78
        assert len(result.evidence_details) == 1
        assert result.evidence_details[0].credibility.domain == "nasa.gov"


@pytest.mark.asyncio
class TestAnalysisScenarios:
    """End-to-end scenarios for the analyzer."""

    async def test_nasa_scenario(self, analyzer):
        result = await analyzer.analyze("According to NASA, temperatures rose.")

        assert result.verdict.classification == "likely_true"
        assert result.verdict.score == 0.78
        assert result.verdict.evidence_count == 1
        assert result.verdict.requires_human_review is False

        evidence = result.evidence_details[0]
        assert evidence.title == "Authoritative source"
        assert evidence.link == "https://nasa.gov"
        assert evidence.credibility.domain == "nasa.gov"
        assert evidence.credibility.is_credible is True
        assert evidence.credibility.type == "authoritative"
        assert evidence.stance.supports is True
        assert evidence.stance.contradicts is False

        assert result.explanation.summary == "Supported by authoritative sources."
        breakdown = result.explanation.evidence_breakdown
        assert breakdown.supporting_evidence == 1
        assert breakdown.contradicting_evidence == 0
        assert breakdown.credible_sources == 1
        assert breakdown.total_sources == 1
        assert breakdown.credibility_ratio == 1.0

    async def test_bleach_scenario(self, analyzer):
        result = await analyzer.analyze("drinking bleach is a cure")

        assert result.verdict.classification == "verified_false"
        assert result.verdict.score == 0.92
        assert result.verdict.confidence_interval[1] == 1.0

        evidence = result.evidence_details[0]
        assert evidence.title == "Debunking study"
        assert evidence.snippet == "Health authorities warn against bleach."
        assert evidence.credibility.domain == "cdc.gov"
        assert evidence.stance.contradicts is True

        assert result.explanation.summary == "Strongly contradicted by health authorities."
        assert result.explanation.evidence_breakdown.contradicting_evidence == 1
        assert result.explanation.sources_found == ["authoritative"]

    async def test_insufficient_scenario(self, analyzer):
        result = await analyzer.analyze("the sky is blue")

        assert result.verdict.classification == "insufficient_evidence"
        assert result.verdict.score == 0.5
        assert result.verdict.evidence_count == 0
        assert result.verdict.requires_human_review is True
        assert result.explanation.summary == "Not enough evidence."
        assert result.explanation.evidence_breakdown.credibility_ratio == 0
        assert result.explanation.evidence_breakdown.total_sources == 0
        assert result.explanation.sources_found == []


@pytest.mark.asyncio
class TestAnalysisResultShape:
    """Tests for the metadata carried by each result."""

    async def test_claim_is_truncated(self, analyzer):
        text = "a" * 500
        result = await analyzer.analyze(text)
        assert result.claims == ["a" * 200]

    async def test_short_claim_kept_verbatim(self, analyzer):
        result = await analyzer.analyze("According to NASA")
        assert result.claims == ["According to NASA"]

    async def test_metadata(self, analyzer):
        result = await analyzer.analyze("the sky is blue")
        assert result.processing_stages == ["Claim Extraction", "Local Analysis"]
        assert result.search_powered is False
        assert result.verdict.conflicting_evidence is False
        assert isinstance(result.analysis_timestamp, datetime)
        assert result.analysis_timestamp.tzinfo is not None

    async def test_idempotent_apart_from_timestamp(self, analyzer):
        first = await analyzer.analyze("drinking bleach is a cure")
        second = await analyzer.analyze("drinking bleach is a cure")
        assert first.model_dump(exclude={"analysis_timestamp"}) == second.model_dump(exclude={"analysis_timestamp"})
        assert first is not second


@pytest.mark.asyncio
class TestSimulatedDelay:
    """Tests for the simulated latency."""

    async def test_sleeps_for_configured_delay(self):
        with patch("services.analysis.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await EvidenceAnalyzer(delay=0.8).analyze("the sky is blue")
        mock_sleep.assert_awaited_once_with(0.8)

    async def test_zero_delay_skips_sleep(self):
        with patch("services.analysis.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await EvidenceAnalyzer(delay=0).analyze("the sky is blue")
        mock_sleep.assert_not_awaited()

    async def test_delay_read_from_settings(self, monkeypatch):
        monkeypatch.setenv("ANALYSIS_DELAY_SECONDS", "0.25")
        with patch("services.analysis.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await analyze("the sky is blue")
        mock_sleep.assert_awaited_once_with(0.25)
