"""End-to-end tests for compute_scores() and analyze_response()."""

import itertools

import pytest
from pydantic import ValidationError

from broker_scoring.core.scoring import (
    AnalysisResult,
    Dimension,
    InvalidInputError,
    RiskFlag,
    SalesAngle,
    SuccessBand,
    analyze_response,
    compute_scores,
    score_breakdown,
    validate_response,
)
from broker_scoring.core.scoring.classifier import classify_band
from broker_scoring.core.scoring.types import OnboardingResponse

CATEGORICAL_FIELDS = [
    name
    for name, field in OnboardingResponse.model_fields.items()
    if name not in ("desired_leads_weekly", "max_capacity_weekly")
]


def _variants(baseline: OnboardingResponse):
    """Every single-answer change to a baseline, plus a grid of lead counts."""
    for name in CATEGORICAL_FIELDS:
        for answer in OnboardingResponse.model_fields[name].annotation:
            yield baseline.model_copy(update={name: answer})
    for desired, capacity in itertools.product([0, 1, 7, 19, 20, 21, 45, 200], [0, 1, 8, 20, 50]):
        yield baseline.model_copy(
            update={"desired_leads_weekly": desired, "max_capacity_weekly": capacity}
        )


# =============================================================================
# Example scenarios
# =============================================================================


class TestScenarios:
    def test_all_best_case(self, best_case):
        result = compute_scores(best_case)

        assert result.operational_score == 100
        assert result.budget_score == 100
        assert result.growth_score == 100
        assert result.intent_score == 100
        assert result.success_probability == 100
        assert result.success_band == SuccessBand.EXCELLENT
        assert result.risk_flags == ()
        assert result.primary_sales_angle == SalesAngle.BALANCED_PARTNERSHIP

    def test_all_worst_case(self, worst_case):
        result = compute_scores(worst_case)

        assert result.operational_score == 0
        assert result.budget_score == 0
        assert result.growth_score == 0
        assert result.intent_score == 0
        assert result.success_probability == 0
        assert result.success_band == SuccessBand.LOW
        assert {
            RiskFlag.CAPACITY_UNDEFINED,
            RiskFlag.LOW_OPERATIONAL_READINESS,
            RiskFlag.NO_FOLLOW_UP_PROCESS,
            RiskFlag.UNCLEAR_TARGETING,
            RiskFlag.EXPLORATORY_ONLY,
        } <= set(result.risk_flags)

    def test_desired_well_over_capacity(self, best_case):
        best_case["desiredLeadsWeekly"] = 50
        result = compute_scores(best_case)

        # r = 2.5 -> 100 - round(50 * 1.5)
        assert result.intent_score == 25
        assert RiskFlag.CAPACITY_MISMATCH in result.risk_flags
        assert result.success_probability == 89
        assert result.primary_sales_angle == SalesAngle.CAPACITY_PLANNING

    def test_price_sensitive_high_volume(self, mid_case):
        mid_case["pricingComfort"] = "sensitive"
        mid_case["desiredLeadsWeekly"] = 25
        result = compute_scores(mid_case)

        assert RiskFlag.PRICE_SENSITIVE_HIGH_VOLUME in result.risk_flags
        assert result.budget_score == 35

    def test_mid_case(self, mid_case):
        result = compute_scores(mid_case)

        assert result.success_probability == 55
        assert result.success_band == SuccessBand.MEDIUM
        assert result.primary_sales_angle == SalesAngle.CAPACITY_PLANNING
        assert result.risk_flags == ()

    def test_zero_capacity_never_divides(self, best_case):
        best_case["maxCapacityWeekly"] = 0
        result = compute_scores(best_case)

        assert result.intent_score == 0
        assert RiskFlag.CAPACITY_UNDEFINED in result.risk_flags


# =============================================================================
# Properties
# =============================================================================


class TestProperties:
    @pytest.mark.parametrize("case", ["best_case", "worst_case", "mid_case"])
    def test_deterministic(self, request, case):
        raw = request.getfixturevalue(case)
        first = compute_scores(raw)
        second = compute_scores(dict(raw))

        assert first == second
        assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)

    @pytest.mark.parametrize("case", ["best_case", "worst_case", "mid_case"])
    def test_scores_in_range_and_band_consistent(self, request, case):
        baseline = validate_response(request.getfixturevalue(case))
        for response in _variants(baseline):
            result = compute_scores(response)
            for value in (
                result.operational_score,
                result.budget_score,
                result.growth_score,
                result.intent_score,
                result.success_probability,
            ):
                assert isinstance(value, int)
                assert 0 <= value <= 100
            assert result.success_band == classify_band(result.success_probability)

    def test_risk_flags_have_no_duplicates(self, worst_case):
        worst_case["desiredLeadsWeekly"] = 30
        flags = compute_scores(worst_case).risk_flags
        assert len(flags) == len(set(flags))

    def test_accepts_validated_response(self, best_case):
        response = validate_response(best_case)
        assert compute_scores(response) == compute_scores(best_case)

    def test_breakdown_matches_result(self, mid_case):
        breakdown = score_breakdown(mid_case)
        result = compute_scores(mid_case)
        assert breakdown.by_dimension() == result.by_dimension()


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    def test_invalid_input_raises(self, best_case):
        best_case["crmUsage"] = "excel"
        with pytest.raises(InvalidInputError):
            compute_scores(best_case)

    def test_unvalidated_copy_raises_invalid_input(self, best_case):
        response = validate_response(best_case).model_copy(
            update={"max_capacity_weekly": -1}
        )
        with pytest.raises(InvalidInputError):
            compute_scores(response)

    def test_invalid_input_never_returns_partial_result(self, best_case):
        best_case["maxCapacityWeekly"] = -1
        result = None
        with pytest.raises(InvalidInputError):
            result = compute_scores(best_case)
        assert result is None


# =============================================================================
# Serialization
# =============================================================================


class TestSerialization:
    def test_camel_case_output(self, worst_case):
        data = compute_scores(worst_case).model_dump(mode="json", by_alias=True)

        assert data["operationalScore"] == 0
        assert data["successProbability"] == 0
        assert data["successBand"] == "Low"
        assert data["primarySalesAngle"] == "Balanced Partnership"
        assert "capacity-undefined" in data["riskFlags"]

    def test_round_trips_from_camel_case(self, mid_case):
        result = compute_scores(mid_case)
        data = result.model_dump(mode="json", by_alias=True)
        assert AnalysisResult.model_validate(data) == result


# =============================================================================
# Report
# =============================================================================


class TestAnalyzeResponse:
    def test_report_contains_breakdown(self, mid_case):
        report = analyze_response(mid_case)

        assert report.result == compute_scores(mid_case)
        assert set(report.breakdown) == set(Dimension)
        assert report.breakdown[Dimension.OPERATIONAL].score == 59
        assert report.breakdown[Dimension.BUDGET].factors["pricing_comfort"].points == 18
        assert report.explanation

    def test_breakdown_is_immutable(self, mid_case):
        report = analyze_response(mid_case)
        operational = report.breakdown[Dimension.OPERATIONAL]

        with pytest.raises(ValidationError):
            operational.score = 100
        with pytest.raises(ValidationError):
            operational.factors["crm_usage"].points = 30

    def test_explanation_can_be_omitted(self, mid_case):
        assert analyze_response(mid_case, include_explanation=False).explanation is None
