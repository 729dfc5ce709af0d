"""Pydantic models and rule constants for broker readiness scoring."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Errors
# =============================================================================


class InvalidInputError(Exception):
    """Raised when an onboarding response cannot be scored."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or [message]


# =============================================================================
# Questionnaire answers
# Members are declared from most sales-ready to least.
# =============================================================================


class CrmUsage(str, Enum):
    FULL = "full"
    BASIC = "basic"
    NONE = "none"


class SpeedToContact(str, Enum):
    FIVE_MIN = "5min"
    THIRTY_MIN = "30min"
    SAME_DAY = "sameDay"
    NEXT_DAY = "nextDay"


class TeamSize(str, Enum):
    DEDICATED = "dedicated"
    SMALL = "small"
    SOLO = "solo"
    UNCLEAR = "unclear"


class FollowUpClarity(str, Enum):
    CLEAR = "clear"
    BASIC = "basic"
    NONE = "none"


class MonthlySpend(str, Enum):
    OVER_30K = "30k+"
    FROM_15K_TO_30K = "15k-30k"
    FROM_5K_TO_15K = "5k-15k"
    UNDER_5K = "under5k"
    NONE = "none"


class CplAwareness(str, Enum):
    YES = "yes"
    ROUGH = "rough"
    NO = "no"


class PricingComfort(str, Enum):
    COMFORTABLE = "comfortable"
    FLEXIBLE = "flexible"
    SENSITIVE = "sensitive"


class ProductFocusClarity(str, Enum):
    CLEAR = "clear"
    MULTIPLE = "multiple"
    UNCLEAR = "unclear"


class GeographicFocusClarity(str, Enum):
    CLEAR = "clear"
    SEMI = "semi"
    UNDEFINED = "undefined"


class GrowthGoalClarity(str, Enum):
    NUMERIC = "numeric"
    GENERAL = "general"
    VAGUE = "vague"


class Timeline(str, Enum):
    IMMEDIATE = "immediate"
    THIRTY_DAYS = "30days"
    EXPLORING = "exploring"


# =============================================================================
# Classification outputs
# =============================================================================


class Dimension(str, Enum):
    """Scored dimensions, in sales-angle tie-break priority order."""

    OPERATIONAL = "operational"
    BUDGET = "budget"
    GROWTH = "growth"
    INTENT = "intent"


class SuccessBand(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    EXCELLENT = "Excellent"


class SalesAngle(str, Enum):
    PROCESS_AND_SPEED = "Process & Speed Coaching"
    ROI_EDUCATION = "ROI & Cost-Per-Lead Education"
    NICHE_TARGETING = "Niche & Targeting Definition"
    CAPACITY_PLANNING = "Capacity Planning"
    BALANCED_PARTNERSHIP = "Balanced Partnership"


class RiskFlag(str, Enum):
    CAPACITY_UNDEFINED = "capacity-undefined"
    CAPACITY_MISMATCH = "capacity-mismatch"
    PRICE_SENSITIVE_HIGH_VOLUME = "price-sensitive-high-volume"
    LOW_OPERATIONAL_READINESS = "low-operational-readiness"
    NO_FOLLOW_UP_PROCESS = "no-follow-up-process"
    UNCLEAR_TARGETING = "unclear-targeting"
    EXPLORATORY_ONLY = "exploratory-only"


# =============================================================================
# Input record
# =============================================================================


class OnboardingResponse(BaseModel):
    """One broker's questionnaire answers.

    Accepts the camelCase names the onboarding form submits, or the
    snake_case attribute names. Unknown keys (contact details etc.) are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    crm_usage: CrmUsage = Field(..., alias="crmUsage")
    speed_to_contact: SpeedToContact = Field(..., alias="speedToContact")
    team_size: TeamSize = Field(..., alias="teamSize")
    follow_up_clarity: FollowUpClarity = Field(..., alias="followUpClarity")
    monthly_spend: MonthlySpend = Field(..., alias="monthlySpend")
    cpl_awareness: CplAwareness = Field(..., alias="cplAwareness")
    pricing_comfort: PricingComfort = Field(..., alias="pricingComfort")
    desired_leads_weekly: int = Field(..., ge=0, alias="desiredLeadsWeekly")
    max_capacity_weekly: int = Field(..., ge=0, alias="maxCapacityWeekly")
    product_focus_clarity: ProductFocusClarity = Field(..., alias="productFocusClarity")
    geographic_focus_clarity: GeographicFocusClarity = Field(
        ..., alias="geographicFocusClarity"
    )
    growth_goal_clarity: GrowthGoalClarity = Field(..., alias="growthGoalClarity")
    timeline: Timeline = Field(..., alias="timeline")

    @field_validator("desired_leads_weekly", "max_capacity_weekly", mode="before")
    @classmethod
    def whole_number(cls, v: object) -> object:
        """Reject booleans, strings and fractional lead counts."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("must be a whole number")
        if isinstance(v, float):
            if not v.is_integer():
                raise ValueError("must be a whole number")
            return int(v)
        return v


# =============================================================================
# Scoring outputs
# =============================================================================


class FactorScore(BaseModel):
    """Points earned by a single questionnaire answer."""

    model_config = ConfigDict(frozen=True)

    answer: str = Field(..., description="The answer as submitted")
    points: int = Field(..., ge=0, description="Points awarded")
    max_points: int = Field(..., gt=0, description="Best attainable points")


class DimensionScore(BaseModel):
    """Score for a single dimension of broker readiness."""

    model_config = ConfigDict(frozen=True)

    dimension: Dimension
    score: int = Field(..., ge=0, le=100, description="Dimension score out of 100")
    factors: dict[str, FactorScore] = Field(
        default_factory=dict, description="Per-answer contributions"
    )
    summary: str | None = Field(None, description="One-line summary of dimension status")


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    operational_score: int = Field(..., ge=0, le=100, alias="operationalScore")
    budget_score: int = Field(..., ge=0, le=100, alias="budgetScore")
    growth_score: int = Field(..., ge=0, le=100, alias="growthScore")
    intent_score: int = Field(..., ge=0, le=100, alias="intentScore")

    def by_dimension(self) -> dict[Dimension, int]:
        """Scores keyed by dimension, in tie-break priority order."""
        return {
            Dimension.OPERATIONAL: self.operational_score,
            Dimension.BUDGET: self.budget_score,
            Dimension.GROWTH: self.growth_score,
            Dimension.INTENT: self.intent_score,
        }


class AnalysisResult(ScoreBreakdown):
    """Complete readiness assessment for one onboarding response."""

    success_probability: int = Field(..., ge=0, le=100, alias="successProbability")
    risk_flags: tuple[RiskFlag, ...] = Field(default=(), alias="riskFlags")
    primary_sales_angle: SalesAngle = Field(..., alias="primarySalesAngle")
    success_band: SuccessBand = Field(..., alias="successBand")


class ScoringReport(BaseModel):
    """What the consultant briefing receives for a submission."""

    result: AnalysisResult
    breakdown: dict[Dimension, DimensionScore]
    explanation: str | None = None


# =============================================================================
# Composite weights - must sum to 100
# =============================================================================

DIMENSION_WEIGHTS = {
    Dimension.OPERATIONAL: 35,  # speed-to-contact and follow-up drive conversion
    Dimension.BUDGET: 30,
    Dimension.GROWTH: 20,
    Dimension.INTENT: 15,
}

# Inclusive lower bounds, highest first
SUCCESS_BANDS = [
    (80, SuccessBand.EXCELLENT),
    (60, SuccessBand.HIGH),
    (40, SuccessBand.MEDIUM),
    (0, SuccessBand.LOW),
]

SALES_ANGLES = {
    Dimension.OPERATIONAL: SalesAngle.PROCESS_AND_SPEED,
    Dimension.BUDGET: SalesAngle.ROI_EDUCATION,
    Dimension.GROWTH: SalesAngle.NICHE_TARGETING,
    Dimension.INTENT: SalesAngle.CAPACITY_PLANNING,
}
