from enum import Enum


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    ELEVATED = "elevated"
    HIGH = "high"


class CostCategory(str, Enum):
    DIRECT = "direct"
    INDIRECT = "indirect"
    HIDDEN = "hidden"
    RECURRING = "recurring"
    IMPLEMENTATION = "implementation"
    INFRASTRUCTURE = "infrastructure"
    PERSONNEL = "personnel"
    TRAINING = "training"
    MAINTENANCE = "maintenance"
    LICENSING = "licensing"
    CONSULTING = "consulting"
    OTHER = "other"


class BenefitCategory(str, Enum):
    REVENUE = "revenue"
    COST_REDUCTION = "cost_reduction"
    EFFICIENCY = "efficiency"
    PRODUCTIVITY = "productivity"


class CompanySize(str, Enum):
    SOLO = "solo"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class ProjectStage(str, Enum):
    PRE = "pre"
    POST = "post"


class RecommendationStatus(str, Enum):
    STRONG = "strong"
    FAVORABLE = "favorable"
    MARGINAL = "marginal"
    WEAK = "weak"
    NEGATIVE = "negative"


class RecommendationConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
