"""
Shared data models for ideas and generation results.
"""

import math
from enum import Enum
from typing import Any, Dict, List, Tuple
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_KEY_STEPS = (
    "Research market",
    "Develop product",
    "Launch business",
    "Scale operations",
    "Optimize growth",
)

KEY_STEP_COUNT = 5

# Substituted for any text field the model leaves out, empties or mistypes
TEXT_DEFAULTS = {
    "title": "Untitled Business Idea",
    "description": "No description provided",
    "category": "General",
    "startup_cost": "$1,000 - $5,000",
    "time_to_market": "3-6 months",
    "potential_revenue": "$5K - $20K monthly",
    "market_insight": "Market showing positive growth trends",
    "risk_level": "Medium",
    "unique_value": "Leverages your unique skills and experience",
    "target_audience": "Target customers in your area of expertise",
}

DEFAULT_DIFFICULTY = 3


def new_idea_id() -> str:
    return uuid4().hex


class BusinessIdea(BaseModel):
    """A single business idea card.

    Serialises with the camelCase field names the prompt asks the model for.
    Any field that is missing, empty or of the wrong type is replaced with its
    documented default, so building one from model output never fails.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=new_idea_id, description="Opaque identifier, unique per record")
    title: str = Field(TEXT_DEFAULTS["title"], description="Compelling, specific business name/concept")
    description: str = Field(TEXT_DEFAULTS["description"], description="2-3 sentences on the concept and value proposition")
    category: str = Field(TEXT_DEFAULTS["category"], description="Primary business category")
    startup_cost: str = Field(TEXT_DEFAULTS["startup_cost"], alias="startupCost", description="Realistic startup cost range")
    difficulty: int = Field(DEFAULT_DIFFICULTY, ge=1, le=5, description="1 = very easy, 5 = very challenging")
    time_to_market: str = Field(TEXT_DEFAULTS["time_to_market"], alias="timeToMarket", description="Realistic launch timeline")
    potential_revenue: str = Field(TEXT_DEFAULTS["potential_revenue"], alias="potentialRevenue", description="Monthly revenue potential")
    key_steps: Tuple[str, ...] = Field(DEFAULT_KEY_STEPS, alias="keySteps", description="Five actionable implementation steps")
    market_insight: str = Field(TEXT_DEFAULTS["market_insight"], alias="marketInsight", description="Current market trends and opportunities")
    risk_level: str = Field(TEXT_DEFAULTS["risk_level"], alias="riskLevel", description="Low, Medium or High")
    unique_value: str = Field(TEXT_DEFAULTS["unique_value"], alias="uniqueValue", description="What makes this opportunity special for this user")
    target_audience: str = Field(TEXT_DEFAULTS["target_audience"], alias="targetAudience", description="Customer segments to focus on")

    @field_validator(
        "title",
        "description",
        "category",
        "startup_cost",
        "time_to_market",
        "potential_revenue",
        "market_insight",
        "risk_level",
        "unique_value",
        "target_audience",
        mode="before",
    )
    @classmethod
    def _default_text(cls, value, info):
        if isinstance(value, str) and value.strip():
            return value
        return TEXT_DEFAULTS[info.field_name]

    @field_validator("difficulty", mode="before")
    @classmethod
    def _default_difficulty(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return DEFAULT_DIFFICULTY
        if not math.isfinite(value):
            return DEFAULT_DIFFICULTY
        return max(1, min(5, int(round(value))))

    @field_validator("key_steps", mode="before")
    @classmethod
    def _default_key_steps(cls, value):
        if not isinstance(value, (list, tuple)):
            return DEFAULT_KEY_STEPS
        steps = tuple(step for step in value if isinstance(step, str) and step.strip())[:KEY_STEP_COUNT]
        return steps + DEFAULT_KEY_STEPS[len(steps):KEY_STEP_COUNT]

    @classmethod
    def from_model_output(cls, record: Dict[str, Any]) -> "BusinessIdea":
        """Normalise one record parsed from the model's answer."""
        fields = {key: value for key, value in record.items() if key != "id"}
        return cls.model_validate(fields)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class IdeaSource(str, Enum):
    AI = "ai"
    FALLBACK = "fallback"


class GenerationResult(BaseModel):
    """Ideas handed back to the caller together with the path that produced them."""

    model_config = ConfigDict(frozen=True)

    ideas: List[BusinessIdea]
    source: IdeaSource
