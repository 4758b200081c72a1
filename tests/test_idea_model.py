"""
Tests for BusinessIdea normalisation of model output.
"""

import json

import pytest

from ideaspark.models.idea import DEFAULT_KEY_STEPS, BusinessIdea


@pytest.fixture
def sample_record():
    """Fixture providing a complete record as the model returns it."""
    return {
        "title": "Fintech Compliance Copilot",
        "description": "Automates regulatory reporting for small lenders.",
        "category": "Technology",
        "startupCost": "$8,000 - $20,000",
        "difficulty": 4,
        "timeToMarket": "6-9 months",
        "potentialRevenue": "$10K - $40K monthly",
        "keySteps": ["Interview lenders", "Map regulations", "Build MVP", "Pilot", "Scale"],
        "marketInsight": "RegTech spending is rising steadily",
        "riskLevel": "Medium",
        "uniqueValue": "Domain expertise in lending compliance",
        "targetAudience": "Community banks and credit unions",
    }


class TestBusinessIdea:
    """Tests for BusinessIdea.from_model_output."""

    def test_complete_record_is_kept(self, sample_record):
        idea = BusinessIdea.from_model_output(sample_record)

        assert idea.title == "Fintech Compliance Copilot"
        assert idea.startup_cost == "$8,000 - $20,000"
        assert idea.difficulty == 4
        assert idea.key_steps == tuple(sample_record["keySteps"])
        assert idea.id

    def test_missing_difficulty_defaults_to_three(self, sample_record):
        del sample_record["difficulty"]
        assert BusinessIdea.from_model_output(sample_record).difficulty == 3

    @pytest.mark.parametrize("value", ["4", None, True, [4], float("nan")])
    def test_wrong_typed_difficulty_defaults_to_three(self, sample_record, value):
        sample_record["difficulty"] = value
        assert BusinessIdea.from_model_output(sample_record).difficulty == 3

    @pytest.mark.parametrize("value, expected", [(0, 1), (9, 5), (2.6, 3)])
    def test_numeric_difficulty_is_clamped(self, sample_record, value, expected):
        sample_record["difficulty"] = value
        assert BusinessIdea.from_model_output(sample_record).difficulty == expected

    def test_empty_record_gets_every_default(self):
        idea = BusinessIdea.from_model_output({})

        assert idea.title == "Untitled Business Idea"
        assert idea.description == "No description provided"
        assert idea.category == "General"
        assert idea.startup_cost == "$1,000 - $5,000"
        assert idea.difficulty == 3
        assert idea.time_to_market == "3-6 months"
        assert idea.potential_revenue == "$5K - $20K monthly"
        assert idea.key_steps == DEFAULT_KEY_STEPS
        assert idea.market_insight == "Market showing positive growth trends"
        assert idea.risk_level == "Medium"
        assert idea.unique_value == "Leverages your unique skills and experience"
        assert idea.target_audience == "Target customers in your area of expertise"

    def test_empty_and_wrong_typed_text_fields_default(self, sample_record):
        sample_record["title"] = "   "
        sample_record["category"] = 42
        sample_record["riskLevel"] = None

        idea = BusinessIdea.from_model_output(sample_record)

        assert idea.title == "Untitled Business Idea"
        assert idea.category == "General"
        assert idea.risk_level == "Medium"

    def test_key_steps_are_padded_and_truncated(self, sample_record):
        sample_record["keySteps"] = ["Validate demand", "", 7, "Ship"]
        idea = BusinessIdea.from_model_output(sample_record)
        assert idea.key_steps == ("Validate demand", "Ship", "Launch business", "Scale operations", "Optimize growth")

        sample_record["keySteps"] = [f"Step {n}" for n in range(8)]
        idea = BusinessIdea.from_model_output(sample_record)
        assert idea.key_steps == ("Step 0", "Step 1", "Step 2", "Step 3", "Step 4")

    def test_non_list_key_steps_default(self, sample_record):
        sample_record["keySteps"] = "Do everything"
        assert BusinessIdea.from_model_output(sample_record).key_steps == DEFAULT_KEY_STEPS

    def test_model_supplied_id_is_ignored(self, sample_record):
        sample_record["id"] = "model-chosen"
        assert BusinessIdea.from_model_output(sample_record).id != "model-chosen"

    def test_to_dict_uses_camel_case(self, sample_record):
        data = BusinessIdea.from_model_output(sample_record).to_dict()

        assert data["startupCost"] == "$8,000 - $20,000"
        assert data["keySteps"][0] == "Interview lenders"
        assert "startup_cost" not in data

    def test_key_steps_cannot_be_changed_in_place(self, sample_record):
        idea = BusinessIdea.from_model_output(sample_record)

        with pytest.raises(AttributeError):
            idea.key_steps.append("Sixth step")
        assert len(idea.key_steps) == 5

    def test_to_dict_serialises_key_steps_as_json_list(self, sample_record):
        data = json.loads(json.dumps(BusinessIdea.from_model_output(sample_record).to_dict()))
        assert data["keySteps"] == sample_record["keySteps"]
