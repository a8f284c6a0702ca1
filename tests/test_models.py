# tests/test_models.py

"""
Model Tests - question bank validation, slider scoring and lead contact details
"""

import copy

import pytest
from pydantic import ValidationError

from blueprint.core.exceptions import ConfigurationError, LeadValidationError
from blueprint.models.lead import PLACEHOLDER, Lead, LeadNotification, validate_lead
from blueprint.models.question import ChoiceQuestion, QuestionBank, ScaleQuestion


# =============================================================================
# QUESTION MODELS
# =============================================================================

class TestScaleQuestion:

    def _slider(self, **kwargs):
        data = {"id": "s", "section": "x", "text": "Slide?", "min": 1, "max": 10, "multiplier": 3}
        data.update(kwargs)
        return ScaleQuestion(**data)

    def test_score_for(self):
        assert self._slider().score_for(7) == 21

    def test_half_up_multiplier(self):
        q = self._slider(multiplier=1.5)
        assert q.score_for(7) == 11
        assert q.score_for(3) == 5
        assert q.max_score == 15

    def test_default_is_five(self):
        assert self._slider().default == 5

    def test_default_outside_range_rejected(self):
        with pytest.raises(ValidationError):
            self._slider(default=11)

    def test_multiplier_must_be_positive(self):
        with pytest.raises(ValidationError):
            self._slider(multiplier=0)


class TestChoiceQuestion:

    def test_max_score(self):
        q = ChoiceQuestion(
            id="c", section="x", text="Pick?",
            options=[{"label": "a", "score": 4}, {"label": "b", "score": 10}],
        )
        assert q.max_score == 10

    def test_requires_options(self):
        with pytest.raises(ValidationError):
            ChoiceQuestion(id="c", section="x", text="Pick?", options=[])


# =============================================================================
# QUESTION BANK VALIDATION
# =============================================================================

class TestQuestionBank:

    def test_valid_bank(self, small_bank):
        assert small_bank.total_max_score == 60
        assert small_bank.total_questions == 4
        assert small_bank.section_label("beta") == "Beta"
        assert isinstance(small_bank.question("b1"), ScaleQuestion)

    def test_benchmark_fallback(self, small_bank):
        assert small_bank.benchmark("alpha") == 60
        assert small_bank.benchmark("gamma") == 50

    def test_max_score_mismatch(self, small_bank_data):
        small_bank_data["sections"][0]["max_score"] = 25
        with pytest.raises(ConfigurationError, match="max_score"):
            QuestionBank.model_validate(small_bank_data)

    def test_zero_max_score(self, small_bank_data):
        small_bank_data["sections"][0]["max_score"] = 0
        with pytest.raises(ValidationError):
            QuestionBank.model_validate(small_bank_data)

    def test_duplicate_question_id(self, small_bank_data):
        dup = copy.deepcopy(small_bank_data["questions"][0])
        small_bank_data["questions"].append(dup)
        with pytest.raises(ConfigurationError, match="Duplicate"):
            QuestionBank.model_validate(small_bank_data)

    def test_unknown_question_in_section(self, small_bank_data):
        small_bank_data["sections"][2]["question_ids"].append("nope")
        with pytest.raises(ConfigurationError, match="unknown question"):
            QuestionBank.model_validate(small_bank_data)

    def test_question_in_two_sections(self, small_bank_data):
        small_bank_data["sections"][1]["question_ids"].append("g1")
        with pytest.raises(ConfigurationError):
            QuestionBank.model_validate(small_bank_data)

    def test_section_mismatch(self, small_bank_data):
        small_bank_data["questions"][3]["section"] = "alpha"
        with pytest.raises(ConfigurationError, match="declares section"):
            QuestionBank.model_validate(small_bank_data)

    def test_orphan_question(self, small_bank_data):
        small_bank_data["questions"].append({
            "id": "orphan", "section": "gamma", "type": "single", "text": "Orphan?",
            "options": [{"label": "x", "score": 1}],
        })
        with pytest.raises(ConfigurationError, match="without a section"):
            QuestionBank.model_validate(small_bank_data)

    def test_benchmark_unknown_section(self, small_bank_data):
        small_bank_data["benchmarks"]["delta"] = 40
        with pytest.raises(ConfigurationError, match="unknown section"):
            QuestionBank.model_validate(small_bank_data)

    def test_benchmark_out_of_range(self, small_bank_data):
        small_bank_data["benchmarks"]["alpha"] = 120
        with pytest.raises(ConfigurationError):
            QuestionBank.model_validate(small_bank_data)

    def test_production_bank_is_valid(self):
        from blueprint.data import get_question_bank
        bank = get_question_bank()
        assert [q.id for q in bank.questions][0] == "aum_follow"
        assert bank.benchmark("continuity") == 35


# =============================================================================
# LEAD
# =============================================================================

class TestLead:

    def test_valid_lead_is_trimmed(self, valid_lead_data):
        lead = validate_lead(valid_lead_data)
        assert lead.name == "Jordan Avery"
        assert lead.email == "jordan.avery@example.com"
        assert lead.firm == "Summit Wealth"

    def test_blank_optional_fields_become_none(self):
        lead = validate_lead({"name": "Sam", "email": "sam@example.com", "phone": "  ", "firm": ""})
        assert lead.phone is None
        assert lead.firm is None

    def test_missing_name(self):
        with pytest.raises(LeadValidationError) as exc_info:
            validate_lead({"name": "   ", "email": "sam@example.com"})
        assert exc_info.value.errors == {"name": "Name is required"}

    def test_invalid_email(self):
        with pytest.raises(LeadValidationError) as exc_info:
            validate_lead({"name": "Sam", "email": "not-an-email"})
        assert exc_info.value.errors == {"email": "Invalid email"}

    def test_both_fields_reported(self):
        with pytest.raises(LeadValidationError) as exc_info:
            validate_lead({"name": "", "email": ""})
        assert set(exc_info.value.errors) == {"name", "email"}

    def test_name_too_long(self):
        with pytest.raises(LeadValidationError) as exc_info:
            validate_lead({"name": "x" * 101, "email": "sam@example.com"})
        assert "name" in exc_info.value.errors

    def test_phone_too_long(self):
        with pytest.raises(LeadValidationError) as exc_info:
            validate_lead({"name": "Sam", "email": "sam@example.com", "phone": "1" * 31})
        assert "phone" in exc_info.value.errors


class TestLeadNotification:

    def test_placeholder_defaults(self):
        payload = LeadNotification(
            name="Sam", email="sam@example.com", score="42/100", tier="Early Stage", answers="...",
        )
        assert payload.phone == PLACEHOLDER
        assert payload.firm == PLACEHOLDER

    def test_score_format_enforced(self):
        with pytest.raises(ValidationError):
            LeadNotification(name="Sam", email="sam@example.com", score="42", tier="Early Stage", answers="")

    def test_lead_model_direct(self):
        lead = Lead(name="Sam", email="sam@example.com")
        assert lead.phone is None
