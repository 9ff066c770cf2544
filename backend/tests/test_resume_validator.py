import copy

import pytest

from models.schemas.resume import DEFAULT_RESUME_DATA, FALLBACK_NAME, ResumeRecord
from services.resume_validator import (
    build_fallback_resume,
    merge_with_defaults,
    validate_resume,
    validate_with_recovery,
)


class TestValidateResume:
    def test_valid_candidate_round_trips(self, valid_candidate):
        result = validate_resume(valid_candidate)
        assert result.success
        assert isinstance(result.data, ResumeRecord)
        assert result.data.to_wire() == valid_candidate
        assert result.errors == []

    def test_minimal_candidate(self):
        candidate = {
            "personalInfo": {"name": "Jane", "email": "jane@example.com"},
            "summary": "Ten chars+",
            "experience": [],
            "education": [],
            "skills": [],
        }
        result = validate_resume(candidate)
        assert result.success
        assert result.data.projects is None
        assert result.data.to_wire() == candidate

    def test_collects_all_violations(self, valid_candidate):
        valid_candidate["personalInfo"]["name"] = ""
        valid_candidate["personalInfo"]["email"] = "not-an-email"
        del valid_candidate["experience"][0]["title"]
        valid_candidate["skills"][0]["items"] = []

        result = validate_resume(valid_candidate)
        assert not result.success
        assert result.data is None
        assert "personalInfo.name: Name is required" in result.errors
        assert "personalInfo.email: Valid email is required" in result.errors
        assert "experience.0.title: Field required" in result.errors
        assert "skills.0.items: At least one skill is required" in result.errors
        assert len(result.violations) == len(result.errors) == 4

    def test_violation_fields(self, valid_candidate):
        valid_candidate["education"][0]["institution"] = ""
        result = validate_resume(valid_candidate)
        violation = result.violations[0]
        assert violation.field_path == "education.0.institution"
        assert violation.message == "Institution is required"

    def test_missing_summary(self, valid_candidate):
        del valid_candidate["summary"]
        result = validate_resume(valid_candidate)
        assert result.errors == ["summary: Field required"]

    def test_short_summary(self, valid_candidate):
        valid_candidate["summary"] = "Too short"
        result = validate_resume(valid_candidate)
        assert result.errors == ["summary: Summary should be at least 10 characters"]

    def test_empty_description_list(self, valid_candidate):
        valid_candidate["experience"][1]["description"] = []
        result = validate_resume(valid_candidate)
        assert result.errors == ["experience.1.description: At least one description point is required"]

    def test_invalid_url(self, valid_candidate):
        valid_candidate["personalInfo"]["linkedin"] = "linkedin.com/in/janedoe"
        result = validate_resume(valid_candidate)
        assert result.errors == ["personalInfo.linkedin: Invalid url"]

    def test_empty_url_means_absent(self, valid_candidate):
        valid_candidate["personalInfo"]["linkedin"] = ""
        valid_candidate["projects"][0]["url"] = ""
        assert validate_resume(valid_candidate).success

    def test_url_kept_verbatim(self, valid_candidate):
        valid_candidate["personalInfo"]["website"] = "https://janedoe.dev"
        result = validate_resume(valid_candidate)
        assert result.data.personal_info.website == "https://janedoe.dev"

    def test_wrong_scalar_type(self, valid_candidate):
        valid_candidate["summary"] = 12345
        result = validate_resume(valid_candidate)
        assert not result.success
        assert result.violations[0].field_path == "summary"

    def test_certification_requires_issuer(self, valid_candidate):
        valid_candidate["certifications"][0]["issuer"] = ""
        result = validate_resume(valid_candidate)
        assert result.errors == ["certifications.0.issuer: Issuer is required"]

    @pytest.mark.parametrize("candidate", [None, [], "resume", 42])
    def test_non_object_candidate(self, candidate):
        result = validate_resume(candidate)
        assert not result.success
        assert result.errors

    def test_does_not_mutate_input(self, valid_candidate):
        valid_candidate["personalInfo"]["email"] = "bad"
        snapshot = copy.deepcopy(valid_candidate)
        validate_resume(valid_candidate)
        assert valid_candidate == snapshot

    def test_unknown_keys_ignored(self, valid_candidate):
        valid_candidate["hobbies"] = ["chess"]
        result = validate_resume(valid_candidate)
        assert result.success
        assert "hobbies" not in result.data.to_wire()


class TestMergeWithDefaults:
    def test_empty_candidate_gives_baseline(self):
        assert merge_with_defaults({}) == DEFAULT_RESUME_DATA

    def test_personal_info_merged_key_by_key(self):
        merged = merge_with_defaults({"personalInfo": {"name": "Jane", "phone": "555"}})
        assert merged["personalInfo"] == {
            "name": "Jane",
            "email": "",
            "phone": "555",
            "location": "",
            "linkedin": "",
            "website": "",
        }

    def test_present_values_kept(self, valid_candidate):
        merged = merge_with_defaults(valid_candidate)
        assert merged["experience"] == valid_candidate["experience"]
        assert merged["summary"] == valid_candidate["summary"]

    def test_none_values_replaced(self):
        merged = merge_with_defaults({"summary": None, "skills": None, "personalInfo": {"email": None}})
        assert merged["summary"] == ""
        assert merged["skills"] == []
        assert merged["personalInfo"]["email"] == ""

    @pytest.mark.parametrize(
        "partial",
        [None, 42, "text", [], {"personalInfo": "oops"}, {"experience": []}],
    )
    def test_total_on_any_input(self, partial):
        merged = merge_with_defaults(partial)
        assert set(merged) == set(DEFAULT_RESUME_DATA)
        assert set(merged["personalInfo"]) >= set(DEFAULT_RESUME_DATA["personalInfo"])

    def test_does_not_share_state(self, valid_candidate):
        merged = merge_with_defaults(valid_candidate)
        merged["experience"].append({"title": "x"})
        assert len(valid_candidate["experience"]) == 2

        baseline = merge_with_defaults({})
        baseline["skills"].append("x")
        assert DEFAULT_RESUME_DATA["skills"] == []

    def test_merged_shape_complete_for_validator(self):
        merged = merge_with_defaults({"personalInfo": {"name": "Jane"}})
        result = validate_resume(merged)
        # Baseline values fill shape only: email and summary still fail
        paths = {v.field_path for v in result.violations}
        assert paths == {"personalInfo.email", "summary"}


class TestValidateWithRecovery:
    def test_valid_passes_first_time(self, valid_candidate):
        result = validate_with_recovery(valid_candidate)
        assert result.success
        assert result.data.to_wire() == valid_candidate

    def test_missing_sections_recovered_by_merge(self, valid_candidate):
        del valid_candidate["education"]
        del valid_candidate["skills"]
        result = validate_with_recovery(valid_candidate)
        assert result.success
        assert result.data.education == []
        assert result.data.skills == []

    def test_missing_summary_surfaces_first_errors(self, valid_candidate):
        del valid_candidate["summary"]
        first = validate_resume(valid_candidate)
        merged = validate_resume(merge_with_defaults(valid_candidate))

        assert first.errors == ["summary: Field required"]
        assert merged.errors == ["summary: Summary should be at least 10 characters"]

        result = validate_with_recovery(valid_candidate)
        assert not result.success
        assert result.errors == first.errors

    def test_deeply_nested_value_does_not_recurse(self, valid_candidate):
        nested = []
        for _ in range(5000):
            nested = [nested]
        valid_candidate["summary"] = nested
        result = validate_with_recovery(valid_candidate)
        assert not result.success
        assert result.violations[0].field_path == "summary"


class TestFallbackResume:
    def test_fallback_is_complete_shape(self):
        fallback = build_fallback_resume()
        assert fallback["personalInfo"]["name"] == FALLBACK_NAME
        assert fallback["experience"] == []
        assert fallback["education"] == []
        assert fallback["skills"] == []
        assert len(fallback["summary"]) >= 10
