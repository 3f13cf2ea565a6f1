"""Test event-specific system prompts."""

import pytest

from coachgen.llm.system_prompts import (
    build_system_prompt,
    event_family,
    extract_prompt_metadata,
)


class TestExtractPromptMetadata:
    """Test extract_prompt_metadata."""

    def test_full_prompt(self):
        metadata = extract_prompt_metadata("U16 110m Hurdles Week 4 program")

        assert metadata.age_group == "U16"
        assert metadata.event == "110m Hurdles"
        assert metadata.week == "Week 4"

    def test_defaults(self):
        metadata = extract_prompt_metadata("something vague")

        assert metadata.age_group == "Senior"
        assert metadata.event == "General Training"
        assert metadata.week == "Week 1"

    def test_event_family_name(self):
        assert extract_prompt_metadata("Middle Distance base").event == "Middle Distance"

    def test_hurdles_before_flat_sprint(self):
        """Test 100m Hurdles is not read as 100m."""
        assert extract_prompt_metadata("100m Hurdles").event == "100m Hurdles"


class TestEventFamily:
    """Test event_family."""

    @pytest.mark.parametrize(
        "event,family",
        [
            ("400m Hurdles", "hurdles"),
            ("Pole Vault", "jumps"),
            ("Triple Jump", "jumps"),
            ("Javelin", "throws"),
            ("Shot Put", "throws"),
            ("800m", "middle"),
            ("Long Distance", "middle"),
            ("100m", "sprint"),
            ("Sprints", "sprint"),
            ("General Training", "general"),
        ],
    )
    def test_families(self, event, family):
        assert event_family(event) == family


class TestBuildSystemPrompt:
    """Test build_system_prompt."""

    def test_sprint_guidance(self):
        prompt = build_system_prompt("U14 100m Week 2")

        assert "specializing in 100m training" in prompt
        assert "For 100m specifically:" in prompt
        assert "- Include block starts and reaction time drills" in prompt
        assert "- Include core stability work" in prompt

    def test_general_guidance(self):
        prompt = build_system_prompt("help me train")

        assert "General Training" in prompt
        assert "- Focus on event-specific technique and conditioning" in prompt
