"""Tests for the brief and request contracts."""

import pytest
from pydantic import ValidationError

from config import settings
from contracts import (
    CompanySize,
    Complexity,
    GenerationRequest,
    Level,
    ProjectBrief,
    StoryPriority,
    TechFocus,
    UserStory,
)


class TestProjectBrief:
    """Test ProjectBrief construction and serialization."""

    def test_valid_brief(self, brief_data):
        brief = ProjectBrief.model_validate(brief_data)
        assert brief.level == Level.JUNIOR.value
        assert brief.tech_focus == "fullstack"
        assert brief.company_size == CompanySize.SME.value
        assert len(brief.user_stories) == 2
        assert brief.user_stories[0].priority == StoryPriority.MUST.value

    def test_user_stories_default_to_empty(self, brief_data):
        del brief_data["user_stories"]
        brief = ProjectBrief.model_validate(brief_data)
        assert brief.user_stories == []

    def test_company_size_is_case_sensitive(self, brief_data):
        brief_data["company_size"] = "startup"
        with pytest.raises(ValidationError):
            ProjectBrief.model_validate(brief_data)

    def test_large_enterprise_value(self, brief_data):
        brief_data["company_size"] = "Large Enterprise"
        assert ProjectBrief.model_validate(brief_data).company_size == "Large Enterprise"

    def test_to_row_excludes_user_stories(self, brief_data):
        row = ProjectBrief.model_validate(brief_data).to_row()
        assert "user_stories" not in row
        assert row["stack"] == ["React", "FastAPI", "PostgreSQL"]
        assert row["complexity"] == "medium"

    def test_embedding_text_is_full_json(self, brief_data):
        text = ProjectBrief.model_validate(brief_data).to_embedding_text()
        assert "Book an appointment" in text
        assert text.startswith("{")


class TestUserStory:
    """Test UserStory validation."""

    def test_valid_story(self):
        story = UserStory(
            title="Export report",
            description="As a manager, I want a CSV export so that I can share results.",
            acceptance_criteria=["CSV has a header row"],
            priority=StoryPriority.COULD,
            complexity=Complexity.LOW,
        )
        assert story.priority == "could"

    def test_story_requires_acceptance_criteria(self):
        with pytest.raises(ValidationError):
            UserStory(
                title="Export report",
                description="As a manager...",
                acceptance_criteria=[],
                priority="must",
                complexity="low",
            )

    def test_story_priority_is_closed(self):
        with pytest.raises(ValidationError):
            UserStory(
                title="Export report",
                description="As a manager...",
                acceptance_criteria=["x"],
                priority="urgent",
                complexity="low",
            )


class TestGenerationRequest:
    """Test GenerationRequest parsing of CLI values."""

    def test_defaults(self):
        request = GenerationRequest()
        assert request.count == 1
        assert request.stack == []
        assert request.level is None

    def test_stack_accepts_comma_separated_and_repeated(self):
        request = GenerationRequest(stack=["react, node", "postgres", " "])
        assert request.stack == ["react", "node", "postgres"]

    def test_stack_accepts_single_string(self):
        assert GenerationRequest(stack="vue,go").stack == ["vue", "go"]

    def test_enum_values(self):
        request = GenerationRequest(level="senior", tech_focus=TechFocus.BACKEND)
        assert request.level == "senior"
        assert request.tech_focus == "backend"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            GenerationRequest(level="principal")

    @pytest.mark.parametrize("count", [0, 21])
    def test_count_bounds(self, count):
        with pytest.raises(ValidationError):
            GenerationRequest(count=count)

    def test_count_limit_follows_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "max_briefs_per_request", 50)
        assert GenerationRequest(count=30).count == 30
        with pytest.raises(ValidationError, match="at most 50"):
            GenerationRequest(count=51)

    def test_blank_domain_becomes_none(self):
        assert GenerationRequest(domain="   ").domain is None
