"""Tests for the Brief Agent and prompt templates."""

import json

import pytest

from agents import BriefAgent, build_system_prompt, build_user_prompt
from contracts import BriefValidationError, EmptyResponseError, GenerationRequest


class TestPrompts:
    """Prompt templates embed request parameters."""

    def test_system_prompt_lists_closed_sets(self):
        prompt = build_system_prompt(include_schema=False)
        assert '"junior", "intermediate", "senior"' in prompt
        assert '"Startup", "SME", "Large Enterprise"' in prompt
        assert "JSON array" in prompt

    def test_system_prompt_includes_schema(self):
        prompt = build_system_prompt()
        assert "# OUTPUT FORMAT" in prompt
        assert '"assessment_criteria"' in prompt
        assert '"user_stories"' in prompt

    def test_user_prompt_embeds_parameters(self):
        request = GenerationRequest(
            domain="fintech",
            level="senior",
            tech_focus="backend",
            stack=["Go", "PostgreSQL"],
            duration="4 weeks",
            count=3,
        )
        prompt = build_user_prompt(request)
        assert prompt.startswith("Generate 3 project briefs")
        assert "- domain: fintech" in prompt
        assert "- level: senior" in prompt
        assert "- tech_focus: backend" in prompt
        assert "- stack: Go, PostgreSQL" in prompt
        assert "- duration: 4 weeks" in prompt
        assert "different business problem" in prompt

    def test_user_prompt_without_constraints(self):
        prompt = build_user_prompt(GenerationRequest())
        assert prompt.startswith("Generate 1 project brief ")
        assert "Vary domain" in prompt
        assert "- domain" not in prompt


class TestBriefAgent:
    """BriefAgent with an in-memory provider."""

    def test_generate_returns_validated_briefs(self, fake_provider_factory, brief_json):
        provider = fake_provider_factory(content=brief_json)
        agent = BriefAgent(llm_provider=provider, temperature=0.3)

        result = agent.generate(GenerationRequest(domain="healthcare"))

        assert len(result.briefs) == 1
        assert result.briefs[0].domain == "healthcare"
        assert result.raw == json.loads(brief_json)
        assert result.token_usage.input_tokens == 100
        assert result.provider == "fake"
        assert provider.calls[0]["temperature"] == 0.3
        assert "- domain: healthcare" in provider.calls[0]["user_message"]

    def test_generate_tracks_total_usage(self, fake_provider_factory, brief_json):
        agent = BriefAgent(llm_provider=fake_provider_factory(content=brief_json))
        agent.generate(GenerationRequest())
        agent.generate(GenerationRequest())
        assert agent.total_usage.input_tokens == 200
        assert agent.total_usage.output_tokens == 400

    def test_generate_accepts_fenced_json(self, fake_provider_factory, brief_json):
        agent = BriefAgent(llm_provider=fake_provider_factory(content=f"```json\n{brief_json}\n```"))
        assert len(agent.generate(GenerationRequest()).briefs) == 1

    def test_generate_single_object(self, fake_provider_factory, brief_data):
        agent = BriefAgent(llm_provider=fake_provider_factory(content=json.dumps(brief_data)))
        result = agent.generate(GenerationRequest())
        assert len(result.briefs) == 1
        assert isinstance(result.raw, dict)

    def test_generate_invalid_brief_aborts(self, fake_provider_factory, brief_data):
        bad = dict(brief_data, complexity="extreme")
        agent = BriefAgent(llm_provider=fake_provider_factory(content=json.dumps([brief_data, bad])))
        with pytest.raises(BriefValidationError) as exc_info:
            agent.generate(GenerationRequest(count=2))
        assert exc_info.value.errors[0].field == "complexity"
        assert exc_info.value.errors[0].index == 1

    def test_generate_malformed_json(self, fake_provider_factory):
        agent = BriefAgent(llm_provider=fake_provider_factory(content="Sorry, I cannot help"))
        with pytest.raises(json.JSONDecodeError):
            agent.generate(GenerationRequest())

    def test_generate_empty_response(self, fake_provider_factory):
        agent = BriefAgent(llm_provider=fake_provider_factory(content=""))
        with pytest.raises(EmptyResponseError):
            agent.generate(GenerationRequest())

    def test_stream_yields_chunks(self, fake_provider_factory):
        provider = fake_provider_factory(chunks=["[", "{}", "]"])
        agent = BriefAgent(llm_provider=provider)
        assert "".join(agent.stream(GenerationRequest(stack=["vue"]))) == "[{}]"
        assert "- stack: vue" in provider.calls[0]["user_message"]

    def test_non_openai_provider_uses_its_default_model(self, fake_provider_factory, brief_json):
        provider = fake_provider_factory(content=brief_json)
        agent = BriefAgent(llm_provider=provider)
        assert agent.model == "fake-model"
        agent.generate(GenerationRequest())
        assert provider.calls[0]["model"] == "fake-model"
