"""Shared fixtures for Brief Factory tests."""

import copy
import json
from typing import Iterator, List, Optional

import pytest

from providers.base import LLMProvider, LLMResponse, require_content


VALID_BRIEF = {
    "level": "junior",
    "domain": "healthcare",
    "tech_focus": "fullstack",
    "stack": ["React", "FastAPI", "PostgreSQL"],
    "duration": "3 weeks",
    "brief": "Build a patient appointment portal for a small clinic.",
    "business_problem": "Receptionists book appointments by phone and double-book slots.",
    "target_users": "Patients and clinic receptionists",
    "goals": ["Online booking", "No double bookings"],
    "deliverables": ["Web app", "REST API", "README"],
    "assessment_criteria": "Working booking flow, tests, clean code.",
    "company_size": "SME",
    "complexity": "medium",
    "user_stories": [
        {
            "title": "Book an appointment",
            "description": "As a patient, I want to book a slot online so that I avoid calling.",
            "acceptance_criteria": ["Only free slots are shown", "Confirmation email is sent"],
            "priority": "must",
            "complexity": "medium",
        },
        {
            "title": "See the day's schedule",
            "description": "As a receptionist, I want to see today's bookings so that I can plan.",
            "acceptance_criteria": ["Bookings are listed by time"],
            "priority": "should",
            "complexity": "low",
        },
    ],
}


@pytest.fixture
def brief_data() -> dict:
    """A well-formed brief as parsed JSON (fresh copy per test)."""
    return copy.deepcopy(VALID_BRIEF)


@pytest.fixture
def brief_json(brief_data) -> str:
    return json.dumps([brief_data])


class FakeProvider(LLMProvider):
    """In-memory provider returning canned content."""

    def __init__(self, content: Optional[str] = None, chunks: Optional[List[str]] = None):
        self.content = content
        self.chunks = chunks or []
        self.calls = []

    @property
    def name(self) -> str:
        return "fake"

    @property
    def default_model(self) -> str:
        return "fake-model"

    def complete(self, system_prompt, user_message, model=None, temperature=0.3) -> LLMResponse:
        self.calls.append({
            "system_prompt": system_prompt,
            "user_message": user_message,
            "model": model,
            "temperature": temperature,
        })
        return LLMResponse(
            content=require_content(self.content),
            input_tokens=100,
            output_tokens=200,
            model=model or self.default_model,
            provider=self.name,
            cost=0.002,
        )

    def stream(self, system_prompt, user_message, model=None, temperature=0.3) -> Iterator[str]:
        self.calls.append({"system_prompt": system_prompt, "user_message": user_message, "model": model})
        yield from self.chunks


@pytest.fixture
def fake_provider_factory():
    return FakeProvider
