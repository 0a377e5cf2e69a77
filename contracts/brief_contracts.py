"""Project brief contracts.

A ProjectBrief is the unit the LLM generates, the validator accepts, and the
datastore persists. Enum values are closed sets.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Level(str, Enum):
    """Seniority the brief is written for."""
    JUNIOR = "junior"
    INTERMEDIATE = "intermediate"
    SENIOR = "senior"


class TechFocus(str, Enum):
    """Which side of the stack the project exercises."""
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"


class CompanySize(str, Enum):
    """Size of the fictional client company."""
    STARTUP = "Startup"
    SME = "SME"
    LARGE_ENTERPRISE = "Large Enterprise"


class Complexity(str, Enum):
    """Overall difficulty of a brief or user story."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class StoryPriority(str, Enum):
    """MoSCoW priority of a user story."""
    MUST = "must"
    SHOULD = "should"
    COULD = "could"


class UserStory(BaseModel):
    """A single user story attached to a brief."""

    model_config = ConfigDict(use_enum_values=True)

    title: str
    description: str = Field(..., description="As a <user>, I want <goal> so that <benefit>")
    acceptance_criteria: List[str] = Field(..., min_length=1)
    priority: StoryPriority
    complexity: Complexity


class ProjectBrief(BaseModel):
    """A synthetic project brief as produced by the generator."""

    model_config = ConfigDict(use_enum_values=True)

    level: Level
    domain: str = Field(..., description="Business domain, e.g. 'healthcare'")
    tech_focus: TechFocus
    stack: List[str] = Field(..., min_length=1)
    duration: str = Field(..., description="Expected duration, e.g. '2 weeks'")
    brief: str = Field(..., description="Narrative description of the project")
    business_problem: str
    target_users: str
    goals: List[str] = Field(..., min_length=1)
    deliverables: List[str] = Field(..., min_length=1)
    assessment_criteria: str
    company_size: CompanySize
    complexity: Complexity
    user_stories: List[UserStory] = Field(
        default_factory=list,
        description="Optional; briefs without stories are stored without child rows.",
    )

    def to_row(self) -> dict:
        """Column values for the briefs table (user stories are stored separately)."""
        return self.model_dump(mode="json", exclude={"user_stories"})

    def to_embedding_text(self) -> str:
        """Compact JSON of the full brief, the text that gets embedded."""
        return self.model_dump_json()
