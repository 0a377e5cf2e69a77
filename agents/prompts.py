"""Prompt templates for brief generation."""

import json

from contracts import (
    CompanySize,
    Complexity,
    GenerationRequest,
    Level,
    ProjectBrief,
    StoryPriority,
    TechFocus,
)


def _choices(enum_cls) -> str:
    return ", ".join(f'"{member.value}"' for member in enum_cls)


SYSTEM_PROMPT = f"""You are a senior engineering manager who writes realistic project briefs
used to assess software developers. Each brief describes a fictional client, the business
problem it faces, and the project a developer must deliver.

## Rules
1. Every brief must be self-contained and plausible for the requested domain.
2. level must be exactly one of: {_choices(Level)}.
3. tech_focus must be exactly one of: {_choices(TechFocus)}.
4. company_size must be exactly one of: {_choices(CompanySize)}.
5. complexity must be exactly one of: {_choices(Complexity)}.
6. stack, goals and deliverables must each contain at least one entry.
7. Include 3 to 6 user_stories. Each story has a title, a description written as
   "As a <user>, I want <goal> so that <benefit>", at least one acceptance criterion,
   a priority (one of: {_choices(StoryPriority)}) and a complexity.
8. Respond with ONLY a valid JSON array of briefs. No prose, no markdown fences, no explanation."""


def build_system_prompt(include_schema: bool = True) -> str:
    """System prompt, optionally followed by the JSON schema briefs must match."""
    if not include_schema:
        return SYSTEM_PROMPT
    schema = json.dumps(ProjectBrief.model_json_schema(), indent=2)
    return (
        f"{SYSTEM_PROMPT}\n\n# OUTPUT FORMAT\n"
        f"Each array element MUST match this schema:\n\n```json\n{schema}\n```"
    )


def build_user_prompt(request: GenerationRequest) -> str:
    """User prompt embedding the requested parameters.

    Parameters the request leaves unset are delegated to the model.
    """
    noun = "brief" if request.count == 1 else "briefs"
    lines = [f"Generate {request.count} project {noun} as a JSON array."]

    constraints = []
    if request.domain:
        constraints.append(f"- domain: {request.domain}")
    if request.level:
        constraints.append(f"- level: {request.level}")
    if request.tech_focus:
        constraints.append(f"- tech_focus: {request.tech_focus}")
    if request.stack:
        constraints.append(f"- stack: {', '.join(request.stack)}")
    if request.duration:
        constraints.append(f"- duration: {request.duration}")

    if constraints:
        lines.append("")
        lines.append("Every brief must use these values:")
        lines.extend(constraints)
    else:
        lines.append("Vary domain, level, tech_focus and stack across briefs.")

    if request.count > 1:
        lines.append("")
        lines.append("Make each brief address a different business problem.")

    return "\n".join(lines)
