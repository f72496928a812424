from __future__ import annotations

from typing import Any

from jobgpt.ai.types import TextGenerator
from jobgpt.schemas.career import CareerPlan
from jobgpt.services.extraction import run_extraction
from jobgpt.services.prompts import build_career_path_prompt


def phased_milestones(timeline_months: int) -> list[dict[str, str]]:
    """Three phases split at the midpoint of the timeline."""
    half = timeline_months // 2
    return [
        {
            "title": "Skill Assessment",
            "description": "Evaluate current skills and identify gaps",
            "timeframe": "Month 1",
        },
        {
            "title": "Learning Phase",
            "description": "Acquire new skills through courses and practice",
            "timeframe": f"Month 2-{half}",
        },
        {
            "title": "Application Phase",
            "description": "Apply new skills in projects and seek opportunities",
            "timeframe": f"Month {half + 1}-{timeline_months}",
        },
    ]


def _overview(current_role: str, target_role: str) -> str:
    return (
        f"Transition from {current_role} to {target_role} requires strategic "
        "skill development and networking."
    )


def basic_plan(current_role: str, target_role: str, timeline_months: int) -> dict[str, Any]:
    return {
        "overview": _overview(current_role, target_role),
        "skills": ["Adaptability", "Learning agility"],
        "milestones": phased_milestones(timeline_months),
        "resources": "Professional development courses",
        "challenges": ["Career transition complexity"],
        "successTips": ["Stay persistent"],
    }


def default_plan(current_role: str, target_role: str, timeline_months: int) -> dict[str, Any]:
    return {
        "overview": _overview(current_role, target_role),
        "skills": ["Leadership", "Technical expertise", "Communication", "Strategic thinking"],
        "milestones": phased_milestones(timeline_months),
        "resources": (
            "Online courses, industry certifications, professional networking events, "
            "mentorship programs"
        ),
        "challenges": ["Time management", "Skill gaps", "Market competition"],
        "successTips": [
            "Stay consistent with learning",
            "Build a strong network",
            "Showcase your progress",
        ],
    }


async def generate_career_path(
    client: TextGenerator,
    *,
    current_role: str,
    target_role: str,
    timeline_months: int,
) -> dict[str, Any]:
    return await run_extraction(
        client,
        tool="generate-career-path",
        prompt=build_career_path_prompt(current_role, target_role, timeline_months),
        model=CareerPlan,
        on_missing=lambda _raw: basic_plan(current_role, target_role, timeline_months),
        on_invalid=lambda: default_plan(current_role, target_role, timeline_months),
    )
