from __future__ import annotations

from typing import Any

from jobgpt.ai.types import TextGenerator
from jobgpt.schemas.resume import ResumeAnalysis
from jobgpt.services.extraction import run_extraction
from jobgpt.services.prompts import build_resume_prompt

SUMMARY_PREVIEW_CHARS = 200


class BlankResumeError(ValueError):
    pass


def summary_fallback(raw_text: str) -> dict[str, Any]:
    return {
        "summary": raw_text[:SUMMARY_PREVIEW_CHARS],
        "skills": ["Communication", "Problem-solving"],
        "suggestions": ["Add more details", "Improve structure"],
        "experienceYears": 2,
        "keyStrengths": ["Adaptability"],
    }


def default_analysis() -> dict[str, Any]:
    return {
        "summary": "Resume analysis completed",
        "skills": ["Communication", "Problem-solving", "Leadership"],
        "suggestions": [
            "Add quantifiable achievements",
            "Include relevant keywords",
            "Improve formatting",
        ],
        "experienceYears": 3,
        "keyStrengths": ["Technical expertise", "Team collaboration"],
    }


async def analyze_resume(client: TextGenerator, content: str) -> dict[str, Any]:
    if not content.strip():
        raise BlankResumeError("Resume content is required")

    return await run_extraction(
        client,
        tool="analyze-resume",
        prompt=build_resume_prompt(content),
        model=ResumeAnalysis,
        on_missing=summary_fallback,
        on_invalid=default_analysis,
    )
