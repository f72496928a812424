from __future__ import annotations

import copy
import json
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from jobgpt.ai.types import TextGenerator

logger = logging.getLogger(__name__)


class ExtractionStatus(str, Enum):
    PARSED = "parsed"
    MISSING = "missing"
    INVALID = "invalid"


@dataclass(frozen=True)
class Extraction:
    status: ExtractionStatus
    payload: dict[str, Any] | None = None
    fragment: str | None = None


def _balanced_end(text: str, start: int) -> int:
    """Return the index of the brace closing the one at ``start``, or -1."""
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1


def find_json_object(text: str) -> Extraction:
    """Locate the first JSON object embedded in free text.

    Every balanced ``{...}`` span is a candidate. A candidate that does not
    parse is skipped whole, so objects nested inside a broken fragment are
    never returned in its place. An opening brace that never closes ends the
    scan: the reply was cut off and anything after it belongs to the broken
    object.
    """
    last_fragment: str | None = None
    position = text.find("{")
    while position != -1:
        end = _balanced_end(text, position)
        if end == -1:
            if last_fragment is not None or "}" in text[position:]:
                return Extraction(ExtractionStatus.INVALID, fragment=text[position:])
            return Extraction(ExtractionStatus.MISSING)
        fragment = text[position : end + 1]
        try:
            parsed = json.loads(fragment)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            return Extraction(ExtractionStatus.PARSED, payload=parsed, fragment=fragment)
        last_fragment = fragment
        position = text.find("{", end + 1)

    if last_fragment is not None:
        return Extraction(ExtractionStatus.INVALID, fragment=last_fragment)
    return Extraction(ExtractionStatus.MISSING)


def invalid_fields(payload: dict[str, Any], model: type[BaseModel]) -> list[str]:
    try:
        model.model_validate(payload)
    except ValidationError as exc:
        names: list[str] = []
        for error in exc.errors():
            loc = error.get("loc") or ()
            if loc and isinstance(loc[0], str) and loc[0] not in names:
                names.append(loc[0])
        return names
    return []


def repair_fields(
    payload: dict[str, Any],
    model: type[BaseModel],
    fallback: dict[str, Any],
) -> tuple[dict[str, Any], list[str]]:
    """Replace missing or mistyped top-level fields with fallback values.

    Fields that validate, and fields the model does not declare, are kept
    exactly as the model sent them.
    """
    repaired = dict(payload)
    broken = [name for name in invalid_fields(payload, model) if name in fallback]
    for name in broken:
        repaired[name] = copy.deepcopy(fallback[name])
    return repaired, broken


async def run_extraction(
    client: TextGenerator,
    *,
    tool: str,
    prompt: str,
    model: type[BaseModel],
    on_missing: Callable[[str], dict[str, Any]],
    on_invalid: Callable[[], dict[str, Any]],
) -> dict[str, Any]:
    """Send one prompt and coerce the reply into ``model``'s shape.

    Configuration and upstream errors raised by ``client`` propagate to the
    caller; an unusable reply never does.
    """
    started = time.perf_counter()
    raw_text = await client.generate(prompt)
    extraction = find_json_object(raw_text)
    repaired: list[str] = []

    if extraction.status is ExtractionStatus.MISSING:
        result = on_missing(raw_text)
    elif extraction.status is ExtractionStatus.INVALID:
        result = on_invalid()
    else:
        result, repaired = repair_fields(extraction.payload or {}, model, on_invalid())

    logger.info(
        "extraction_result tool=%s model=%s status=%s repaired=%s reply_len=%s fragment_len=%s latency_ms=%s",
        tool,
        getattr(client, "model", "unknown"),
        extraction.status.value,
        ",".join(repaired) or "-",
        len(raw_text),
        len(extraction.fragment or ""),
        int((time.perf_counter() - started) * 1000),
    )
    return result
