# talentconnect/utils/skills.py
import json
import logging
import re
from typing import Any, Iterable, List, Tuple

from pydantic_core import core_schema

from talentconnect.config import MAX_SKILL_LENGTH, MAX_SKILLS
from talentconnect.constants import EMPTY_SKILL_MARKERS, SKILL_DELIMITERS

logger = logging.getLogger(__name__)

_DELIM_RE = re.compile(SKILL_DELIMITERS)


def _split(text: str) -> List[str]:
    return [part.strip() for part in _DELIM_RE.split(text) if part.strip()]


def _coerce(raw: Any) -> List[Any]:
    """Turn list / JSON string / delimited string into a flat list of raw entries."""
    if raw is None:
        return []

    if isinstance(raw, (list, tuple)):
        return list(raw)

    if isinstance(raw, str):
        text = raw.strip()
        if text in EMPTY_SKILL_MARKERS:
            return []
        if text.startswith("[") and text.endswith("]"):
            try:
                parsed = json.loads(text)
            except (ValueError, RecursionError) as e:
                logger.warning("Failed to parse skills JSON %r: %s; splitting instead", text[:80], e)
                return _split(text)
            return parsed if isinstance(parsed, list) else []
        return _split(text)

    logger.warning("Unsupported skills input of type %s; using empty skill set", type(raw).__name__)
    return []


def _clean(entries: Iterable[Any]) -> List[str]:
    cleaned = []
    for entry in entries:
        if entry is None:
            continue
        s = str(entry).strip()
        if 0 < len(s) <= MAX_SKILL_LENGTH:
            cleaned.append(s)
    return cleaned[:MAX_SKILLS]


class SkillSet(tuple):
    """
    Immutable, normalized sequence of skills.

    Whatever goes in (list, JSON array text, "a, b; c" text, None) comes out
    trimmed, with every entry 1..MAX_SKILL_LENGTH chars and at most
    MAX_SKILLS entries. Display case is kept; compare via lowered().
    """

    __slots__ = ()

    def __new__(cls, raw: Any = None):
        if isinstance(raw, SkillSet):
            return raw
        return super().__new__(cls, _clean(_coerce(raw)))

    def lowered(self) -> Tuple[str, ...]:
        return tuple(s.lower() for s in self)

    def text(self) -> str:
        """Space-joined lowercase skills, for keyword scanning."""
        return " ".join(self).lower()

    def to_json(self) -> str:
        return json.dumps(list(self))

    def __repr__(self) -> str:
        return f"SkillSet({list(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        # validation always runs the normalizer; dumps as a plain list
        return core_schema.no_info_plain_validator_function(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(list),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict:
        return {
            "type": "array",
            "items": {"type": "string", "minLength": 1, "maxLength": MAX_SKILL_LENGTH},
            "maxItems": MAX_SKILLS,
        }


def normalize_skills(raw: Any) -> SkillSet:
    """Never raises; malformed input degrades to a simpler parse or an empty set."""
    return SkillSet(raw)


def parse_path_list(raw: Any) -> List[str]:
    """Certificate/file path lists: native list or JSON array text, else []."""
    if not raw:
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.warning("Failed to parse path list %r: %s", raw[:80], e)
            return []
    if not isinstance(raw, (list, tuple)):
        return []
    return [str(p) for p in raw if p]
