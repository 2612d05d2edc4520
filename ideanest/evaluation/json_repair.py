"""Text-level helpers that coax an LLM completion into parseable JSON.

All functions are pure string transformations; none of them parse JSON.
"""

import re

_OPENING_FENCE_RE = re.compile(r"\A```[\w+.-]*[ \t]*")
_CLOSING_FENCE = "```"

# Code points 0-8, 11, 12, 14-31 and 127. Tab, LF and CR are kept.
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

# A backslash that does not start a valid JSON escape sequence.
_LONE_BACKSLASH_RE = re.compile(r'\\(?!["\\/bfnrtu])')

_COMPLETE_ENDINGS = ("}", "]", '"')


def strip_fences(text: str) -> str:
    """Remove a surrounding markdown code fence.

    Handles both ```json and bare ``` openers. A missing closing fence
    (truncated output) only removes the opener. Text that does not start
    with a fence is returned unchanged.
    """
    stripped = text.strip()
    if not stripped.startswith(_CLOSING_FENCE):
        return text
    inner = _OPENING_FENCE_RE.sub("", stripped, count=1)
    if inner.endswith(_CLOSING_FENCE):
        inner = inner[: -len(_CLOSING_FENCE)]
    return inner.strip()


def extract_json_candidate(text: str) -> str | None:
    """Return the substring from the first '{' to the last '}' inclusive.

    Returns None when either brace is absent or they are out of order.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start : end + 1]


def sanitize_json(text: str) -> str:
    """Fix escape sequences and control characters that break JSON parsing."""
    sanitized = text.replace("\\'", "'")
    sanitized = sanitized.replace("\\" * 4, "\\" * 2)
    sanitized = _CONTROL_CHARS_RE.sub("", sanitized)
    return _LONE_BACKSLASH_RE.sub(r"\\\\", sanitized)


def repair_truncated_json(text: str) -> str:
    """Close a JSON document that was cut off mid-structure.

    If the text does not end on a complete token it is cut back to the last
    ',', '[' or '{' (the delimiter itself is dropped, along with a comma left
    dangling by the cut). Missing ']' are appended first, then missing '}'.

    Brackets are counted, not matched: the closers are not ordered by the
    actual nesting, so deep truncations can still come out invalid or wrong.

    Candidates from extract_json_candidate always end on a '}', so the
    cut-back branch only runs when this is called on raw text directly.
    """
    repaired = text.strip()
    if not repaired.endswith(_COMPLETE_ENDINGS):
        cut = max(repaired.rfind(","), repaired.rfind("["), repaired.rfind("{"))
        if cut > 0:
            repaired = repaired[:cut].rstrip()
            if repaired.endswith(","):
                repaired = repaired[:-1]

    missing_brackets = repaired.count("[") - repaired.count("]")
    missing_braces = repaired.count("{") - repaired.count("}")
    return repaired + "]" * max(missing_brackets, 0) + "}" * max(missing_braces, 0)
