"""
Regex-based repair of common XLIFF corruption.

Four independent fixes run in a fixed order; the order matters (ampersands
are escaped before bare `<` so the `&lt;` we insert is never re-escaped).
"""

import re

from xliff_fixer.constants import FIX_STEPS
from xliff_fixer.models.repair_result import RepairResult
from xliff_fixer.services.xml_validator import validate_xml
from xliff_fixer.logconf import logger

# XML 1.0 forbids these; Tab, LF and CR are allowed.
_ILLEGAL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

# `&` not already starting a predefined or numeric entity reference
_UNESCAPED_AMP_RE = re.compile(
    r"&(?!(?:amp|lt|gt|apos|quot|#[0-9]+|#x[0-9a-f]+);)", re.IGNORECASE | re.ASCII
)

# `<` followed by whitespace is prose, never a tag.
# Whitespace is the ECMAScript set: no U+0085 or U+001C-1F, but U+FEFF.
_WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_BARE_LT_RE = re.compile(f"<([{_WHITESPACE}])")

# `</name` cut off at the very end of the document
_TRUNCATED_CLOSING_RE = re.compile(r"</([A-Za-z0-9_-]+)\Z")


def strip_illegal_chars(text: str) -> str:
    if _ILLEGAL_CHARS_RE.search(text):
        return _ILLEGAL_CHARS_RE.sub("", text)
    return text


def escape_ampersands(text: str) -> str:
    if _UNESCAPED_AMP_RE.search(text):
        return _UNESCAPED_AMP_RE.sub("&amp;", text)
    return text


def escape_bare_less_than(text: str) -> str:
    if _BARE_LT_RE.search(text):
        return _BARE_LT_RE.sub(r"&lt;\1", text)
    return text


def close_truncated_tag(text: str) -> str:
    if _TRUNCATED_CLOSING_RE.search(text):
        return _TRUNCATED_CLOSING_RE.sub(r"</\1>", text)
    return text


_FIXES = (
    (FIX_STEPS["ILLEGAL_CHARS"], strip_illegal_chars),
    (FIX_STEPS["ENTITIES"], escape_ampersands),
    (FIX_STEPS["ENTITIES"], escape_bare_less_than),
    (FIX_STEPS["TAGS"], close_truncated_tag),
)


def heuristic_repair(raw_text: str) -> RepairResult:
    content = raw_text
    for step, fix in _FIXES:
        fixed = fix(content)
        if fixed != content:
            logger.debug("%s %s applied", step, fix.__name__)
        content = fixed

    was_modified = content != raw_text

    logger.debug(FIX_STEPS["VALIDATION"])
    outcome = validate_xml(content)
    return RepairResult.from_validation(content, outcome, was_modified)


class HeuristicRepairer:
    """Stateless; kept as a class so it can be swapped with AIRepairer."""

    def repair(self, raw_text: str) -> RepairResult:
        return heuristic_repair(raw_text)
