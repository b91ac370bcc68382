"""
Field resolvers for the front side of an Aadhaar card.

Each field has an ordered tuple of strategies. A strategy is a pure function
``text -> Optional[str]``; the resolver returns the first candidate that is
non-empty after trimming and never evaluates the strategies after it.
Nothing here raises: a field that cannot be resolved comes back as ''.
"""

import re
import logging
from typing import Callable, Optional, Sequence

from app.utils.numeric_tokens import find_id_number, find_postal_code

logger = logging.getLogger(__name__)

Strategy = Callable[[str], Optional[str]]


def regex_strategy(name: str, pattern: str, flags: int = re.IGNORECASE) -> Strategy:
    """Build a strategy returning the first capture group of the first match of pattern."""
    compiled = re.compile(pattern, flags)

    def strategy(text: str) -> Optional[str]:
        match = compiled.search(text)
        if match:
            return match.group(1)
        return None

    strategy.__name__ = name
    strategy.pattern = compiled
    return strategy


def first_match(text: str, strategies: Sequence[Strategy]) -> str:
    """Return the first non-empty trimmed candidate produced by strategies, or ''."""
    if not text:
        return ''
    for strategy in strategies:
        candidate = strategy(text)
        if candidate and candidate.strip():
            logger.debug("Strategy %s matched: %r", strategy.__name__, candidate)
            return candidate.strip()
    return ''


# --- Name ---------------------------------------------------------------------------------
# Name captures stay on a single line; the label they are anchored to may follow on the next.

name_before_dob_label = regex_strategy(
    'name_before_dob_label',
    r'([A-Za-z][A-Za-z \t]*)\s+(?:DOB|Date of Birth)\s*:'
)

name_before_marker = regex_strategy(
    'name_before_marker',
    r'(?:[^\w\n]|^)([A-Za-z][A-Za-z \t]+(?:[ \t][A-Za-z]+){1,3})'
    r'(?=\s+(?:DOB|Male|Female|S/O|D/O|W/O|Year|\d{2}/\d{2}/\d{4}))'
)

# OCR frequently renders the Hindi name prefix as `he "`
name_after_quote_artifact = regex_strategy(
    'name_after_quote_artifact',
    r'he\s*"\s*([A-Za-z][A-Za-z \t.]+(?:[ \t][A-Za-z.]+){1,3})'
)

name_before_gender = regex_strategy(
    'name_before_gender',
    r'([A-Za-z][A-Za-z \t.]+(?:[ \t][A-Za-z.]+){1,3})\s+(?:DOB|Male|Female)'
)

name_after_label = regex_strategy(
    'name_after_label',
    r'(?:Name|नाम)[:\s]+([A-Za-z \t.]+)'
)

NAME_STRATEGIES = (
    name_before_dob_label,
    name_before_marker,
    name_after_quote_artifact,
    name_before_gender,
    name_after_label,
)

# --- Date of birth ------------------------------------------------------------------------

dob_after_label = regex_strategy(
    'dob_after_label',
    r'(?:DOB|Date of Birth|Birth)\s*:?\s*(\d{2}[/-]\d{2}[/-]\d{4}|\d{2}[/-]\d{2}[/-]\d{2})'
)

dob_bare_date = regex_strategy(
    'dob_bare_date',
    r'(\d{2}[/-]\d{2}[/-]\d{4})'
)

dob_after_dob_label = regex_strategy(
    'dob_after_dob_label',
    r'DOB\s*:?\s*(\d{2}[/-]\d{2}[/-]\d{4})'
)

DOB_STRATEGIES = (
    dob_after_label,
    dob_bare_date,
    dob_after_dob_label,
)

# --- Gender -------------------------------------------------------------------------------

gender_keyword = regex_strategy('gender_keyword', r'\b(male|female)\b')

GENDER_STRATEGIES = (gender_keyword,)


def resolve_id_number(front_text: str) -> str:
    return find_id_number(front_text)


def resolve_name(front_text: str) -> str:
    return first_match(front_text, NAME_STRATEGIES)


def resolve_date_of_birth(front_text: str) -> str:
    return first_match(front_text, DOB_STRATEGIES)


def resolve_gender(front_text: str) -> str:
    return first_match(front_text, GENDER_STRATEGIES)


def resolve_postal_code(back_text: str) -> str:
    """Postal code comes from the back text regardless of what the address resolved to."""
    return find_postal_code(back_text)
