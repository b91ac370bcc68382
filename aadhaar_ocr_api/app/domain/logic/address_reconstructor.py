import re
import logging
from typing import Iterable, List, Optional

from app.domain.logic.field_resolvers import regex_strategy, first_match
from app.utils.numeric_tokens import POSTAL_CODE_PATTERN

logger = logging.getLogger(__name__)

RELATION_MARKERS = r'(?:S/O|D/O|W/O|Son of|Daughter of|Wife of)'

# Characters kept in an address: ASCII letters, digits, whitespace and , . : -
DISALLOWED_CHARS = re.compile(r'[^\w\s,.:-]', re.ASCII)
GLUED_PUNCTUATION = re.compile(r'(\w)[,.](\w)', re.ASCII)
COMMA_SPACING = re.compile(r'\s*,\s*')
DUPLICATE_COMMAS = re.compile(r',\s*,')
EDGE_SEPARATORS = re.compile(r'^[,\s]+|[,\s]+$')
WHITESPACE = re.compile(r'\s+')
SEPARATOR_LINE = re.compile(r'^[=\-_\s]+$')

RELATION_FRAGMENT = re.compile(r'(?:S/O|D/O|W/O)[:\s]+([A-Za-z \t]+)(?:,|\s|$)', re.IGNORECASE)
HOUSE_FRAGMENT = re.compile(r'(?:House|KT House|[A-Za-z]+ House)[,\s]([^,\n]*)', re.IGNORECASE)

MIN_ADDRESS_LENGTH = 10
MIN_ADDRESS_LINE_LENGTH = 15
MIN_FALLBACK_LINE_LENGTH = 5


def longest_address_line(text: str) -> Optional[str]:
    """Longest line that is long enough and contains a comma or the word 'house'."""
    lines = [line.strip() for line in text.split('\n')]
    candidates = [
        line for line in lines
        if len(line) > MIN_ADDRESS_LINE_LENGTH and (',' in line or 'house' in line.lower())
    ]
    if not candidates:
        return None
    return max(candidates, key=len)


address_after_label = regex_strategy(
    'address_after_label',
    r'Address\s*:?\s*(.*?)(?:\d{6}|$)',
    re.IGNORECASE | re.DOTALL,
)

address_after_relation = regex_strategy(
    'address_after_relation',
    RELATION_MARKERS + r'[:\s]+(.*?)(?:\d{6}|$)',
    re.IGNORECASE | re.DOTALL,
)

address_greedy_span = regex_strategy(
    'address_greedy_span',
    r'((?:Address|S/O|D/O|W/O|House).*?)(?=\d{6}|$)',
    re.IGNORECASE | re.DOTALL,
)

SEED_STRATEGIES = (
    address_after_label,
    address_after_relation,
    longest_address_line,
    address_greedy_span,
)


def normalize_address_text(text: str) -> str:
    """Collapse whitespace, space out glued punctuation, drop stray symbols, tidy commas."""
    text = WHITESPACE.sub(' ', text)
    text = GLUED_PUNCTUATION.sub(r'\1, \2', text)
    text = DISALLOWED_CHARS.sub('', text)
    text = COMMA_SPACING.sub(', ', text)
    return text.strip()


def cleanup_address(text: str) -> str:
    text = DUPLICATE_COMMAS.sub(',', text)
    text = EDGE_SEPARATORS.sub('', text)
    return WHITESPACE.sub(' ', text)


class AddressReconstructor:
    """
    Rebuilds the postal address from the back side of an Aadhaar card.

    OCR breaks the address across lines and often truncates it, so several
    sources of evidence are combined:

    - a seed span found by label, relation marker, longest address-like line
      or greedy capture (first that yields text);
    - discrete tokens (relation name, house name, known localities, PIN code)
      which, when present, replace the seed entirely;
    - a last-resort join of every non-boilerplate line when the result is
      still too short to be an address.
    """

    def __init__(self, gazetteer: Iterable[str], boilerplate: Iterable[str]):
        self.gazetteer = tuple(gazetteer)
        self.boilerplate = tuple(boilerplate)
        self._locality_pattern = None
        if self.gazetteer:
            alternatives = '|'.join(re.escape(token) for token in self.gazetteer)
            self._locality_pattern = re.compile(
                r'\b(?:' + alternatives + r')(?=[,\s]|$)', re.IGNORECASE
            )

    def seed(self, back_text: str) -> str:
        """First address span found by the seed strategies, normalized; '' if none."""
        seed_text = first_match(back_text, SEED_STRATEGIES)
        if not seed_text:
            return ''
        return normalize_address_text(seed_text)

    def structured_parts(self, back_text: str) -> List[str]:
        """
        Address parts assembled from discrete tokens, or [] when none of the
        relation, house or locality tokens is present.
        """
        relation = RELATION_FRAGMENT.search(back_text)
        house = HOUSE_FRAGMENT.search(back_text)
        localities = self._locality_pattern.findall(back_text) if self._locality_pattern else []

        if not (relation or house or localities):
            return []

        parts = []
        if relation and relation.group(1).strip():
            parts.append(f"S/O: {relation.group(1).strip()}")
        if house:
            parts.append(house.group(0).strip())
        if localities:
            parts.append(DUPLICATE_COMMAS.sub(',', ', '.join(localities)))

        postal = POSTAL_CODE_PATTERN.search(back_text)
        if postal:
            parts.append(postal.group(0))
        return parts

    def fallback_from_lines(self, back_text: str) -> str:
        """Join every line that could belong to the address; '' when no line qualifies."""
        lines = []
        for line in back_text.split('\n'):
            line = line.strip()
            if len(line) <= MIN_FALLBACK_LINE_LENGTH or SEPARATOR_LINE.match(line):
                continue
            if any(phrase in line for phrase in self.boilerplate):
                continue
            lines.append(line)

        if not lines:
            return ''
        joined = WHITESPACE.sub(' ', ', '.join(lines))
        joined = DISALLOWED_CHARS.sub('', joined)
        return DUPLICATE_COMMAS.sub(',', joined).strip()

    def reconstruct(self, back_text: str) -> str:
        if not back_text:
            return ''

        address = self.seed(back_text)

        parts = self.structured_parts(back_text)
        if parts:
            logger.debug("Address rebuilt from tokens: %s", parts)
            address = ', '.join(parts)

        address = cleanup_address(address)

        if len(address) < MIN_ADDRESS_LENGTH:
            fallback = self.fallback_from_lines(back_text)
            if fallback:
                logger.debug("Address rebuilt from all lines")
                address = fallback

        return address
