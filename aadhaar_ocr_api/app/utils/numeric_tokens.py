import re
from typing import List

# A run of digits that may contain single spaces between digits ("1234 5678 9012")
DIGIT_RUN_PATTERN = re.compile(r'\d(?: ?\d)*')
ID_NUMBER_PATTERN = re.compile(r'\b\d{4}\s?\d{4}\s?\d{4}\b')
GROUPED_ID_NUMBER_PATTERN = re.compile(r'\d{4}\s+\d{4}\s+\d{4}')
POSTAL_CODE_PATTERN = re.compile(r'\b\d{6}\b')

ID_NUMBER_LENGTH = 12


def scan_digit_runs(text: str) -> List[str]:
    """
    Return the maximal digit runs of text in order of appearance, spaces removed.
    """
    if not text:
        return []
    return [match.group(0).replace(' ', '') for match in DIGIT_RUN_PATTERN.finditer(text)]


def format_id_number(digits: str) -> str:
    """Format the first 12 digits as XXXX XXXX XXXX."""
    digits = digits[:ID_NUMBER_LENGTH]
    return ' '.join(digits[i:i + 4] for i in range(0, ID_NUMBER_LENGTH, 4))


def find_id_number(text: str) -> str:
    """
    Resolve a 12-digit ID number from text.

    Digit runs of 12 or more digits win and are reformatted as three groups of
    four. Otherwise the boundary-delimited 12-digit pattern is matched against
    the raw text and returned as written. Returns '' when neither matches.
    """
    for run in scan_digit_runs(text):
        if len(run) >= ID_NUMBER_LENGTH:
            return format_id_number(run)

    match = ID_NUMBER_PATTERN.search(text or '')
    if match:
        return match.group(0)
    return ''


def find_postal_code(text: str) -> str:
    """Return the first standalone 6-digit number in text, or ''."""
    match = POSTAL_CODE_PATTERN.search(text or '')
    return match.group(0) if match else ''
