"""Ordered pattern-to-parser rules for reading dates.

Two rule tables are tried in a fixed priority order:

* ``DECLARED_DATE_RULES`` parse the value the user typed; the first rule
  that matches wins.
* ``OCR_DATE_RULES`` scan OCR text; every match of every rule becomes a
  candidate date.

Each rule carries a tag (``compact``, ``separated-ymd``, ``separated-dmy``,
``month-name``, ``label-prefixed``, ``year-only``) so tests can assert which
rule produced a candidate.
"""

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from idmatch.matching.models import PartialDate

MONTHS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_MONTH = (
    r"(?P<month>jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\b"
)
_SEP = r"[\s.,/-]+"
_NUM_SEP = r"[/.-]"
_DOB_LABEL = r"(?:dob|date\s*of\s*birth|birth\s*date)[\s:/-]*"


def expand_year(raw: str) -> int:
    """Expand a two-digit year into 2000-2099; longer years are taken as-is."""
    value = int(raw)
    return 2000 + value if len(raw) == 2 else value


def month_number(name: str) -> int | None:
    lowered = name.lower()
    return MONTHS.get(lowered[:4]) or MONTHS.get(lowered[:3])


def _parse_named_groups(m: re.Match[str]) -> PartialDate:
    groups = m.groupdict()
    day = groups.get("day")
    month = groups.get("month")
    year = groups.get("year")

    month_value: int | None = None
    if month:
        month_value = int(month) if month.isdigit() else month_number(month)
    return PartialDate(
        day=int(day) if day else None,
        month=month_value,
        year=expand_year(year) if year else None,
    )


def _parse_compact(m: re.Match[str]) -> PartialDate:
    digits = m.group("digits")
    year, month, day = int(digits[:4]), int(digits[4:6]), int(digits[6:8])
    if digits[:2] in ("19", "20") and 1 <= month <= 12 and 1 <= day <= 31:
        return PartialDate(day=day, month=month, year=year)
    return PartialDate(day=int(digits[:2]), month=int(digits[2:4]), year=int(digits[4:8]))


@dataclass(frozen=True)
class DateRule:
    """A tagged regex plus the parser that turns its match into a PartialDate."""

    tag: str
    pattern: re.Pattern[str]
    parser: Callable[[re.Match[str]], PartialDate] = _parse_named_groups

    def parse(self, m: re.Match[str]) -> PartialDate:
        return self.parser(m)

    @staticmethod
    def matched_text(m: re.Match[str]) -> str:
        """Text of the date itself; label-prefixed rules exclude their label."""
        if "date" in m.re.groupindex and m.group("date") is not None:
            return m.group("date")
        return m.group(0)


def _rx(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE | re.ASCII)


DECLARED_DATE_RULES: tuple[DateRule, ...] = (
    DateRule("compact", _rx(r"^\s*(?P<digits>\d{8})\s*$"), _parse_compact),
    DateRule(
        "separated-ymd",
        _rx(rf"(?P<year>\d{{4}}){_NUM_SEP}(?P<month>\d{{1,2}}){_NUM_SEP}(?P<day>\d{{1,2}})"),
    ),
    DateRule(
        "separated-dmy",
        _rx(rf"(?P<day>\d{{1,2}}){_NUM_SEP}(?P<month>\d{{1,2}}){_NUM_SEP}(?P<year>\d{{2,4}})"),
    ),
    DateRule("month-name", _rx(rf"\b(?P<day>\d{{1,2}}){_SEP}{_MONTH}{_SEP}(?P<year>\d{{2,4}})\b")),
    DateRule("month-name", _rx(rf"\b{_MONTH}{_SEP}(?P<day>\d{{1,2}}){_SEP}(?P<year>\d{{2,4}})\b")),
    DateRule("year-only", _rx(r"\b(?P<year>(?:19|20)\d{2})\b")),
)

OCR_DATE_RULES: tuple[DateRule, ...] = (
    DateRule(
        "separated-dmy",
        _rx(rf"\b(?P<day>\d{{1,2}}){_NUM_SEP}(?P<month>\d{{1,2}}){_NUM_SEP}(?P<year>\d{{2,4}})\b"),
    ),
    DateRule(
        "separated-ymd",
        _rx(rf"\b(?P<year>\d{{4}}){_NUM_SEP}(?P<month>\d{{1,2}}){_NUM_SEP}(?P<day>\d{{1,2}})\b"),
    ),
    DateRule("month-name", _rx(rf"\b(?P<day>\d{{1,2}}){_SEP}{_MONTH}{_SEP}(?P<year>\d{{2,4}})\b")),
    DateRule("month-name", _rx(rf"\b{_MONTH}{_SEP}(?P<day>\d{{1,2}}){_SEP}(?P<year>\d{{2,4}})\b")),
    DateRule(
        "label-prefixed",
        _rx(
            rf"{_DOB_LABEL}(?P<date>(?P<day>\d{{1,2}}){_NUM_SEP}(?P<month>\d{{1,2}})"
            rf"{_NUM_SEP}(?P<year>\d{{2,4}}))"
        ),
    ),
    DateRule("label-prefixed", _rx(r"year\s*of\s*birth[\s:/-]*(?P<date>(?P<year>\d{4}))")),
)


def parse_declared_date(value: str) -> PartialDate:
    """Parse a user-typed date with the first matching declared rule."""
    for rule in DECLARED_DATE_RULES:
        m = rule.pattern.search(value or "")
        if m:
            return rule.parse(m)
    return PartialDate()


def scan_dates(ocr_text: str) -> Iterator[tuple[DateRule, str, PartialDate]]:
    """Yield (rule, matched text, parsed date) for every date-like span, rule by rule."""
    for rule in OCR_DATE_RULES:
        for m in rule.pattern.finditer(ocr_text or ""):
            yield rule, DateRule.matched_text(m), rule.parse(m)
