from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """Outcome of reconciling one declared field against OCR text."""

    found: bool
    confidence: float = 0.0
    extracted: str | None = None

    @classmethod
    def not_found(cls) -> "MatchResult":
        return cls(found=False, confidence=0.0)


@dataclass(frozen=True)
class PartialDate:
    """Day/month/year triple; components that could not be read are None."""

    day: int | None = None
    month: int | None = None
    year: int | None = None

    @property
    def is_year_only(self) -> bool:
        return self.year is not None and self.day is None and self.month is None
