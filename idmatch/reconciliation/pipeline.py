from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from idmatch.classification.models import DocumentClassification
from idmatch.matching.models import MatchResult
from idmatch.reconciliation.models import (
    DeclaredFields,
    FieldName,
    ReconciliationStage,
    ReconciliationVerdict,
)


@dataclass(slots=True)
class ReconciliationContext:
    """Working state of one submission; discarded once the verdict is built."""

    declared: DeclaredFields
    ocr_text: str
    stage: ReconciliationStage = ReconciliationStage.PENDING
    classification: DocumentClassification | None = None
    matches: dict[FieldName, MatchResult] = field(default_factory=dict)
    verdict: ReconciliationVerdict | None = None

    @property
    def is_terminal(self) -> bool:
        return self.stage is ReconciliationStage.AGGREGATED


class ReconciliationStep(ABC):
    @abstractmethod
    def run(self, context: ReconciliationContext) -> ReconciliationContext:
        raise NotImplementedError
