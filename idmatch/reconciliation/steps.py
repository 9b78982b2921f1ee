from collections.abc import Callable

from idmatch.classification.classifier import classify_document
from idmatch.classification.models import DocumentClassification
from idmatch.logging.logger import Log
from idmatch.reconciliation.models import (
    FieldName,
    FieldValidation,
    OverallStatus,
    ReconciliationStage,
    ReconciliationVerdict,
    Severity,
)
from idmatch.reconciliation.pipeline import ReconciliationContext, ReconciliationStep
from idmatch.reconciliation.rules import FieldRule

CLASSIFICATION_FAILED_MESSAGE = "Document does not appear to be an Aadhaar card"


class ClassifyDocumentStep(ReconciliationStep):
    def __init__(
        self,
        classifier: Callable[[str], DocumentClassification] = classify_document,
    ) -> None:
        self._classifier = classifier

    def run(self, context: ReconciliationContext) -> ReconciliationContext:
        context.stage = ReconciliationStage.CLASSIFYING
        classification = self._classifier(context.ocr_text)
        context.classification = classification
        if classification.is_expected_type:
            return context

        Log.warning(
            f"Document rejected by classifier (confidence {classification.confidence:.2f})"
        )
        entry = FieldValidation(
            field_name=FieldName.DOCUMENT_TYPE,
            found=False,
            confidence=classification.confidence,
            message=CLASSIFICATION_FAILED_MESSAGE,
            severity=Severity.ERROR,
        )
        context.verdict = ReconciliationVerdict(
            overall_status=OverallStatus.INVALID,
            classification=classification,
            raw_ocr_text=context.ocr_text,
            per_field={FieldName.DOCUMENT_TYPE: entry},
        )
        context.stage = ReconciliationStage.AGGREGATED
        return context


class MatchFieldsStep(ReconciliationStep):
    def __init__(self, rules: tuple[FieldRule, ...]) -> None:
        self._rules = rules

    def run(self, context: ReconciliationContext) -> ReconciliationContext:
        context.stage = ReconciliationStage.MATCHING
        for rule in self._rules:
            result = rule.matcher(rule.declared_value(context.declared), context.ocr_text)
            context.matches[rule.field_name] = result
            Log.debug(
                "Field matched",
                field=rule.field_name.value,
                found=result.found,
                confidence=f"{result.confidence:.2f}",
            )
        return context


class AggregateStep(ReconciliationStep):
    def __init__(self, rules: tuple[FieldRule, ...]) -> None:
        self._rules = rules

    def run(self, context: ReconciliationContext) -> ReconciliationContext:
        if context.classification is None:
            raise ValueError("ReconciliationContext.classification must be set before aggregation")

        per_field = {}
        extracted = {}
        for rule in self._rules:
            result = context.matches.get(rule.field_name)
            if result is None:
                raise ValueError(f"No match result for field '{rule.field_name.value}'")
            per_field[rule.field_name] = rule.validate(result)
            extracted[rule.field_name] = result.extracted

        context.verdict = ReconciliationVerdict(
            overall_status=self._overall_status(per_field),
            classification=context.classification,
            raw_ocr_text=context.ocr_text,
            per_field=per_field,
            extracted_fields=extracted,
        )
        context.stage = ReconciliationStage.AGGREGATED
        return context

    def _overall_status(self, per_field: dict[FieldName, FieldValidation]) -> OverallStatus:
        critical = {rule.field_name for rule in self._rules if rule.critical}
        if any(not v.found for name, v in per_field.items() if name in critical):
            return OverallStatus.INVALID
        if any(v.severity is not Severity.SUCCESS for v in per_field.values()):
            return OverallStatus.WARNING
        return OverallStatus.VALID
