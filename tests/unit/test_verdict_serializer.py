import json

from idmatch.reconciliation.models import DeclaredFields
from idmatch.reconciliation.reconciler import build_reconciler
from idmatch.reconciliation.serializer import VerdictSerializer
from idmatch.verification.models import OcrFailure


class TestSerializeVerdict:
    def test_structure(self, declared_fields: DeclaredFields, aadhaar_ocr_text: str) -> None:
        verdict = build_reconciler().reconcile(declared_fields, aadhaar_ocr_text)
        output = VerdictSerializer().serialize(verdict)
        assert output["status"] == "valid"
        assert output["can_proceed"] is True
        assert output["document"]["is_expected_type"] is True
        assert list(output["fields"]) == ["name", "idNumber", "dateOfBirth", "phone"]
        assert output["fields"]["name"] == {
            "found": True,
            "confidence": 1.0,
            "message": "Name found with 100% confidence",
            "severity": "success",
        }
        assert output["extracted"]["idNumber"] == "1234 5678 9012"
        assert output["ocr_text"] == aadhaar_ocr_text

    def test_rejected_document(self, declared_fields: DeclaredFields) -> None:
        verdict = build_reconciler().reconcile(declared_fields, "Electricity bill")
        output = VerdictSerializer().serialize(verdict)
        assert output["status"] == "invalid"
        assert output["can_proceed"] is False
        assert list(output["fields"]) == ["documentType"]
        assert output["extracted"] == {}

    def test_output_is_json_serializable(
        self, declared_fields: DeclaredFields, aadhaar_ocr_text: str
    ) -> None:
        verdict = build_reconciler().reconcile(declared_fields, aadhaar_ocr_text)
        parsed = json.loads(json.dumps(VerdictSerializer().serialize(verdict)))
        assert parsed["fields"]["phone"]["severity"] == "success"


class TestSerializeOcrFailure:
    def test_structure(self) -> None:
        output = VerdictSerializer().serialize(OcrFailure(message="boom", attempts=2))
        assert output == {
            "status": "ocr_failed",
            "can_proceed": False,
            "message": "boom",
            "attempts": 2,
        }
