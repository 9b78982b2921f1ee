import io

import pytest
from PIL import Image, ImageDraw

from idmatch.reconciliation.models import DeclaredFields

AADHAAR_OCR_TEXT = """\
भारत सरकार
GOVERNMENT OF INDIA
Asha Verma
DOB: 14/07/1995
FEMALE
Mobile: 9876543210
1234 5678 9012
Mera Aadhaar, Meri Pehchan
"""


@pytest.fixture()
def aadhaar_ocr_text() -> str:
    """OCR output of a clean Aadhaar card front."""
    return AADHAAR_OCR_TEXT


@pytest.fixture()
def declared_fields() -> DeclaredFields:
    """Declared fields that agree with ``aadhaar_ocr_text``."""
    return DeclaredFields(
        name="Asha Verma",
        id_number="1234 5678 9012",
        date_of_birth="1995-07-14",
        phone="9876543210",
    )


@pytest.fixture()
def png_bytes() -> bytes:
    """Generate a small PNG with a line of text on it."""
    img = Image.new("RGB", (320, 80), "white")
    ImageDraw.Draw(img).text((10, 30), "GOVERNMENT OF INDIA", fill="black")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
