"""
Tesseract-backed OCR engine (pytesseract + Pillow).

Install with the ``ocr`` extra: ``pip install flyer-event-extraction[ocr]``;
the ``tesseract`` binary must be on PATH or configured via
``FLYER_TESSERACT_CMD``.
"""

from __future__ import annotations

import io
import logging
from typing import Optional

try:
    import pytesseract
    from PIL import Image
except ImportError:
    pytesseract = None
    Image = None

from flyer_extraction.ocr.base import ImageSource, OCREngine, OCRError

logger = logging.getLogger(__name__)


class TesseractOCREngine(OCREngine):
    """OCR engine running the local Tesseract binary."""

    name = "tesseract"

    def __init__(self, language: str = "eng", tesseract_cmd: Optional[str] = None):
        """Initialize the engine."""
        if pytesseract is None or Image is None:
            raise ImportError(
                "pytesseract and Pillow are required for OCR. "
                "Install them with: pip install pytesseract Pillow"
            )
        self.language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def extract_text(self, image: ImageSource) -> str:
        try:
            with self._open(image) as img:
                text = pytesseract.image_to_string(img, lang=self.language)
        except pytesseract.TesseractNotFoundError as e:
            raise OCRError(str(e)) from e
        except pytesseract.TesseractError as e:
            raise OCRError(f"Tesseract failed: {e}") from e
        except OSError as e:
            raise OCRError(f"Cannot read image: {e}") from e

        logger.debug(f"Tesseract returned {len(text)} characters")
        return text or ""

    @staticmethod
    def _open(image: ImageSource):
        if isinstance(image, bytes):
            return Image.open(io.BytesIO(image))
        return Image.open(image)
