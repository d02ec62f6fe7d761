"""
OCR collaborator for the flyer extraction engine.

This package provides:
- OCREngine / OCRError: The contract the extraction core consumes
- TesseractOCREngine: pytesseract-backed engine (optional ``ocr`` extra)
- FlyerProcessor / FlyerExtractionResult: Image -> text -> record
"""

from .base import ImageSource, OCREngine, OCRError
from .processor import FlyerExtractionResult, FlyerProcessor
from .tesseract import TesseractOCREngine

__all__ = [
    "ImageSource",
    "OCREngine",
    "OCRError",
    "FlyerExtractionResult",
    "FlyerProcessor",
    "TesseractOCREngine",
]
