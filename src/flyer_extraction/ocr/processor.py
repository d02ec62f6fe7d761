"""
Flyer processor: image -> OCR text -> PartialEventRecord.
"""

import datetime
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from flyer_extraction.extraction.parser import EventTextParser, get_default_parser
from flyer_extraction.ocr.base import ImageSource, OCREngine, OCRError
from flyer_extraction.schemas.event import PartialEventRecord

logger = logging.getLogger(__name__)


class FlyerExtractionResult(BaseModel):
    """OCR text together with the record extracted from it."""

    model_config = ConfigDict(frozen=True)

    extracted_text: str = Field(default="", description="Raw OCR output")
    record: PartialEventRecord
    ocr_engine: str = ""
    ocr_error: Optional[str] = Field(
        default=None, description="Why OCR produced no text, if it failed"
    )

    @property
    def has_text(self) -> bool:
        return bool(self.extracted_text.strip())


class FlyerProcessor:
    """
    Run OCR on a flyer image and extract the event fields.

    OCR failures are not propagated: they produce the empty-text record and
    the error message is kept on the result.
    """

    def __init__(self, engine: OCREngine, parser: Optional[EventTextParser] = None):
        self.engine = engine
        self.parser = parser or get_default_parser()

    def process(
        self,
        image: ImageSource,
        reference_date: Optional[datetime.date] = None,
    ) -> FlyerExtractionResult:
        """
        Process one flyer image.

        Args:
            image: Path, bytes or binary file object
            reference_date: Date used to fill in omitted years

        Returns:
            FlyerExtractionResult
        """
        text = ""
        error = None
        try:
            text = self.engine.extract_text(image) or ""
        except OCRError as e:
            logger.warning(f"OCR failed with {self.engine.name}: {e}")
            error = str(e)

        if not text.strip():
            logger.info("No text could be extracted from the image")

        return FlyerExtractionResult(
            extracted_text=text,
            record=self.parser.parse(text, reference_date),
            ocr_engine=self.engine.name,
            ocr_error=error,
        )

    def process_text(
        self,
        text: str,
        reference_date: Optional[datetime.date] = None,
    ) -> FlyerExtractionResult:
        """Skip OCR and extract from already recognised text."""
        return FlyerExtractionResult(
            extracted_text=text or "",
            record=self.parser.parse(text, reference_date),
            ocr_engine=self.engine.name,
        )
