"""
Contract: OCR engine.

The extraction core only needs one thing from OCR: a single blob of text for
one flyer image. No layout, no per-field confidence.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Union

ImageSource = Union[str, Path, bytes, BinaryIO]


class OCRError(RuntimeError):
    """The image could not be read or recognised."""


class OCREngine(ABC):
    """
    Port: turn a flyer image into raw text.

    Implementations raise OCRError for unreadable images and may return an
    empty string when no text is found.
    """

    name: str = "ocr"

    @abstractmethod
    def extract_text(self, image: ImageSource) -> str:
        """
        Recognise the text on an image.

        Args:
            image: File path, raw bytes or a binary file object

        Returns:
            Recognised text (possibly empty)

        Raises:
            OCRError: If the image cannot be processed
        """
        ...
