"""HTTP client for the external OCR service.

The service accepts a multipart image upload at ``POST {ocr_url}/ocr`` and
answers with JSON carrying either plain text (``full_text`` or ``text``)
or an already structured ``items`` list.
"""

from __future__ import annotations

import time
from typing import Any

import httpx

from receiptsplit.domain.session import ExtractionResult
from receiptsplit.receipt.ocr_helpers import resize_image_bytes
from receiptsplit.receipt.receipt_parser import dedupe_items
from receiptsplit.receipt.structured_response import items_from_payload
from receiptsplit.receipt.text_parser import MAX_ITEMS
from receiptsplit.runtime.logging import get_logger
from receiptsplit.runtime.settings import DEFAULT_OCR_TIMEOUT

logger = get_logger(__name__)


class OCRServiceUnavailable(RuntimeError):
    """Raised when the OCR service cannot be reached or returns an error."""


def call_ocr_service(
    image_bytes: bytes,
    ocr_url: str,
    *,
    filename: str = "receipt.jpg",
    timeout: float = DEFAULT_OCR_TIMEOUT,
) -> dict[str, Any]:
    """
    Upload a receipt image and return the decoded JSON response.

    Raises:
        OCRServiceUnavailable: connection failure, non-200 status or a
            response body that is not a JSON object.
    """
    ocr_url = ocr_url.rstrip("/")
    logger.info("Sending receipt to OCR service at %s...", ocr_url)

    try:
        upload_bytes = resize_image_bytes(image_bytes)
    except OSError as exc:
        # Pillow raises UnidentifiedImageError (an OSError) for non-images.
        raise OCRServiceUnavailable(f"Could not read receipt image: {exc}") from exc

    try:
        start_time = time.time()
        response = httpx.post(
            f"{ocr_url}/ocr",
            files={"file": (filename, upload_bytes, "image/jpeg")},
            timeout=timeout,
        )
        logger.info("OCR service returned in %.2f seconds", time.time() - start_time)
    except httpx.RequestError as exc:
        logger.error("Failed to connect to OCR service: %s", exc)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {exc}") from exc

    if response.status_code != 200:
        # Body may contain receipt text; keep it out of the logs.
        logger.error("OCR service error: %s", response.status_code)
        raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise OCRServiceUnavailable("OCR service returned invalid JSON") from exc
    if not isinstance(payload, dict):
        raise OCRServiceUnavailable("OCR service returned an unexpected payload")
    return payload


def extraction_from_payload(payload: dict[str, Any]) -> ExtractionResult:
    """Map a decoded OCR response onto an ExtractionResult."""
    raw_items = payload.get("items")
    if isinstance(raw_items, list):
        items = dedupe_items(items_from_payload([raw for raw in raw_items if isinstance(raw, dict)]))
        return ExtractionResult(status="ok", items=tuple(items[:MAX_ITEMS]))

    text = payload.get("full_text", payload.get("text"))
    if isinstance(text, str):
        return ExtractionResult(status="ok", text=text)

    return ExtractionResult(status="failed", error="OCR service response had no text or items")


class OcrServiceExtractor:
    """Receipt extractor backed by the OCR HTTP service.

    Calling an instance never raises for service problems; failures come
    back as ``ExtractionResult(status="failed")``.
    """

    def __init__(self, ocr_url: str, timeout: float = DEFAULT_OCR_TIMEOUT) -> None:
        self.ocr_url = ocr_url
        self.timeout = timeout

    def __call__(self, image_bytes: bytes) -> ExtractionResult:
        try:
            payload = call_ocr_service(image_bytes, self.ocr_url, timeout=self.timeout)
        except OCRServiceUnavailable as exc:
            return ExtractionResult(status="failed", error=str(exc))
        return extraction_from_payload(payload)
