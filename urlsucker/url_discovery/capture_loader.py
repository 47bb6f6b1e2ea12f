"""
urlsucker/url_discovery/capture_loader.py

Loads captured responses from a JSONL file so traffic can be replayed
through the engine without a live host.

Each line is one JSON object:
    {"url": "https://example.com/app.js", "response_body": "...",
     "mime_type": "application/javascript", "response_headers": {...}}
"""

import json
from pathlib import Path

from urlsucker.url_discovery.models import CapturedResponse
from urlsucker.utils.exceptions import CaptureFileNotFoundError
from urlsucker.utils.logger import get_logger

logger = get_logger(name=__name__)


def load_captured_responses(jsonl_path: str | Path) -> list[CapturedResponse]:
    """
    Read every response from a JSONL capture.

    Blank and malformed lines are skipped with a warning.

    Args:
        jsonl_path: Path to the capture file.

    Returns:
        Responses in file order.

    Raises:
        CaptureFileNotFoundError: If the file does not exist.
    """
    path = Path(jsonl_path)
    if not path.exists():
        raise CaptureFileNotFoundError(f"JSONL file not found: {jsonl_path}")

    responses: list[CapturedResponse] = []
    with open(path, mode="r", encoding="utf-8") as f:
        for line_num, line in enumerate(f):
            line = line.strip()
            if not line:
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError:
                logger.warning("Skipping malformed JSON at line %d", line_num + 1)
                continue
            if not isinstance(data, dict):
                logger.warning("Skipping non-object record at line %d", line_num + 1)
                continue
            try:
                response = CapturedResponse.from_capture_record(data)
            except (ValueError, TypeError):
                logger.warning("Skipping invalid record at line %d", line_num + 1)
                continue
            responses.append(response)

    logger.info("Loaded %d captured responses from %s", len(responses), path)
    return responses
