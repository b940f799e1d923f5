"""Forward recorded audio to the ASR service and return its transcript."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

ASR_SERVICE_URL = os.environ.get("ASR_SERVICE_URL", "http://localhost:8000/asr")
ASR_TIMEOUT = float(os.environ.get("ASR_TIMEOUT", "60"))


class TranscriptionError(Exception):
    """The ASR service could not be reached or gave an unusable answer."""


def _join_segments(result: Dict[str, Any]) -> str:
    # Some recognizers answer with one entry per recognized segment
    segments = result.get("segments") or []
    return "\n".join(s.get("text", "") for s in segments if isinstance(s, dict))


def transcribe_audio(
    audio: bytes,
    filename: str = "audio.wav",
    content_type: str = "audio/wav",
    url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Send audio bytes to the ASR service.

    The service is expected to answer {"text": "..."}; a {"segments": [...]}
    answer is joined line by line.

    Raises:
        TranscriptionError: on network errors, HTTP errors or malformed JSON
    """
    url = url or ASR_SERVICE_URL
    timeout = ASR_TIMEOUT if timeout is None else timeout

    try:
        response = requests.post(
            url,
            files={"file": (filename, audio, content_type)},
            timeout=timeout,
        )
        response.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "unknown"
        logger.warning("ASR service at %s answered status %s: %s", url, status, e)
        raise TranscriptionError(f"ASR service error (status {status})") from e
    except requests.RequestException as e:
        logger.warning("ASR service call to %s failed: %s", url, e)
        raise TranscriptionError("ASR service unreachable") from e

    try:
        result = response.json()
    except ValueError as e:
        logger.warning("ASR service at %s returned invalid JSON: %s", url, e)
        raise TranscriptionError("ASR service returned invalid JSON") from e

    if not isinstance(result, dict):
        raise TranscriptionError("ASR service returned an unexpected payload")

    text = result.get("text")
    if text is None:
        text = _join_segments(result)
    return str(text).strip()
