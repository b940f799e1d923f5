from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from wer_core.asr.transcription import TranscriptionError, transcribe_audio


def _response(payload=None, json_error=None, http_error=None):
    response = MagicMock()
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if http_error is not None:
        response.raise_for_status.side_effect = http_error
    return response


def test_text_payload() -> None:
    with patch("wer_core.asr.transcription.requests.post", return_value=_response({"text": "hi there"})) as post:
        text = transcribe_audio(b"abc", url="http://asr.local/asr", timeout=5)

    assert text == "hi there"
    args, kwargs = post.call_args
    assert args[0] == "http://asr.local/asr"
    assert kwargs["timeout"] == 5


def test_segment_payload_is_joined_by_line() -> None:
    payload = {"segments": [{"text": "first part"}, {"text": "second part"}]}
    with patch("wer_core.asr.transcription.requests.post", return_value=_response(payload)):
        assert transcribe_audio(b"abc") == "first part\nsecond part"


def test_http_error_reports_status_without_url() -> None:
    failing = _response()
    failing.status_code = 503
    failing.raise_for_status.side_effect = requests.HTTPError(
        "503 Server Error for url: http://asr.internal:8000/asr", response=failing
    )
    with patch("wer_core.asr.transcription.requests.post", return_value=failing):
        with pytest.raises(TranscriptionError) as excinfo:
            transcribe_audio(b"abc", url="http://asr.internal:8000/asr")

    assert str(excinfo.value) == "ASR service error (status 503)"
    assert "asr.internal" not in str(excinfo.value)


def test_connection_error_hides_url() -> None:
    refused = requests.ConnectionError("Max retries exceeded with url: http://asr.internal:8000/asr")
    with patch("wer_core.asr.transcription.requests.post", side_effect=refused):
        with pytest.raises(TranscriptionError) as excinfo:
            transcribe_audio(b"abc", url="http://asr.internal:8000/asr")

    assert str(excinfo.value) == "ASR service unreachable"


def test_invalid_json_raises() -> None:
    broken = _response(json_error=ValueError("Expecting value"))
    with patch("wer_core.asr.transcription.requests.post", return_value=broken):
        with pytest.raises(TranscriptionError, match="invalid JSON"):
            transcribe_audio(b"abc")


def test_non_object_payload_raises() -> None:
    with patch("wer_core.asr.transcription.requests.post", return_value=_response(["text"])):
        with pytest.raises(TranscriptionError):
            transcribe_audio(b"abc")
