from __future__ import annotations

import io
import logging
from unittest.mock import MagicMock, patch

import requests

from wer_core.models.alignment_result import InvariantViolation
from wer_core.scoring.scorer import score_words


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ready"}


def test_wer_substitution(client) -> None:
    response = client.get(
        "/wer", query_string={"hypothesis": "A cat sat.", "reference": "The cat sat"}
    )
    body = response.get_json()

    assert response.status_code == 200
    assert body["summary"] == "total WER = 1, total word = 3, wer = 33.33"
    assert body["details"] == "Error breakdown: del = 0.00, ins = 0.00, sub = 33.33"
    assert "<del>a</del>" in body["html"]
    assert body["counts"] == {"sub": 1, "ins": 0, "del": 0, "nw": 3}


def test_wer_missing_parameters_are_blank(client) -> None:
    response = client.get("/wer")
    body = response.get_json()

    assert response.status_code == 200
    assert body["wer"] == 0.0
    assert body["html"] == ""


def test_wer_rejects_oversized_transcripts(client, monkeypatch) -> None:
    monkeypatch.setattr("api.app.WER_MAX_WORDS", 2)
    response = client.get(
        "/wer", query_string={"hypothesis": "one two three", "reference": "one"}
    )
    assert response.status_code == 413
    assert "2 words" in response.get_json()["error"]


def test_wer_invariant_violation_is_logged_not_leaked(client, monkeypatch, caplog) -> None:
    violation = InvariantViolation(
        reason="failed to parse edit distance matrix at cell (1, 1)",
        hyp_words=("a",),
        ref_words=("b",),
        rows=2,
        cols=2,
    )
    monkeypatch.setattr("api.app.score_words", lambda hyp, ref: violation)

    with caplog.at_level(logging.ERROR, logger="api.app"):
        response = client.get("/wer", query_string={"hypothesis": "a", "reference": "b"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal error"}
    assert "matrix 2x2" in caplog.text
    assert "hyp=['a']" in caplog.text


def test_transcription_requires_audio(client) -> None:
    response = client.post("/transcription", data={}, content_type="multipart/form-data")
    assert response.status_code == 400


def test_transcription_forwards_audio(client) -> None:
    fake = MagicMock()
    fake.json.return_value = {"text": " hello world "}
    fake.raise_for_status.return_value = None

    with patch("wer_core.asr.transcription.requests.post", return_value=fake) as post:
        response = client.post(
            "/transcription",
            data={"audio": (io.BytesIO(b"RIFFdata"), "clip.wav")},
            content_type="multipart/form-data",
        )

    assert response.status_code == 200
    assert response.get_json() == {"data": "hello world"}
    sent = post.call_args.kwargs["files"]["file"]
    assert sent[0] == "clip.wav"
    assert sent[1] == b"RIFFdata"


def test_transcription_service_failure_is_bad_gateway(client) -> None:
    with patch(
        "wer_core.asr.transcription.requests.post",
        side_effect=requests.ConnectionError("refused"),
    ):
        response = client.post(
            "/transcription",
            data={"audio": (io.BytesIO(b"RIFFdata"), "clip.wav")},
            content_type="multipart/form-data",
        )

    assert response.status_code == 502
    assert "unreachable" in response.get_json()["error"]


def test_wer_scores_the_words_counted_for_the_cap(client, monkeypatch) -> None:
    seen = []

    def recording_score_words(hyp_words, ref_words):
        seen.append((hyp_words, ref_words))
        return score_words(hyp_words, ref_words)

    monkeypatch.setattr("api.app.score_words", recording_score_words)
    response = client.get("/wer", query_string={"hypothesis": "The cat!", "reference": "the cat sat"})

    assert response.status_code == 200
    assert seen == [(["the", "cat"], ["the", "cat", "sat"])]


def test_transcription_http_error_does_not_leak_service_url(client) -> None:
    failing = MagicMock()
    failing.status_code = 500
    failing.raise_for_status.side_effect = requests.HTTPError(
        "500 Server Error for url: http://asr.internal:8000/asr", response=failing
    )

    with patch("wer_core.asr.transcription.requests.post", return_value=failing):
        response = client.post(
            "/transcription",
            data={"audio": (io.BytesIO(b"RIFFdata"), "clip.wav")},
            content_type="multipart/form-data",
        )

    assert response.status_code == 502
    assert response.get_json() == {"error": "ASR service error (status 500)"}


def test_create_app_applies_configured_log_level(monkeypatch) -> None:
    import api.app as app_module

    monkeypatch.setattr(app_module, "WER_LOG_LEVEL", "DEBUG")
    try:
        app_module.create_app()
        assert logging.getLogger("api").level == logging.DEBUG
        assert logging.getLogger("wer_core").level == logging.DEBUG
        assert logging.getLogger("api.app").isEnabledFor(logging.DEBUG)
    finally:
        app_module.configure_logging("INFO")
