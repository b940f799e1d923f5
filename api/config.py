"""
Service configuration.

Values are read once from the environment at import time.
ASR_SERVICE_URL and ASR_TIMEOUT live with the ASR client in
wer_core.asr.transcription.
"""
import os

# Upper bound on words per transcript; the distance matrix grows with the
# product of both lengths
WER_MAX_WORDS = int(os.environ.get("WER_MAX_WORDS", "2000"))

WER_LOG_LEVEL = os.environ.get("WER_LOG_LEVEL", "INFO").upper()

WER_HOST = os.environ.get("WER_HOST", "0.0.0.0")
WER_PORT = int(os.environ.get("WER_PORT", "5000"))
