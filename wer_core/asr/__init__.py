"""Client for the external speech-recognition service."""
from .transcription import TranscriptionError, transcribe_audio

__all__ = ["TranscriptionError", "transcribe_audio"]
