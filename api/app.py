import logging

from flask import Flask, jsonify, request

from api.config import WER_HOST, WER_LOG_LEVEL, WER_MAX_WORDS, WER_PORT
from api.schemas import ErrorResponse, HealthResponse, TranscriptionResponse
from wer_core.alignment.tokenizer import tokenize_transcript
from wer_core.asr.transcription import TranscriptionError, transcribe_audio
from wer_core.models.alignment_result import InvariantViolation
from wer_core.scoring.scorer import score_words

logger = logging.getLogger(__name__)


def _error(message, status):
    return jsonify(ErrorResponse(error=message).model_dump()), status


def configure_logging(level=None):
    """Apply WER_LOG_LEVEL to the service loggers, adding a root handler if none exists."""
    level = level or WER_LOG_LEVEL
    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    for name in ("api", "wer_core"):
        logging.getLogger(name).setLevel(level)


def create_app():
    configure_logging()
    app = Flask(__name__)

    # ============================================================================
    # ROUTES - HEALTH
    # ============================================================================
    @app.route('/health', methods=['GET'])
    def health():
        return jsonify(HealthResponse().model_dump())

    # ============================================================================
    # ROUTES - WORD ERROR RATE
    # ============================================================================
    @app.route('/wer', methods=['GET'])
    def wer():
        """Score one (hypothesis, reference) pair and return the highlighted diff."""
        hypothesis = request.args.get('hypothesis', '')
        reference = request.args.get('reference', '')

        hyp_words = tokenize_transcript(hypothesis)
        ref_words = tokenize_transcript(reference)
        if max(len(hyp_words), len(ref_words)) > WER_MAX_WORDS:
            logger.info(
                "Rejected /wer request: %d hyp words, %d ref words",
                len(hyp_words), len(ref_words),
            )
            return _error(f"Transcripts are limited to {WER_MAX_WORDS} words", 413)

        result = score_words(hyp_words, ref_words)
        if isinstance(result, InvariantViolation):
            logger.error("WER calculation mistake: %s", result.describe())
            return _error("internal error", 500)

        return jsonify(result.model_dump(by_alias=True))

    # ============================================================================
    # ROUTES - TRANSCRIPTION PROXY
    # ============================================================================
    @app.route('/transcription', methods=['POST'])
    def transcription():
        """Forward an uploaded recording to the ASR service."""
        if 'audio' not in request.files:
            return _error("No audio file", 400)

        file = request.files['audio']
        audio = file.read()
        if not audio:
            return _error("Empty audio file", 400)

        try:
            text = transcribe_audio(
                audio,
                filename=file.filename or 'audio.wav',
                content_type=file.mimetype or 'audio/wav',
            )
        except TranscriptionError as e:
            return _error(str(e), 502)

        return jsonify(TranscriptionResponse(data=text).model_dump())

    return app


app = create_app()

if __name__ == '__main__':
    app.run(debug=False, host=WER_HOST, port=WER_PORT)
