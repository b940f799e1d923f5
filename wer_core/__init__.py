"""Core word error rate engine: normalization, alignment, scoring and ASR access."""
