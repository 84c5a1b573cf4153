from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

# ── Remote completion service ────────────────────────────────────
CLAIMS_API_KEY = os.getenv("CLAIMS_API_KEY", os.getenv("OPENAI_API_KEY", ""))
CLAIMS_BASE_URL = os.getenv("CLAIMS_BASE_URL", "https://api.openai.com/v1")
CLAIMS_MODEL_ID = os.getenv("CLAIMS_MODEL_ID", "gpt-4o-mini")
CLAIMS_TEMPERATURE = float(os.getenv("CLAIMS_TEMPERATURE", "0.3"))
CLAIMS_MAX_TOKENS = int(os.getenv("CLAIMS_MAX_TOKENS", "1000"))
CLAIMS_REQUEST_TIMEOUT = float(os.getenv("CLAIMS_REQUEST_TIMEOUT", "30"))

# ── Local emotion classifier ─────────────────────────────────────
CLAIMS_EMOTION_MODEL = os.getenv("CLAIMS_EMOTION_MODEL", "j-hartmann/emotion-english-distilroberta-base")
CLAIMS_EMOTION_THRESHOLD = float(os.getenv("CLAIMS_EMOTION_THRESHOLD", "0.3"))

# ── Pipeline ─────────────────────────────────────────────────────
CLAIMS_STRATEGY = os.getenv("CLAIMS_STRATEGY", "").strip().lower() or None
CLAIMS_VOCABULARY_POLICY = os.getenv("CLAIMS_VOCABULARY_POLICY", "open").strip().lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", os.getenv("CLAIMS_LOG_LEVEL", "INFO")).upper()
