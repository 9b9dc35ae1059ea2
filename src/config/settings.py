"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Propagator defaults (used by PropagatorConfig.from_settings) ---
SPAN_SOURCE_TYPE: str = os.getenv("SPAN_SOURCE_TYPE", "Entity")
SPAN_TARGET_TYPE: str = os.getenv("SPAN_TARGET_TYPE", "Sentence")
SPAN_RESPECT_WORD_BOUNDARIES: bool = os.getenv("SPAN_RESPECT_WORD_BOUNDARIES", "true").lower() == "true"
SPAN_CASE_SENSITIVE: bool = os.getenv("SPAN_CASE_SENSITIVE", "true").lower() == "true"

# --- NLP Models ---
SPACY_MODEL: str = os.getenv("SPACY_MODEL", "en_core_web_sm")

# --- Batch runner ---
INPUT_DIR: str = os.getenv("SPAN_INPUT_DIR", "documents/in")
OUTPUT_DIR: str = os.getenv("SPAN_OUTPUT_DIR", "documents/out")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
