# src/sonify/mood/config.py
import logging
import os
import threading
from dotenv import load_dotenv

from .classifier import SentimentClassifier

load_dotenv(".env")

logger = logging.getLogger(__name__)

DEFAULT_SENTIMENT_API_URL = (
    "https://api-inference.huggingface.co/models/cardiffnlp/twitter-roberta-base-sentiment"
)

HUGGING_FACE_API_KEY = os.getenv("HUGGING_FACE_API_KEY", "")
SENTIMENT_API_URL = os.getenv("SENTIMENT_API_URL", DEFAULT_SENTIMENT_API_URL)
SENTIMENT_API_TIMEOUT = float(os.getenv("SENTIMENT_API_TIMEOUT", "10"))

# --- Server & Other Constants ---
HOST = os.getenv("SONIFY_HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
STATIC_DIR = os.getenv("SONIFY_STATIC_DIR", "public")
DEBUG = os.getenv("SONIFY_DEBUG", "false").lower() == "true"


def configure_logging_from_env() -> None:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


_classifier = None
_classifier_lock = threading.Lock()

def get_classifier() -> SentimentClassifier:
    """
    Returns a shared instance of the sentiment classifier client.
    Creates it on the first call.
    """
    global _classifier
    with _classifier_lock:
        if _classifier is None:
            if not HUGGING_FACE_API_KEY:
                logger.warning("HUGGING_FACE_API_KEY is not set; every query will be treated as neutral.")
            _classifier = SentimentClassifier(
                api_url=SENTIMENT_API_URL,
                api_key=HUGGING_FACE_API_KEY,
                timeout=SENTIMENT_API_TIMEOUT,
            )
        return _classifier


def reset_classifier() -> None:
    """Closes the shared classifier, if any. The next get_classifier() call builds a new one."""
    global _classifier
    with _classifier_lock:
        if _classifier is not None:
            _classifier.close()
            _classifier = None
