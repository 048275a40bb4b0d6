# src/sonify/mood/classifier.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @classmethod
    def parse(cls, value: Any) -> "SentimentLabel":
        """
        Normalizes a raw label to one of the three moods by lower-casing it.
        Anything unrecognized (including non-strings and padded labels) is neutral.
        """
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        return cls.NEUTRAL


class ClassificationOutcome(str, Enum):
    CLASSIFIED = "classified"
    DEFAULTED = "defaulted"


@dataclass(frozen=True)
class ClassificationResult:
    label: SentimentLabel
    outcome: ClassificationOutcome
    raw_label: Optional[str] = None
    error: Optional[str] = None

    @property
    def defaulted(self) -> bool:
        return self.outcome is ClassificationOutcome.DEFAULTED

    @classmethod
    def fallback(cls, error: str, raw_label: Optional[str] = None) -> "ClassificationResult":
        return cls(
            label=SentimentLabel.NEUTRAL,
            outcome=ClassificationOutcome.DEFAULTED,
            raw_label=raw_label,
            error=error,
        )


class SentimentClassifier:
    """
    Client for a remote text-classification endpoint (Hugging Face Inference API).

    Remote failures never propagate: a network error, a non-2xx status or an
    unexpected body all resolve to a neutral, defaulted result.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def classify(self, text: Optional[str]) -> SentimentLabel:
        return self.analyze(text).label

    def analyze(self, text: Optional[str]) -> ClassificationResult:
        """
        Sends the text to the inference endpoint and normalizes the answer.

        Args:
            text (str | None): The user's query. None skips the remote call.

        Returns:
            ClassificationResult: The label, and whether it was actually classified
                                  or defaulted to neutral.
        """
        if text is None:
            return ClassificationResult.fallback("no input text")

        try:
            resp = self.session.post(
                self.api_url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={"inputs": text},
                timeout=self.timeout,
            )
            resp.raise_for_status()  # Non-2xx bodies are never parsed as predictions
        except requests.RequestException as e:
            logger.warning(f"Error during sentiment analysis at {self.api_url}: {e}")
            return ClassificationResult.fallback(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error calling sentiment API at {self.api_url}: {e}")
            return ClassificationResult.fallback(str(e))

        try:
            body = resp.json()
        except ValueError as e:
            logger.warning(f"Sentiment API returned a body that is not JSON: {e}")
            return ClassificationResult.fallback(f"invalid JSON: {e}")
        except Exception as e:
            logger.warning(f"Could not decode sentiment API response: {e!r}")
            return ClassificationResult.fallback(f"undecodable response: {e!r}")

        try:
            return self._parse_prediction(body)
        except Exception as e:
            logger.exception(f"Could not read sentiment API response: {e}")
            return ClassificationResult.fallback(str(e))

    def _parse_prediction(self, body: Any) -> ClassificationResult:
        if not isinstance(body, list) or not body:
            logger.warning(f"Unexpected sentiment API response: {body!r}")
            return ClassificationResult.fallback("empty or non-array response")

        first = body[0]
        raw_label = first.get("label") if isinstance(first, dict) else None
        if not isinstance(raw_label, str):
            return ClassificationResult.fallback("response has no label")

        label = SentimentLabel.parse(raw_label)
        if label.value != raw_label.lower():
            logger.info(f"Unrecognized sentiment label '{raw_label}', using neutral")
            return ClassificationResult.fallback("unrecognized label", raw_label=raw_label)

        return ClassificationResult(
            label=label,
            outcome=ClassificationOutcome.CLASSIFIED,
            raw_label=raw_label,
        )

    def close(self) -> None:
        """Closes the HTTP session, dropping any pooled connections."""
        self.session.close()
