import time
from concurrent.futures import ThreadPoolExecutor

from sonify.mood import config
from sonify.mood.classifier import SentimentClassifier


def test_get_classifier_is_shared(monkeypatch):
    monkeypatch.setattr(config, "_classifier", None)
    monkeypatch.setattr(config, "SENTIMENT_API_URL", "https://inference.example/sentiment")
    monkeypatch.setattr(config, "SENTIMENT_API_TIMEOUT", 4.0)

    first = config.get_classifier()
    assert isinstance(first, SentimentClassifier)
    assert first is config.get_classifier()
    assert first.api_url == "https://inference.example/sentiment"
    assert first.timeout == 4.0

    config.reset_classifier()
    assert config._classifier is None
    assert config.get_classifier() is not first
    config.reset_classifier()


def test_reset_without_classifier_is_a_no_op(monkeypatch):
    monkeypatch.setattr(config, "_classifier", None)
    config.reset_classifier()
    assert config._classifier is None


def test_concurrent_first_calls_build_one_classifier(monkeypatch):
    built = []

    class SlowClassifier:
        def __init__(self, **kwargs):
            time.sleep(0.05)
            built.append(self)

        def close(self):
            pass

    monkeypatch.setattr(config, "_classifier", None)
    monkeypatch.setattr(config, "SentimentClassifier", SlowClassifier)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: config.get_classifier(), range(8)))

    assert len(built) == 1
    assert all(result is built[0] for result in results)
