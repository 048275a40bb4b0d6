# src/sonify/mood/playlists.py
from types import MappingProxyType
from typing import Union

from .classifier import SentimentLabel

MOOD_PLAYLISTS = MappingProxyType({
    SentimentLabel.POSITIVE: ("Happy Vibes", "Good Times", "Uplifting Beats"),
    SentimentLabel.NEGATIVE: ("Chill Songs", "Calm Down", "Reflective Moments"),
    SentimentLabel.NEUTRAL: ("Easy Listening", "Background Beats", "Mellow Tunes"),
})


def resolve(label: Union[SentimentLabel, str]) -> list[str]:
    """
    Returns the playlist names for a mood, as a new list.
    Labels outside the table get the neutral playlists.
    """
    playlists = MOOD_PLAYLISTS.get(SentimentLabel.parse(label), MOOD_PLAYLISTS[SentimentLabel.NEUTRAL])
    return list(playlists)
