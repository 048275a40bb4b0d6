# src/sonify/mood/composer.py
from types import MappingProxyType
from typing import Sequence, Union

from .classifier import SentimentLabel

MESSAGE_TEMPLATES = MappingProxyType({
    SentimentLabel.POSITIVE: "You seem in high spirits! 🎉 Here's a playlist to keep those vibes going: {playlists}",
    SentimentLabel.NEGATIVE: "It seems like things might be a bit rough. Here are some calming tunes to lift your spirits: {playlists}",
    SentimentLabel.NEUTRAL: "I sense a chill mood! Here are some mellow tunes for your vibe: {playlists}",
})


def compose(label: Union[SentimentLabel, str], playlists: Sequence[str]) -> str:
    """Builds the bot's reply. Any label other than positive or negative gets the neutral wording."""
    template = MESSAGE_TEMPLATES[SentimentLabel.parse(label)]
    return template.format(playlists=", ".join(playlists))
