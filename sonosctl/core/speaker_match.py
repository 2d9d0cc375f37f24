"""Speaker name matching logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rapidfuzz.distance import DamerauLevenshtein

from sonosctl.core.confirm import Confirmer
from sonosctl.core.errors import NoMatchError, NotConfirmedError
from sonosctl.core.model import MatchOutcome, Resolution, Speaker

AUTO_ACCEPT_DISTANCE = 2
MAX_SUGGEST_DISTANCE = 5
LOGGER = logging.getLogger(__name__)


def match_distance(query: str, name: str) -> int:
    return DamerauLevenshtein.distance(query.casefold(), name.casefold())


def rank_speakers(query: str, speakers: Sequence[Speaker]) -> list[tuple[int, Speaker]]:
    scored = [(match_distance(query, speaker.name), speaker) for speaker in speakers]
    scored.sort(key=lambda item: item[0])
    return scored


def confirmation_prompt(query: str, speaker: Speaker) -> str:
    return f"Couldn't find speaker '{query}', did you mean {speaker.name}? [Y/n] "


def resolve_speaker(query: str, speakers: Sequence[Speaker], confirmer: Confirmer) -> Resolution:
    """Pick the speaker whose name is closest to ``query``.

    Distances up to AUTO_ACCEPT_DISTANCE are accepted outright, distances up
    to MAX_SUGGEST_DISTANCE need the user to confirm the suggestion, and
    anything further away is rejected.
    """
    ranked = rank_speakers(query, speakers)
    if not ranked:
        raise NoMatchError("Couldn't find a speaker by that name: no speakers discovered")

    distance, best = ranked[0]
    LOGGER.debug("Best match for %r is %r at distance %d", query, best.name, distance)

    if distance > MAX_SUGGEST_DISTANCE:
        raise NoMatchError(f"Couldn't find a speaker by the name '{query}'")

    if distance > AUTO_ACCEPT_DISTANCE:
        if not confirmer.confirm(confirmation_prompt(query, best)):
            raise NotConfirmedError(f"Couldn't find a speaker by the name '{query}'")
        return Resolution(speaker=best, distance=distance, outcome=MatchOutcome.CONFIRMED)

    return Resolution(speaker=best, distance=distance, outcome=MatchOutcome.EXACT)
