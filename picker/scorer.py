"""Edit-distance scoring for the branch picker."""

from __future__ import annotations

from typing import Sequence

# Integer scale applied to the length-normalized distance so sub-unit
# differences survive the conversion to int.
SCALE = 1000


def edit_distance(query: Sequence[str], candidate: Sequence[str]) -> int:
    """Return the unit-cost Levenshtein distance from ``query`` to ``candidate``.

    Uses a single row of ``len(candidate) + 1`` cells that is overwritten in
    place, one pass per query character.
    """
    row = list(range(len(candidate) + 1))

    for y in range(1, len(query) + 1):
        top_left = row[0]
        row[0] = y
        for x in range(1, len(candidate) + 1):
            cost = 0 if query[y - 1] == candidate[x - 1] else 1
            above = row[x]
            row[x] = min(top_left + cost, row[x - 1] + 1, above + 1)
            top_left = above

    # NOTE: adjacent matching characters are not rewarded, so "dvlp" and
    # "d-v-l-p" style matches tie when their distances tie.
    return row[-1]


def score(query: Sequence[str], candidate: Sequence[str]) -> int:
    """Score how far ``candidate`` is from ``query`` (lower is closer).

    The distance is divided by the candidate length so long and short
    candidates compare on relative rather than absolute dissimilarity.
    An empty query scores every candidate 0.
    """
    if not query:
        return 0
    distance = edit_distance(query, candidate)
    return round(distance / max(len(candidate), 1) * SCALE)
