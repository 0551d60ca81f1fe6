"""Fuzzy text ranking over in-memory product records."""

from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class WeightedField:
    """A record attribute to match against, and how much a hit on it counts."""

    name: str
    weight: float = 1.0


def text_similarity(term: str, value: str) -> float:
    """Similarity of ``term`` against one text value, in [0.0, 1.0].

    A case-insensitive substring hit scores 1.0. Otherwise the score is the
    best ``SequenceMatcher`` ratio against the whole value, each word of it,
    and each run of consecutive words as long as the term, so a match is not
    penalised for where it sits in the value.
    """
    term = term.strip().lower()
    value = value.strip().lower()
    if not term or not value:
        return 0.0
    if term in value:
        return 1.0

    words = value.split()
    span = len(term.split())
    candidates = {value, *words}
    if 1 < span < len(words):
        candidates.update(
            " ".join(words[i : i + span]) for i in range(len(words) - span + 1)
        )

    return max(SequenceMatcher(None, term, c).ratio() for c in candidates)


def field_similarity(term: str, value: Any) -> float:
    """Similarity against a field value; list-valued fields score as their best element."""
    if value is None:
        return 0.0
    if isinstance(value, (list, tuple)):
        return max((text_similarity(term, str(v)) for v in value), default=0.0)
    return text_similarity(term, str(value))


class FuzzyRanker:
    """Scores records against a search term over a set of weighted fields.

    A record matches when its best field similarity reaches ``threshold``;
    anything below is dropped outright rather than ranked low. The relevance
    of a match is the weight-normalised sum of its matching field scores.

    Ranking is a full scan of the records handed in, so cost grows linearly
    with catalogue size.
    """

    def __init__(self, fields: Sequence[WeightedField], threshold: float):
        if not fields:
            raise ValueError("FuzzyRanker needs at least one field")
        if not 0.0 < threshold <= 1.0:
            raise ValueError("threshold must be in (0, 1]")
        self.fields = tuple(fields)
        self.threshold = threshold
        self._total_weight = sum(f.weight for f in self.fields)

    def score(self, term: str, record: Any) -> Optional[float]:
        """Relevance of ``record`` for ``term``, or None when it does not match."""
        scores = [
            (f, field_similarity(term, getattr(record, f.name, None)))
            for f in self.fields
        ]
        if max(s for _, s in scores) < self.threshold:
            return None
        matched = sum(f.weight * s for f, s in scores if s >= self.threshold)
        return matched / self._total_weight

    def rank(self, term: str, records: Iterable[T]) -> List[T]:
        """Matching records, best first. Equal scores keep their input order."""
        scored: List[Tuple[float, T]] = []
        for record in records:
            s = self.score(term, record)
            if s is not None:
                scored.append((s, record))
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [record for _, record in scored]
