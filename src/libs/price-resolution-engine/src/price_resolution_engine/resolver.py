# src/libs/price-resolution-engine/src/price_resolution_engine/resolver.py
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Iterable, Optional, TypeVar, Union

from .models import PriceRecord

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


NOT_FOUND = NotFound()

Resolution = Union[Found[T], NotFound]


def resolve(candidates: Iterable[PriceRecord], instant: datetime) -> Resolution[PriceRecord]:
    """
    Selects the applicable price for an instant.

    A candidate applies when its closed validity window contains the instant.
    Among applicable candidates the highest priority wins; on equal priority
    the first one in input order is kept. The input order is otherwise not
    trusted, so a pre-sorted or pre-filtered source gives the same answer.

    Returns:
        Found(record) for the winning record, or NOT_FOUND when nothing applies.
    """
    best: Optional[PriceRecord] = None
    for candidate in candidates:
        if not candidate.contains(instant):
            continue
        # Strictly greater keeps the earliest of equal-priority candidates.
        if best is None or candidate.priority > best.priority:
            best = candidate

    if best is None:
        return NOT_FOUND
    return Found(best)


class PriceResolver:
    """Stateless wrapper around `resolve` so it can be injected into services."""

    def resolve(self, candidates: Iterable[PriceRecord], instant: datetime) -> Resolution[PriceRecord]:
        return resolve(candidates, instant)
