from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from schemas.template import WEEK_KEYS


def _frozen(bag: Mapping[str, bool] | None) -> Mapping[str, bool]:
    return MappingProxyType({k: True for k, v in (bag or {}).items() if v})


@dataclass(frozen=True)
class OverrideStore:
    """Per-week forced-free slot keys.

    Each week's set is independent; every mutation returns a new store.
    """

    week1: Mapping[str, bool] = field(default_factory=lambda: _frozen(None))
    week2: Mapping[str, bool] = field(default_factory=lambda: _frozen(None))

    @classmethod
    def from_maps(cls, week1: Mapping[str, bool] | None = None, week2: Mapping[str, bool] | None = None) -> "OverrideStore":
        return cls(week1=_frozen(week1), week2=_frozen(week2))

    def for_week(self, week: str) -> dict[str, bool]:
        if week not in WEEK_KEYS:
            raise ValueError(f"unknown week {week!r}")
        return dict(self.week2 if week == "week2" else self.week1)

    def is_forced_free(self, week: str, key: str) -> bool:
        return bool(self.for_week(week).get(key))

    def toggle(self, week: str, key: str) -> "OverrideStore":
        bag = self.for_week(week)
        if bag.get(key):
            del bag[key]
        else:
            bag[key] = True
        if week == "week2":
            return OverrideStore(week1=self.week1, week2=_frozen(bag))
        return OverrideStore(week1=_frozen(bag), week2=self.week2)

    def to_dict(self) -> dict[str, dict[str, bool]]:
        return {"week1": dict(self.week1), "week2": dict(self.week2)}
