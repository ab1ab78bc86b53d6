from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Iterable, Optional

from gedcom_chart.core.exceptions import UsageError
from gedcom_chart.graph.xref import normalize_pointer, normalize_pointer_set


class MarriagePlacement(str, Enum):
    """Which block carries a couple's marriage event."""

    FAMILY = "family"
    PROBAND = "proband"
    SPOUSE = "spouse"

    @classmethod
    def parse(cls, value: "str | MarriagePlacement") -> "MarriagePlacement":
        if isinstance(value, MarriagePlacement):
            return value
        text = str(value).strip().lower()
        if text.startswith("on-"):
            text = text[3:]
        try:
            return cls(text)
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise UsageError(f"Unknown marriage placement {value!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class ChartOptions:
    """
    Per-run chart settings, threaded through the whole traversal.

    `ignore` holds normalized xrefs ("@I12@", "@F3@") of individuals and
    families to leave out together with everything below them.
    """

    marriage: MarriagePlacement = MarriagePlacement.FAMILY
    ignore: FrozenSet[str] = field(default_factory=frozenset)
    floruit: bool = False

    def is_ignored(self, xref: Optional[str]) -> bool:
        key = normalize_pointer(xref)
        return key is not None and key in self.ignore

    @classmethod
    def build(
        cls,
        *,
        marriage: "str | MarriagePlacement" = MarriagePlacement.FAMILY,
        ignore: Iterable[str] = (),
        floruit: bool = False,
    ) -> "ChartOptions":
        return cls(
            marriage=MarriagePlacement.parse(marriage),
            ignore=frozenset(normalize_pointer_set(ignore)),
            floruit=bool(floruit),
        )

    @classmethod
    def from_config(cls, cfg: Any, **overrides: Any) -> "ChartOptions":
        """
        Start from the config's `chart:` section; non-None keyword overrides win.

        Ignore lists are merged rather than replaced.
        """
        chart = dict(getattr(cfg, "chart", {}) or {})
        ignore = list(chart.get("ignore") or [])
        ignore.extend(overrides.pop("ignore", None) or [])

        values = {
            "marriage": chart.get("marriage", MarriagePlacement.FAMILY),
            "floruit": chart.get("floruit", False),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.build(ignore=ignore, **values)
