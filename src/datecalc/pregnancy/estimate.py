from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Final, Mapping, Optional

from datecalc.calendar import CalendarDate, InvalidMethodError, add_days

logger = logging.getLogger(__name__)

# Days from the reference date to the estimated due date.
LMP_GESTATION_DAYS: Final[int] = 280          # Naegele's rule
CONCEPTION_GESTATION_DAYS: Final[int] = 266
IVF_DAY3_GESTATION_DAYS: Final[int] = 263
IVF_DAY5_GESTATION_DAYS: Final[int] = 261


class Method(str, enum.Enum):
    LMP = "lmp"
    CONCEPTION = "conception"
    IVF = "ivf"


class EmbryoAge(str, enum.Enum):
    DAY3 = "day3"
    DAY5 = "day5"


class EstimateMethod(str, enum.Enum):
    """Tag on a PregnancyEstimate naming the rule that produced it."""

    LMP = "lmp"
    CONCEPTION = "conception"
    IVF_DAY3 = "ivf_day3"
    IVF_DAY5 = "ivf_day5"


@dataclass(frozen=True, slots=True)
class GestationSpec:
    tag: EstimateMethod
    offset_days: int


@dataclass(frozen=True, slots=True)
class PregnancyEstimate:
    due_date: CalendarDate
    method: EstimateMethod
    reference_date: CalendarDate
    offset_days: int


RegistryKey = tuple[str, Optional[str]]


class DueDateEstimator:
    """
    Due-date lookup keyed by (method, embryo_age).

    - Accepts Method / EmbryoAge members or their string values.
    - embryo_age is part of the key, so it is required exactly where a
      registered key carries one.
    - Unknown combinations raise InvalidMethodError.
    """

    def __init__(self, registry: Mapping[RegistryKey, GestationSpec]) -> None:
        self._registry: dict[RegistryKey, GestationSpec] = dict(registry)

    def register(
        self,
        method: Method | str,
        embryo_age: EmbryoAge | str | None,
        spec: GestationSpec,
    ) -> None:
        self._registry[self._key(method, embryo_age)] = spec

    def estimate(
        self,
        method: Method | str,
        reference_date: CalendarDate,
        embryo_age: EmbryoAge | str | None = None,
    ) -> PregnancyEstimate:
        key = self._key(method, embryo_age)
        try:
            spec = self._registry[key]
        except KeyError:
            raise InvalidMethodError(
                f"No due-date rule for method={key[0]!r}, embryo_age={key[1]!r}."
            ) from None

        due = add_days(reference_date, spec.offset_days)
        logger.debug(
            "Due date %r from %r via %s (+%d days)",
            due, reference_date, spec.tag.value, spec.offset_days,
        )
        return PregnancyEstimate(
            due_date=due,
            method=spec.tag,
            reference_date=reference_date,
            offset_days=spec.offset_days,
        )

    def due_date(
        self,
        method: Method | str,
        reference_date: CalendarDate,
        embryo_age: EmbryoAge | str | None = None,
    ) -> CalendarDate:
        return self.estimate(method, reference_date, embryo_age).due_date

    @property
    def keys(self) -> list[RegistryKey]:
        return sorted(self._registry, key=lambda k: (k[0], k[1] or ""))

    @staticmethod
    def _key(
        method: Method | str, embryo_age: EmbryoAge | str | None
    ) -> RegistryKey:
        m = method.value if isinstance(method, enum.Enum) else str(method)
        if embryo_age is None:
            return m, None
        a = embryo_age.value if isinstance(embryo_age, enum.Enum) else str(embryo_age)
        return m, a
