# src/datecalc/pregnancy/__init__.py
"""
datecalc.pregnancy
~~~~~~~~~~~~~~~~~~

Due-date estimation from a reference date by fixed gestation offsets:

    lmp               280 days (Naegele's rule)
    conception        266 days
    ivf + day3        263 days after transfer
    ivf + day5        261 days after transfer

Basic usage::

    from datecalc.calendar import CalendarDate
    from datecalc.pregnancy import estimate_due_date, estimate_pregnancy

    estimate_due_date("lmp", CalendarDate(2024, 1, 1))           # → 2024-10-07
    estimate_pregnancy("ivf", CalendarDate(2024, 1, 1), "day5")  # tagged IVF_DAY5

Public API
----------
estimate_due_date   Due date only.
estimate_pregnancy  PregnancyEstimate with the method tag and offset.
estimator           The DueDateEstimator behind both; register() adds rules.
"""

from __future__ import annotations

from datecalc.pregnancy.estimate import (
    CONCEPTION_GESTATION_DAYS,
    IVF_DAY3_GESTATION_DAYS,
    IVF_DAY5_GESTATION_DAYS,
    LMP_GESTATION_DAYS,
    DueDateEstimator,
    EmbryoAge,
    EstimateMethod,
    GestationSpec,
    Method,
    PregnancyEstimate,
)

registry = {
    (Method.LMP.value, None): GestationSpec(
        EstimateMethod.LMP, LMP_GESTATION_DAYS
    ),
    (Method.CONCEPTION.value, None): GestationSpec(
        EstimateMethod.CONCEPTION, CONCEPTION_GESTATION_DAYS
    ),
    (Method.IVF.value, EmbryoAge.DAY3.value): GestationSpec(
        EstimateMethod.IVF_DAY3, IVF_DAY3_GESTATION_DAYS
    ),
    (Method.IVF.value, EmbryoAge.DAY5.value): GestationSpec(
        EstimateMethod.IVF_DAY5, IVF_DAY5_GESTATION_DAYS
    ),
}

estimator = DueDateEstimator(registry)
estimate_due_date = estimator.due_date
estimate_pregnancy = estimator.estimate

__all__ = [
    "estimate_due_date",
    "estimate_pregnancy",
    "estimator",
    "registry",
    "DueDateEstimator",
    "GestationSpec",
    "PregnancyEstimate",
    "Method",
    "EmbryoAge",
    "EstimateMethod",
    "LMP_GESTATION_DAYS",
    "CONCEPTION_GESTATION_DAYS",
    "IVF_DAY3_GESTATION_DAYS",
    "IVF_DAY5_GESTATION_DAYS",
]
