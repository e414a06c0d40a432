# classification.py
"""
Clasificación de lecturas en tres niveles (good / moderate / poor).

Cada dimensión usa umbrales fijos: bueno si valor >= umbral alto,
moderado si valor >= umbral bajo, pobre en otro caso. El motor sólo
devuelve el nivel; el color lo decide la capa de presentación.
"""

from typing import List, Sequence

from config import (
    HT_RATE_GOOD,
    HT_RATE_MODERATE,
    POOR_PCT_GOOD,
    POOR_PCT_MODERATE,
    RSSI_OFFSET,
    SIGNAL_GOOD_DBM,
    SIGNAL_MODERATE_DBM,
    SNR_GOOD,
    SNR_MODERATE,
)
from disconnections import is_disconnection
from models import ClassifiedRecord, TelemetryRecord, Tier


def _tier(value: float, good: float, moderate: float) -> Tier:
    if value >= good:
        return Tier.GOOD
    if value >= moderate:
        return Tier.MODERATE
    return Tier.POOR


def classify_snr(snr: float) -> Tier:
    """>= 25 good, 15-24 moderate, < 15 poor."""
    return _tier(snr, SNR_GOOD, SNR_MODERATE)


def classify_signal_dbm(dbm: float) -> Tier:
    """>= -65 good, -70..-66 moderate, < -70 poor."""
    return _tier(dbm, SIGNAL_GOOD_DBM, SIGNAL_MODERATE_DBM)


def classify_signal(median_rssi: float) -> Tier:
    """Como classify_signal_dbm, pero recibe el valor desplazado del CSV."""
    return classify_signal_dbm(median_rssi - RSSI_OFFSET)


def classify_ht_rate(ht_rate: float) -> Tier:
    """>= 200 good, 150-199 moderate, < 150 poor."""
    return _tier(ht_rate, HT_RATE_GOOD, HT_RATE_MODERATE)


def classify_poor_percentage(pct: float) -> Tier:
    """Salud de una sesión: <= 5 % good, <= 20 % moderate, > 20 % poor."""
    if pct <= POOR_PCT_GOOD:
        return Tier.GOOD
    if pct <= POOR_PCT_MODERATE:
        return Tier.MODERATE
    return Tier.POOR


def classify_record(record: TelemetryRecord) -> ClassifiedRecord:
    return ClassifiedRecord(
        record=record,
        snr_tier=classify_snr(record.snr),
        signal_tier=classify_signal(record.median_rssi),
        ht_rate_tier=classify_ht_rate(record.median_ht_rate),
        is_disconnection=is_disconnection(record),
    )


def classify_records(records: Sequence[TelemetryRecord]) -> List[ClassifiedRecord]:
    return [classify_record(r) for r in records]
