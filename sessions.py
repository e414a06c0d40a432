# sessions.py
"""
Agregación por dispositivo y día.

Una sesión es el conjunto de lecturas de un dispositivo en un día. Para
cada sesión se calculan los cambios de AP, el porcentaje de conexiones
pobres, el SNR medio y la línea temporal de conexiones por AP.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from classification import classify_poor_percentage, classify_snr
from config import SIGNAL_MODERATE_DBM, SNR_MODERATE
from filters import filter_records
from models import ApConnection, DaySession, SessionMetrics, TelemetryRecord
from utils import percentage, safe_mean

LOGGER = logging.getLogger(__name__)


def is_poor_connection(record: TelemetryRecord) -> bool:
    """
    SNR bajo o RSSI bajo (en dBm).

    No confundir con disconnections.is_disconnection, que exige las tres
    métricas a cero.
    """
    return record.snr < SNR_MODERATE or record.rssi_dbm < SIGNAL_MODERATE_DBM


def sort_by_time(records: Sequence[TelemetryRecord]) -> List[TelemetryRecord]:
    # Orden lexicográfico y estable de la etiqueta de hora
    return sorted(records, key=lambda r: r.time)


def count_ap_switches(records: Sequence[TelemetryRecord]) -> int:
    """Cambios de AP entre lecturas consecutivas (ya ordenadas por hora)."""
    return sum(
        1 for prev, curr in zip(records, records[1:])
        if curr.ap_name != prev.ap_name
    )


def session_metrics(records: Sequence[TelemetryRecord]) -> SessionMetrics:
    ordered = sort_by_time(records)
    poor = sum(1 for r in ordered if is_poor_connection(r))
    return SessionMetrics(
        average_snr=safe_mean(r.snr for r in ordered),
        ap_switches=count_ap_switches(ordered),
        poor_connection_percentage=percentage(poor, len(ordered)),
    )


def ap_timeline(records: Sequence[TelemetryRecord]) -> Dict[str, List[ApConnection]]:
    """Conexiones agrupadas por AP, cada grupo en orden de hora."""
    timeline: Dict[str, List[ApConnection]] = {}
    for r in sort_by_time(records):
        timeline.setdefault(r.ap_name, []).append(
            ApConnection(time=r.time, snr=r.snr, is_poor=r.snr < SNR_MODERATE)
        )
    return timeline


def _summarize_group(mac_address: str, date: str, records: Sequence[TelemetryRecord]) -> DaySession:
    metrics = session_metrics(records)
    return DaySession(
        mac_address=mac_address,
        date=date,
        ap_connections=ap_timeline(records),
        metrics=metrics,
        record_count=len(records),
        snr_tier=classify_snr(metrics.average_snr),
        health_tier=classify_poor_percentage(metrics.poor_connection_percentage),
    )


def build_day_session(
    records: Sequence[TelemetryRecord],
    mac_address: str,
    date: str,
) -> DaySession:
    """
    Detalle de un dispositivo en un día concreto.
    Sin lecturas devuelve métricas a cero y una línea temporal vacía.
    """
    selected = filter_records(records, device_id=mac_address, date=date)
    LOGGER.debug("Sesión %s / %s: %s lecturas", mac_address, date, len(selected))
    return _summarize_group(mac_address, date, selected)


def day_overview(records: Sequence[TelemetryRecord]) -> List[DaySession]:
    """
    Una DaySession por cada par (MAC, fecha), en orden de primera aparición.
    Cada grupo se calcula de forma independiente; no se mezclan días.
    """
    groups: Dict[Tuple[str, str], List[TelemetryRecord]] = {}
    for r in records:
        groups.setdefault((r.mac_address, r.date), []).append(r)

    sessions = [
        _summarize_group(mac, date, group)
        for (mac, date), group in groups.items()
    ]
    LOGGER.debug("Resumen diario: %s sesiones", len(sessions))
    return sessions
