# metrics.py
import logging
from typing import Sequence

from config import SIGNAL_MODERATE_DBM, SNR_MODERATE
from models import SummaryStats, TelemetryRecord
from utils import safe_mean

LOGGER = logging.getLogger(__name__)


def is_low_snr(record: TelemetryRecord) -> bool:
    return record.snr < SNR_MODERATE


def is_low_rssi(record: TelemetryRecord) -> bool:
    # El umbral se evalúa en dBm reales, no sobre el valor desplazado
    return record.rssi_dbm < SIGNAL_MODERATE_DBM


def summarize(records: Sequence[TelemetryRecord]) -> SummaryStats:
    """
    Estadísticas agregadas de una colección.
    Con una colección vacía las medias valen 0.0.
    """
    stats = SummaryStats(
        record_count=len(records),
        low_snr_count=sum(1 for r in records if is_low_snr(r)),
        low_rssi_count=sum(1 for r in records if is_low_rssi(r)),
        average_snr=safe_mean(r.snr for r in records),
        average_rssi_dbm=safe_mean(r.rssi_dbm for r in records),
    )
    LOGGER.debug("Resumen calculado sobre %s registros", stats.record_count)
    return stats
