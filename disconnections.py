# disconnections.py
"""
Detección de desconexiones.

El controlador registra una desconexión como una muestra "silenciosa"
con SNR, RSSI y HT rate exactamente a cero. Este criterio es distinto
(y más estricto) que el de conexión pobre de sessions.py: una muestra
puede ser pobre sin ser una desconexión.
"""

import logging
from datetime import datetime
from typing import List, Optional, Sequence

import pandas as pd

from config import DATE_FORMAT, TIME_FORMATS
from filters import access_points
from models import DisconnectionEvent, TelemetryRecord

LOGGER = logging.getLogger(__name__)


def is_disconnection(record: TelemetryRecord) -> bool:
    """True sólo si las tres métricas valen exactamente 0."""
    return record.snr == 0 and record.median_rssi == 0 and record.median_ht_rate == 0


def find_disconnections(records: Sequence[TelemetryRecord]) -> List[TelemetryRecord]:
    """Subconjunto de desconexiones, en el orden original."""
    return [r for r in records if is_disconnection(r)]


def record_timestamp(record: TelemetryRecord) -> Optional[datetime]:
    """Combina fecha y hora del registro; None si no siguen el formato del controlador."""
    if not record.date or not record.time:
        return None
    text = f"{record.date} {record.time}"
    for time_format in TIME_FORMATS:
        ts = pd.to_datetime(text, format=f"{DATE_FORMAT} {time_format}", errors="coerce")
        if not pd.isna(ts):
            return ts.to_pydatetime()
    return None


def disconnection_events(records: Sequence[TelemetryRecord]) -> List[DisconnectionEvent]:
    """
    Desconexiones anotadas con la posición de su AP.

    ap_index es el índice del AP entre los nombres de AP ordenados de toda
    la colección recibida (no sólo de las desconexiones).
    """
    ap_names = access_points(records)
    positions = {name: i for i, name in enumerate(ap_names)}
    events = [
        DisconnectionEvent(
            record=r,
            ap_index=positions[r.ap_name],
            timestamp=record_timestamp(r),
        )
        for r in find_disconnections(records)
    ]
    LOGGER.debug("%s desconexiones en %s registros", len(events), len(records))
    return events
