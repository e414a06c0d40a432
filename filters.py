# filters.py
"""
Filtros sobre colecciones de registros.

Todas las funciones son puras: devuelven listas nuevas y nunca modifican
la colección recibida.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from config import ALL, DATE_FORMAT
from models import TelemetryRecord


def filter_records(
    records: Sequence[TelemetryRecord],
    device_id: str = ALL,
    date: str = ALL,
) -> List[TelemetryRecord]:
    """
    Filtra por MAC y/o fecha exactas ('all' no restringe esa dimensión).
    Ambas condiciones se combinan con AND y se conserva el orden original.
    """
    return [
        r for r in records
        if (device_id == ALL or r.mac_address == device_id)
        and (date == ALL or r.date == date)
    ]


def parse_date_label(label: str) -> Optional[datetime]:
    """Interpreta una etiqueta tipo 'Dec 19 2024'; None si no encaja."""
    try:
        return datetime.strptime(label, DATE_FORMAT)
    except ValueError:
        return None


def available_dates(records: Sequence[TelemetryRecord]) -> List[str]:
    """Fechas distintas e interpretables, en orden cronológico."""
    parsed = {}
    for r in records:
        if r.date in parsed:
            continue
        day = parse_date_label(r.date)
        if day is not None:
            parsed[r.date] = day
    return sorted(parsed, key=lambda label: parsed[label])


def available_devices(records: Sequence[TelemetryRecord]) -> List[str]:
    """MACs distintas, ordenadas."""
    return sorted({r.mac_address for r in records})


def access_points(records: Sequence[TelemetryRecord]) -> List[str]:
    """Nombres de AP distintos, ordenados."""
    return sorted({r.ap_name for r in records})
