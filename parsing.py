# parsing.py
"""
Módulo de lectura de telemetría.

Convierte el texto CSV exportado por el controlador Wi-Fi en una lista
de TelemetryRecord. La lectura es permisiva: nunca lanza excepciones,
cualquier columna ausente o valor no numérico toma el valor por defecto
del campo ('' o 0).
"""

import logging
from typing import Dict, List, Optional

import pandas as pd

from config import COLUMN_MAP, NUMERIC_FIELDS
from models import TelemetryRecord

LOGGER = logging.getLogger(__name__)


def _split_line(line: str) -> List[str]:
    """Separa una línea por comas y recorta cada valor."""
    return [value.strip() for value in line.split(",")]


def _column_indexes(header: List[str]) -> Dict[str, Optional[int]]:
    """
    Posición de cada campo según el texto de la cabecera.
    Con cabeceras duplicadas gana la primera; si no existe, None.
    """
    indexes: Dict[str, Optional[int]] = {}
    for field_name, column in COLUMN_MAP.items():
        indexes[field_name] = header.index(column) if column in header else None
    return indexes


def _build_frame(rows: List[List[str]], indexes: Dict[str, Optional[int]]) -> pd.DataFrame:
    """DataFrame con una columna por campo, ya con valores por defecto."""
    columns: Dict[str, List[str]] = {}
    for field_name, idx in indexes.items():
        # Filas cortas: los valores que faltan quedan vacíos
        columns[field_name] = [
            row[idx] if idx is not None and idx < len(row) else ""
            for row in rows
        ]
    frame = pd.DataFrame(columns, columns=list(COLUMN_MAP), dtype=object)

    for field_name in NUMERIC_FIELDS:
        # "inf"/"Infinity" se tratan como valores no numéricos
        frame[field_name] = (
            pd.to_numeric(frame[field_name], errors="coerce")
            .replace([float("inf"), float("-inf")], float("nan"))
            .fillna(0)
            .astype(float)
        )
    return frame


def parse_csv_text(text: str) -> List[TelemetryRecord]:
    """
    Interpreta el texto completo de un CSV de telemetría.

    Args:
        text: contenido del fichero; la primera línea no vacía es la cabecera.

    Returns:
        Un TelemetryRecord por cada línea de datos no vacía, en el orden
        del fichero.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        LOGGER.debug("Texto vacío: no hay registros")
        return []

    header = _split_line(lines[0])
    indexes = _column_indexes(header)
    missing = [COLUMN_MAP[name] for name, idx in indexes.items() if idx is None]
    if missing:
        LOGGER.info("Columnas ausentes, se usarán valores por defecto: %s", ", ".join(missing))

    rows = [_split_line(line) for line in lines[1:]]
    if not rows:
        return []

    frame = _build_frame(rows, indexes)
    records = [
        TelemetryRecord(
            date=row.date,
            time=row.time,
            ap_name=row.ap_name,
            ap_ip=row.ap_ip,
            mac_address=row.mac_address,
            snr=float(row.snr),
            median_rssi=float(row.median_rssi),
            median_ht_rate=float(row.median_ht_rate),
        )
        for row in frame.itertuples(index=False)
    ]
    LOGGER.debug("Leídos %s registros (%s columnas en cabecera)", len(records), len(header))
    return records
