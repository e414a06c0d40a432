# config.py
"""
Módulo de configuración.

Almacena constantes globales del análisis: nombres de columna del CSV,
umbrales de clasificación y la configuración de las tablas de resumen.
"""

from typing import Dict
from models import MetricConfig


# Valor comodín de los filtros (sin restricción en esa dimensión)
ALL = "all"

# Campo del registro -> cabecera esperada en el CSV
COLUMN_MAP: Dict[str, str] = {
    "date": "Date",
    "time": "Time",
    "ap_name": "AP Name",
    "ap_ip": "AP IP",
    "mac_address": "MAC Address",
    "snr": "SNR",
    "median_rssi": "median_rssi",
    "median_ht_rate": "median_ht_rate",
}

NUMERIC_FIELDS = ("snr", "median_rssi", "median_ht_rate")

# median_rssi se guarda desplazado: dBm = median_rssi - RSSI_OFFSET
RSSI_OFFSET = 100

# Formato de las etiquetas de fecha seleccionables (p.ej. "Dec 19 2024")
DATE_FORMAT = "%b %d %Y"
TIME_FORMATS = ("%H:%M:%S", "%H:%M")

# Umbrales: bueno >= *_GOOD, moderado >= *_MODERATE, pobre por debajo
SNR_GOOD = 25
SNR_MODERATE = 15

SIGNAL_GOOD_DBM = -65
SIGNAL_MODERATE_DBM = -70

HT_RATE_GOOD = 200
HT_RATE_MODERATE = 150

# Porcentaje de conexiones pobres: bueno <= 5 %, moderado <= 20 %
POOR_PCT_GOOD = 5.0
POOR_PCT_MODERATE = 20.0

SUMMARY_CONFIG: Dict[str, MetricConfig] = {
    'average_snr': MetricConfig(
        title="SNR medio",
        unit="dB",
        style="snr",
        fmt="{:.2f}",
    ),
    'average_rssi_dbm': MetricConfig(
        title="RSSI medio",
        unit="dBm",
        style="rssi",
        fmt="{:.2f}",
    ),
    'low_snr_count': MetricConfig(
        title="Muestras con SNR bajo",
        unit="",
        style="poor",
        fmt="{:.0f}",
    ),
    'low_rssi_count': MetricConfig(
        title="Muestras con RSSI bajo",
        unit="",
        style="poor",
        fmt="{:.0f}",
    ),
}
