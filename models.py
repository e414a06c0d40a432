# models.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


class Tier(str, Enum):
    """Nivel de severidad de una lectura."""
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"


@dataclass(frozen=True)
class TelemetryRecord:
    date: str = ""              # etiqueta de día tal cual aparece en el CSV
    time: str = ""              # etiqueta de hora, se compara como texto
    ap_name: str = ""           # nombre legible del AP
    ap_ip: str = ""             # dirección del AP
    mac_address: str = ""       # dispositivo cliente
    snr: float = 0.0            # dB
    median_rssi: float = 0.0    # desplazado: dBm = median_rssi - 100
    median_ht_rate: float = 0.0 # indicador de velocidad de enlace

    @property
    def rssi_dbm(self) -> float:
        # Importación local: config importa este módulo
        from config import RSSI_OFFSET
        return self.median_rssi - RSSI_OFFSET


@dataclass(frozen=True)
class AnalysisFilters:
    device_id: str = "all"
    date: str = "all"


@dataclass(frozen=True)
class SummaryStats:
    record_count: int
    low_snr_count: int
    low_rssi_count: int
    average_snr: float
    average_rssi_dbm: float


@dataclass(frozen=True)
class ClassifiedRecord:
    record: TelemetryRecord
    snr_tier: Tier
    signal_tier: Tier
    ht_rate_tier: Tier
    is_disconnection: bool


@dataclass(frozen=True)
class DisconnectionEvent:
    record: TelemetryRecord
    ap_index: int                  # posición del AP entre los APs ordenados
    timestamp: Optional[datetime]  # None si fecha + hora no se pueden interpretar

    @property
    def ap_name(self) -> str:
        return self.record.ap_name


@dataclass(frozen=True)
class ApConnection:
    time: str
    snr: float
    is_poor: bool


@dataclass(frozen=True)
class SessionMetrics:
    average_snr: float = 0.0
    ap_switches: int = 0
    poor_connection_percentage: float = 0.0


@dataclass
class DaySession:
    mac_address: str
    date: str
    ap_connections: Dict[str, List[ApConnection]] = field(default_factory=dict)
    metrics: SessionMetrics = field(default_factory=SessionMetrics)
    record_count: int = 0
    snr_tier: Tier = Tier.POOR
    health_tier: Tier = Tier.GOOD


@dataclass
class MetricConfig:
    title: str
    unit: str
    style: str
    fmt: str = "{:.2f}"
