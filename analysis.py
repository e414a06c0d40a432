# analysis.py
"""
Sesión de análisis.

AnalysisSession guarda la colección base (inmutable) y los filtros
actuales. Cada vista se calcula de cero al pedirla a partir de
(registros, filtros); cambiar un filtro produce una sesión nueva.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from classification import classify_records
from config import ALL
from disconnections import disconnection_events
from filters import available_dates, available_devices, filter_records
from metrics import summarize
from models import (
    AnalysisFilters,
    ClassifiedRecord,
    DaySession,
    DisconnectionEvent,
    SummaryStats,
    TelemetryRecord,
)
from parsing import parse_csv_text
from sessions import build_day_session, day_overview


@dataclass(frozen=True)
class AnalysisSession:
    records: Tuple[TelemetryRecord, ...] = ()
    filters: AnalysisFilters = field(default_factory=AnalysisFilters)

    @classmethod
    def from_text(cls, text: str) -> "AnalysisSession":
        return cls(records=tuple(parse_csv_text(text)))

    def with_filters(
        self,
        device_id: Optional[str] = None,
        date: Optional[str] = None,
    ) -> "AnalysisSession":
        """Nueva sesión con los filtros indicados; None conserva el actual."""
        filters = AnalysisFilters(
            device_id=self.filters.device_id if device_id is None else device_id,
            date=self.filters.date if date is None else date,
        )
        return replace(self, filters=filters)

    def reset_filters(self) -> "AnalysisSession":
        return replace(self, filters=AnalysisFilters())

    # --- Vistas derivadas -------------------------------------------------

    def filtered(self) -> List[TelemetryRecord]:
        return filter_records(self.records, self.filters.device_id, self.filters.date)

    def dates(self) -> List[str]:
        return available_dates(self.records)

    def devices(self) -> List[str]:
        return available_devices(self.records)

    def summary(self) -> SummaryStats:
        return summarize(self.filtered())

    def classified(self) -> List[ClassifiedRecord]:
        return classify_records(self.filtered())

    def disconnections(self) -> List[DisconnectionEvent]:
        return disconnection_events(self.filtered())

    def day_overview(self) -> List[DaySession]:
        return day_overview(self.filtered())

    def day_session(self, date: str, device_id: Optional[str] = None) -> Optional[DaySession]:
        """
        Detalle de un día para el dispositivo seleccionado.
        None si no hay un dispositivo concreto seleccionado.
        """
        mac = device_id if device_id is not None else self.filters.device_id
        if mac == ALL:
            return None
        return build_day_session(self.records, mac, date)
