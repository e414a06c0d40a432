# report.py
"""
Módulo de presentación en consola.

Construye tablas Rich a partir de las vistas del motor de análisis.
No calcula nada: sólo da formato y color a resultados ya calculados.
"""

from typing import List, Optional, Sequence

from rich.markup import escape
from rich.table import Table

from config import SUMMARY_CONFIG
from models import ClassifiedRecord, DaySession, DisconnectionEvent, SummaryStats
from theme import device_color
from utils import format_stat, format_tier


def _device(mac: str) -> str:
    color = device_color(mac)
    return f"[{color}]{escape(mac)}[/{color}]"


def summary_table(stats: SummaryStats, title: str = "Resumen de la sesión") -> Table:
    """Tabla con las medias y recuentos de umbral."""
    table = Table(title=title)
    table.add_column("Métrica", style="bold")
    table.add_column("Valor", justify="right")
    table.add_column("Unidad")
    for key, cfg in SUMMARY_CONFIG.items():
        value = getattr(stats, key)
        table.add_row(cfg.title, format_stat(value, cfg.fmt, "", cfg.style), cfg.unit)
    table.caption = f"{stats.record_count} registros"
    return table


def records_table(rows: Sequence[ClassifiedRecord], limit: Optional[int] = None) -> Table:
    table = Table(title="Registros")
    for column in ("Fecha", "Hora", "AP", "MAC", "SNR", "RSSI", "HT rate"):
        table.add_column(column)

    shown = rows if limit is None else rows[:limit]
    for row in shown:
        r = row.record
        table.add_row(
            escape(r.date),
            escape(r.time),
            f"[ap]{escape(r.ap_name)}[/ap]",
            _device(r.mac_address),
            format_tier(r.snr, row.snr_tier),
            format_tier(r.rssi_dbm, row.signal_tier, unit=" dBm"),
            format_tier(r.median_ht_rate, row.ht_rate_tier),
            style="on grey11" if row.is_disconnection else None,
        )
    if limit is not None and len(rows) > limit:
        table.caption = f"Mostrando {limit} de {len(rows)} registros"
    return table


def disconnections_table(events: Sequence[DisconnectionEvent]) -> Table:
    table = Table(title="Desconexiones por punto de acceso")
    table.add_column("#AP", justify="right")
    table.add_column("AP")
    table.add_column("MAC")
    table.add_column("Fecha / hora")
    for event in events:
        r = event.record
        when = (
            event.timestamp.strftime("%Y-%m-%d %H:%M:%S")
            if event.timestamp is not None
            else escape(f"{r.date} {r.time}".strip())
        )
        table.add_row(str(event.ap_index), f"[ap]{escape(r.ap_name)}[/ap]", _device(r.mac_address), when)
    table.caption = f"{len(events)} desconexiones"
    return table


def sessions_table(sessions: Sequence[DaySession]) -> Table:
    table = Table(title="Calidad de conexión por día")
    table.add_column("MAC")
    table.add_column("Fecha")
    table.add_column("Lecturas", justify="right")
    table.add_column("SNR medio", justify="right")
    table.add_column("Cambios de AP", justify="right")
    table.add_column("Pobres", justify="right")
    for s in sessions:
        table.add_row(
            _device(s.mac_address),
            escape(s.date),
            str(s.record_count),
            format_tier(s.metrics.average_snr, s.snr_tier, fmt="{:.1f}"),
            str(s.metrics.ap_switches),
            format_tier(s.metrics.poor_connection_percentage, s.health_tier, fmt="{:.1f}", unit="%"),
        )
    return table


def day_detail_tables(session: DaySession) -> List[Table]:
    """Métricas del día y una fila por AP con sus horas de conexión."""
    metrics = Table(title=escape(f"Detalle {session.mac_address} - {session.date}"))
    metrics.add_column("SNR medio", justify="right")
    metrics.add_column("Cambios de AP", justify="right")
    metrics.add_column("Conexiones pobres", justify="right")
    metrics.add_row(
        format_tier(session.metrics.average_snr, session.snr_tier, fmt="{:.1f}"),
        str(session.metrics.ap_switches),
        format_tier(
            session.metrics.poor_connection_percentage,
            session.health_tier,
            fmt="{:.1f}",
            unit="%",
        ),
    )

    timeline = Table(title="Conexiones por AP")
    timeline.add_column("AP", style="ap")
    timeline.add_column("Horas")
    for ap_name, connections in session.ap_connections.items():
        times = " ".join(
            f"[{'poor' if c.is_poor else 'snr'}]{escape(c.time)}[/]" for c in connections
        )
        timeline.add_row(escape(ap_name), times)

    return [metrics, timeline]
