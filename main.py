#!/usr/bin/env python3
# main.py
"""
Script principal para analizar la telemetría de clientes Wi-Fi.

Lee un CSV exportado por el controlador (una fila por asociación de un
dispositivo con un AP) y muestra en consola el resumen de señal, los
registros clasificados, las desconexiones y la calidad por día.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from analysis import AnalysisSession
from config import ALL
from report import (
    day_detail_tables,
    disconnections_table,
    records_table,
    sessions_table,
    summary_table,
)
from theme import configure_logging, console

app = typer.Typer(add_completion=False, help="Análisis de telemetría de clientes Wi-Fi.")

LOGGER = logging.getLogger(__name__)

CSV_ARGUMENT = typer.Argument(..., help="Fichero CSV con la telemetría.")
DEVICE_OPTION = typer.Option(ALL, '-d', '--device', help="MAC a analizar (def: all).")
DATE_OPTION = typer.Option(ALL, '-f', '--date', help="Fecha a analizar, p.ej. 'Dec 19 2024' (def: all).")
VERBOSE_OPTION = typer.Option(False, '-v', '--verbose', help="Mostrar mensajes de depuración.")


def load_session(csv_file: Path, device: str, date: str, verbose: bool) -> AnalysisSession:
    """Lee el fichero completo y crea la sesión con los filtros indicados."""
    configure_logging(verbose)
    try:
        text = csv_file.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[error]No se pudo leer [filename]{escape(str(csv_file))}[/filename]: {escape(str(e))}[/error]")
        raise typer.Exit(code=1)

    session = AnalysisSession.from_text(text).with_filters(device_id=device, date=date)
    LOGGER.info("Cargados %s registros de %s", len(session.records), csv_file)
    if not session.records:
        console.print(f"[warn]El fichero {escape(str(csv_file))} no contiene registros.[/warn]")
    return session


@app.command()
def summary(
    csv_file: Path = CSV_ARGUMENT,
    device: str = DEVICE_OPTION,
    date: str = DATE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Medias de SNR/RSSI y recuentos de muestras por debajo de umbral."""
    session = load_session(csv_file, device, date, verbose)
    console.print(summary_table(session.summary()))


@app.command()
def records(
    csv_file: Path = CSV_ARGUMENT,
    device: str = DEVICE_OPTION,
    date: str = DATE_OPTION,
    limit: Optional[int] = typer.Option(None, '-n', '--limit', help="Número máximo de filas."),
    verbose: bool = VERBOSE_OPTION,
):
    """Registros con el nivel de calidad de cada métrica."""
    session = load_session(csv_file, device, date, verbose)
    console.print(records_table(session.classified(), limit=limit))


@app.command()
def disconnections(
    csv_file: Path = CSV_ARGUMENT,
    device: str = DEVICE_OPTION,
    date: str = DATE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Eventos de desconexión (SNR, RSSI y HT rate a cero)."""
    session = load_session(csv_file, device, date, verbose)
    events = session.disconnections()
    if not events:
        console.print("[success]No se detectaron desconexiones.[/success]")
        return
    console.print(disconnections_table(events))


@app.command()
def sessions(
    csv_file: Path = CSV_ARGUMENT,
    device: str = DEVICE_OPTION,
    date: str = DATE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Cambios de AP, SNR medio y conexiones pobres por dispositivo y día."""
    session = load_session(csv_file, device, date, verbose)
    overview = session.day_overview()
    if not overview:
        console.print("[invalid]No hay datos para los filtros indicados.[/]")
        return
    console.print(sessions_table(overview))


@app.command()
def day(
    csv_file: Path = CSV_ARGUMENT,
    device: str = typer.Option(..., '-d', '--device', help="MAC del dispositivo."),
    date: str = typer.Option(..., '-f', '--date', help="Día a detallar."),
    verbose: bool = VERBOSE_OPTION,
):
    """Detalle de un dispositivo en un día: métricas y conexiones por AP."""
    if device == ALL or date == ALL:
        console.print("[error]Indica un dispositivo y un día concretos.[/error]")
        raise typer.Exit(code=2)

    session = load_session(csv_file, device, date, verbose)
    detail = session.day_session(date)
    if detail is None or detail.record_count == 0:
        console.print(f"[invalid]Sin lecturas de {escape(device)} el {escape(date)}.[/]")
        return
    for table in day_detail_tables(detail):
        console.print(table)


@app.command()
def filters(
    csv_file: Path = CSV_ARGUMENT,
    verbose: bool = VERBOSE_OPTION,
):
    """Fechas y dispositivos disponibles para filtrar."""
    session = load_session(csv_file, ALL, ALL, verbose)
    console.print("[info]Fechas:[/info]")
    for label in session.dates():
        console.print(f"  {escape(label)}")
    console.print("[info]Dispositivos:[/info]")
    for mac in session.devices():
        console.print(f"  {escape(mac)}")


if __name__ == "__main__":
    app()
