# theme.py
import logging
import zlib
from dataclasses import dataclass
from typing import Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme


@dataclass(frozen=True)
class AppTheme:
    # Colores semánticos
    info: str = "cyan"
    warn: str = "yellow"
    error: str = "bold red"
    invalid: str = "red"
    filename: str = "blue"
    success: str = "green"

    # Niveles de calidad
    good: str = "green1"
    moderate: str = "yellow1"
    poor: str = "red1"

    # Métricas de red
    snr: str = "cornflower_blue"
    rssi: str = "dark_orange3"
    ap: str = "magenta"
    time: str = "cyan"

    def rich_theme(self) -> Theme:
        return Theme({
            "info":      self.info,
            "warn":      self.warn,
            "error":     self.error,
            "invalid":   self.invalid,
            "filename":  self.filename,
            "success":   self.success,
            "good":      self.good,
            "moderate":  self.moderate,
            "poor":      self.poor,
            "snr":       self.snr,
            "rssi":      self.rssi,
            "ap":        self.ap,
            "time":      self.time,
            "snr_mean":  f"bold underline {self.snr}",
            "rssi_mean": f"bold underline {self.rssi}",
        })


# Paleta fija para dispositivos; se recorre cíclicamente si hay más claves
DEVICE_PALETTE: Tuple[str, ...] = (
    "deep_sky_blue1",
    "spring_green2",
    "orchid",
    "gold1",
    "salmon1",
    "turquoise2",
    "medium_purple1",
    "chartreuse3",
    "light_coral",
    "steel_blue1",
)


def device_color(key: str) -> str:
    """Color estable para un dispositivo: CRC32 de la clave sobre la paleta."""
    index = zlib.crc32(key.encode("utf-8")) % len(DEVICE_PALETTE)
    return DEVICE_PALETTE[index]


def configure_logging(verbose: bool = False) -> None:
    """Envía el logging estándar a la consola temática mediante RichHandler."""
    handler = RichHandler(console=console, show_path=False, markup=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[handler],
        force=True,
    )


APP_THEME = AppTheme()
console = Console(theme=APP_THEME.rich_theme())
