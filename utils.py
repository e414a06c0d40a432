# utils.py
from typing import Iterable, Optional
from models import Tier


def safe_mean(values: Iterable[float]) -> float:
    """Media aritmética; devuelve 0.0 si no hay valores."""
    total = 0.0
    count = 0
    for value in values:
        total += value
        count += 1
    return total / count if count else 0.0


def percentage(part: int, total: int) -> float:
    """Porcentaje part/total; 0.0 si total es 0."""
    return (part / total) * 100 if total else 0.0


def format_stat(value: Optional[float], fmt: str, unit: str, color: str, width: int = 0) -> str:
    """
    - value: el valor numérico, o None.
    - fmt: formato estilo '{:.2f}' antes de la unidad.
    - unit: sufijo (p.ej. ' dB', ' dBm', '%').
    - color: nombre de estilo Rich.
    - width: ancho fijo de caracteres del texto visible.
    """
    raw = "N/A" if value is None else fmt.format(value) + unit
    padded = raw.ljust(width)
    return f"[{color}]{padded}[/{color}]"


def format_tier(value: float, tier: Tier, fmt: str = "{:.0f}", unit: str = "") -> str:
    """Valor coloreado con el estilo de su nivel (good/moderate/poor)."""
    return format_stat(value, fmt, unit, tier.value)
