"""
Estudio de Pensión — services/formato.py
Formato de montos y etiquetas de presentación del reporte.
"""
from decimal import Decimal, ROUND_HALF_UP


# ─── Etiquetas ────────────────────────────────────────────────
TIPO_PENSION_LABELS = {
    "vejez":         "Vejez (Edad Legal o Anticipada)",
    "invalidez":     "Invalidez",
    "sobrevivencia": "Sobrevivencia",
}

TIPO_BENEFICIARIO_LABELS = {
    "conyuge":     "Conyuge",
    "conviviente": "Conviviente",
    "hijo":        "Hijo/a",
    "padre":       "Padre",
    "madre":       "Madre",
}

GRADO_INVALIDEZ_LABELS = {
    "total":     "Total (70%)",
    "total_2_3": "Total 2/3 (50%)",
    "parcial":   "Parcial (35%)",
}


def etiqueta(tabla: dict, codigo: str | None) -> str:
    """Etiqueta de presentación; si el código no existe se muestra tal cual."""
    if codigo is None:
        return ""
    return tabla.get(codigo, codigo)


# ─── Números ──────────────────────────────────────────────────

def redondear(valor: float) -> int:
    """Redondeo al entero más cercano, .5 se aleja de cero."""
    return int(Decimal(str(valor)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def formatear_entero(valor: float, separador: str = ".") -> str:
    """
    Redondea y agrupa miles: 1234567.5 → '1.234.568'.
    Los negativos llevan el signo adelante: -4750 → '-4.750'.
    """
    n = redondear(valor)
    grupos = f"{abs(n):,}".replace(",", separador)
    return f"-{grupos}" if n < 0 else grupos


def formatear_uf(valor: float) -> str:
    return f"{valor:.2f}"


def formatear_pct(fraccion: float) -> str:
    """Fracción a porcentaje entero: 0.6 → '60%'."""
    return f"{redondear(fraccion * 100)}%"


def porcentaje_aumento(valor: float) -> float:
    """El motor entrega el aumento como 0.3 o como 30; ambos son 30%."""
    return round(valor if valor > 1 else valor * 100, 2)


def texto_periodo(meses: int) -> str:
    """Duración legible: 60 → '5 anos', 66 → '5a 6m'."""
    anos, resto = divmod(meses, 12)
    return f"{anos}a {resto}m" if resto > 0 else f"{anos} anos"
