"""
Estudio de Pensión — config.py
Parámetros regulatorios y de diagramación del reporte PDF.

Los valores por defecto corresponden a la normativa vigente al momento de
emitir el estudio; cada uno puede sobrescribirse con una variable de entorno
sin tocar el código.

Uso:
    from config import ReportConfig, get_report_config
    cfg = get_report_config()
"""
import os
from dataclasses import dataclass

from reportlab.lib.pagesizes import LETTER


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


@dataclass(frozen=True)
class ReportConfig:
    # ─── Descuentos y beneficios ──────────────────────────────
    comision_afp:      float = 0.0095    # 0.95% comisión AFP, solo Retiro Programado
    descuento_salud:   float = 0.07      # 7% cotización de salud, todas las modalidades
    monto_pgu:         int   = 224004    # PGU en $, se suma al líquido de las rentas vitalicias
    etiqueta_afp:      str   = "AFP HABITAT - 0.95%"

    # ─── Página (puntos) ──────────────────────────────────────
    ancho_pagina:      float = LETTER[0]  # 612
    alto_pagina:       float = LETTER[1]  # 792
    margen_superior:   float = 750
    margen_izquierdo:  float = 50
    margen_inferior:   float = 40

    # ─── Umbrales de salto de página ──────────────────────────
    umbral_tabla:      float = 150       # bloque de una tabla
    umbral_aumento:    float = 220       # bloque doble de aumento temporal
    umbral_lista:      float = 100       # listas de beneficiarios / advertencias
    piso_notas:        float = 100       # las notas finales nunca quedan más arriba

    # ─── Formato ──────────────────────────────────────────────
    separador_miles:   str   = "."       # es-CL


def get_report_config() -> ReportConfig:
    """Construye la configuración aplicando overrides de entorno."""
    base = ReportConfig()
    return ReportConfig(
        comision_afp    = _env_float("REPORTE_COMISION_AFP", base.comision_afp),
        descuento_salud = _env_float("REPORTE_DESCUENTO_SALUD", base.descuento_salud),
        monto_pgu       = int(_env_float("REPORTE_MONTO_PGU", base.monto_pgu)),
        etiqueta_afp    = os.getenv("REPORTE_ETIQUETA_AFP", base.etiqueta_afp),
        umbral_tabla    = _env_float("REPORTE_UMBRAL_TABLA", base.umbral_tabla),
        umbral_aumento  = _env_float("REPORTE_UMBRAL_AUMENTO", base.umbral_aumento),
        separador_miles = os.getenv("REPORTE_SEPARADOR_MILES", base.separador_miles),
    )
