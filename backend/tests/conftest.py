"""
Fixtures comunes para las pruebas del Estudio de Pensión.

La SuperficieFake registra cada texto y rectángulo dibujado, así las pruebas
revisan la diagramación sin abrir un PDF.
"""
import copy
from collections import namedtuple

import pytest

from config import ReportConfig
from models import ReporteRequest


TextoDibujado = namedtuple("TextoDibujado", "pagina x y texto tamano fuente color")
RectDibujado  = namedtuple("RectDibujado", "pagina x y ancho alto relleno borde grosor")


class SuperficieFake:
    fuente_regular = "Helvetica"
    fuente_negrita = "Helvetica-Bold"

    def __init__(self):
        self.pagina      = 1
        self.textos      = []
        self.rectangulos = []
        self.serializada = False

    def nueva_pagina(self) -> int:
        self.pagina += 1
        return self.pagina

    def texto(self, x, y, texto, tamano=10, fuente=None, color=None):
        self.textos.append(TextoDibujado(self.pagina, x, y, texto, tamano, fuente, color))

    def rectangulo(self, x, y, ancho, alto, relleno=None, borde=None, grosor=0.0):
        self.rectangulos.append(RectDibujado(self.pagina, x, y, ancho, alto, relleno, borde, grosor))

    def serializar(self) -> bytes:
        self.serializada = True
        return b"%PDF-fake"

    # ── ayudas para las aserciones ──
    @property
    def cadenas(self) -> list[str]:
        return [t.texto for t in self.textos]

    def buscar(self, fragmento: str) -> list[TextoDibujado]:
        return [t for t in self.textos if fragmento in t.texto]

    def uno(self, texto: str) -> TextoDibujado:
        encontrados = [t for t in self.textos if t.texto == texto]
        assert len(encontrados) == 1, f"{texto!r} aparece {len(encontrados)} veces"
        return encontrados[0]


# ═══════════════════════════════════════════════════════════════
# ENTORNO
# ═══════════════════════════════════════════════════════════════

@pytest.fixture(autouse=True)
def entorno_limpio(monkeypatch):
    """Ningún override REPORTE_* del entorno del desarrollador afecta las pruebas."""
    for var in ("REPORTE_COMISION_AFP", "REPORTE_DESCUENTO_SALUD", "REPORTE_MONTO_PGU",
                "REPORTE_ETIQUETA_AFP", "REPORTE_UMBRAL_TABLA", "REPORTE_UMBRAL_AUMENTO",
                "REPORTE_SEPARADOR_MILES"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cfg():
    return ReportConfig()


@pytest.fixture
def superficie():
    return SuperficieFake()


@pytest.fixture
def fabrica_superficie():
    """Para pruebas que necesitan más de una superficie."""
    return SuperficieFake


# ═══════════════════════════════════════════════════════════════
# ESCENARIOS
# ═══════════════════════════════════════════════════════════════

RP = {
    "nombre": "Retiro Programado",
    "pensionMensual": 500000,
    "pensionEnUF": 12.987,
    "tasaInteres": 0.0391,
}

RVI = {
    "nombre": "Renta Vitalicia Inmediata",
    "pensionMensual": 400000,
    "pensionEnUF": 10.39,
    "tasaInteres": 0.0326,
}

RV_GARANTIZADA = {
    "nombre": "RV Garantizada 10 anos",
    "pensionMensual": 390000,
    "pensionEnUF": 10.13,
    "tasaInteres": 0.0326,
    "periodoGarantizado": 120,
}

RV_AUMENTO = {
    "nombre": "RV Aumento Temporal 30% x 36m",
    "pensionMensual": 520000,
    "pensionEnUF": 13.51,
    "tasaInteres": 0.0326,
    "periodoGarantizado": 120,
    "aumentoTemporal": {
        "meses": 36,
        "porcentaje": 0.3,
        "pensionAumentada": 520000,
        "pensionFinal": 400000,
    },
}


@pytest.fixture
def escenarios():
    """Copias frescas de los escenarios tipo, para poder mutarlas en cada prueba."""
    return {
        "rp":          copy.deepcopy(RP),
        "rvi":         copy.deepcopy(RVI),
        "garantizada": copy.deepcopy(RV_GARANTIZADA),
        "aumento":     copy.deepcopy(RV_AUMENTO),
    }


@pytest.fixture
def hacer_payload():
    """
    Arma el JSON de una solicitud. Por defecto: afiliado de vejez con
    38.500.000 de saldo y UF a 38.500 (1.000 UF exactas).
    """
    def _hacer(resultados, tipo=None, beneficiarios=None, uf=38500, **afiliado):
        datos_afiliado = {
            "nombre": "Juan Perez",
            "sexo": "M",
            "edad": 65,
            "fondosAcumulados": 38500000,
            "anosCotizados": 30,
        }
        if tipo is not None:
            datos_afiliado["tipoPension"] = tipo
        datos_afiliado.update(afiliado)
        return {
            "afiliado": datos_afiliado,
            "parametros": {"uf": uf, "tasaRP": 0.0391, "tasaRV": 0.0326},
            "resultados": copy.deepcopy(resultados),
            "beneficiarios": copy.deepcopy(beneficiarios or []),
        }
    return _hacer


@pytest.fixture
def hacer_solicitud(hacer_payload):
    def _hacer(resultados, **kwargs):
        return ReporteRequest.model_validate(hacer_payload(resultados, **kwargs))
    return _hacer
