"""
Estudio de Pensión — models.py
Esquemas de entrada del reporte (Pydantic) y forma estructural de cada escenario.

Los nombres de campo respetan el JSON que entrega el motor de cálculo
(camelCase en español); no se renombran para no romper el contrato.
"""
import enum
from dataclasses import dataclass
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field


TipoPension = Literal["vejez", "invalidez", "sobrevivencia"]


class SeccionTipo(str, enum.Enum):
    """Modalidad de un escenario; también es el discriminante explícito opcional."""
    RETIRO_PROGRAMADO = "retiro_programado"
    RV_INMEDIATA      = "rv_inmediata"
    RV_GARANTIZADA    = "rv_garantizada"
    RV_AUMENTO        = "rv_aumento"
    PENSION_INVALIDEZ = "pension_invalidez"
    SOBREVIVENCIA     = "sobrevivencia"


# ═══════════════════════════════════════════════════════════════
# SCHEMAS DE ENTRADA
# ═══════════════════════════════════════════════════════════════

class AfiliadoData(BaseModel):
    nombre:           str   = ""
    sexo:             str   = ""
    edad:             int
    fondosAcumulados: float
    anosCotizados:    float = 0
    tipoPension:      Optional[TipoPension] = None     # None = vejez
    gradoInvalidez:   Optional[str]   = None           # total | total_2_3 | parcial
    ingresoBase:      Optional[float] = None

    @property
    def tipo_pension(self) -> str:
        return self.tipoPension or "vejez"


class ParametrosData(BaseModel):
    uf:     float
    tasaRP: float = 0.0
    tasaRV: float = 0.0


class AumentoTemporal(BaseModel):
    meses:            int   = 0
    porcentaje:       float = 0.0     # 0.3 ó 30, ambos son 30%
    pensionAumentada: float = 0.0
    pensionFinal:     float = 0.0


class PensionPorBeneficiario(BaseModel):
    tipo:           str
    porcentaje:     float              # fracción 0..1
    pensionMensual: float


class ResultadoData(BaseModel):
    nombre:                 str
    pensionMensual:         float
    pensionEnUF:            float
    pensionAnual:           float = 0.0
    cnu:                    float = 0.0
    tasaInteres:            float = 0.0
    expectativaVida:        float = 0.0
    periodoGarantizado:     Optional[int]             = None   # meses
    aumentoTemporal:        Optional[AumentoTemporal] = None
    advertencias:           Optional[list[str]]       = None
    pensionPorBeneficiario: Optional[list[PensionPorBeneficiario]] = None
    gradoInvalidez:         Optional[str]   = None
    ingresoBase:            Optional[float] = None
    porcentajeInvalidez:    Optional[float] = None
    modalidad:              Optional[SeccionTipo] = None  # si viene, manda sobre el nombre


class BeneficiarioData(BaseModel):
    tipo:              str            # conyuge | conviviente | hijo | padre | madre
    edad:              int
    sexo:              str = ""
    porcentajePension: float


class ReporteRequest(BaseModel):
    afiliado:      AfiliadoData
    parametros:    ParametrosData
    resultados:    list[ResultadoData]
    beneficiarios: list[BeneficiarioData] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════
# FORMA DEL ESCENARIO (unión etiquetada)
# ═══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Inmediata:
    pass


@dataclass(frozen=True)
class Garantizada:
    meses: int


@dataclass(frozen=True)
class Aumentada:
    meses:          int
    porcentaje:     float
    pension_final:  float
    meses_garantia: int = 0      # > 0 = aumento temporal con garantía

    @property
    def con_garantia(self) -> bool:
        return self.meses_garantia > 0


Forma = Union[Inmediata, Garantizada, Aumentada]


def forma_de(resultado: ResultadoData) -> Forma:
    """
    Deriva la forma estructural de un escenario.
    El aumento temporal tiene prioridad sobre el período garantizado.
    """
    garantia = resultado.periodoGarantizado or 0
    aumento  = resultado.aumentoTemporal
    if aumento is not None:
        return Aumentada(
            meses          = aumento.meses or 0,
            porcentaje     = aumento.porcentaje or 0.0,
            pension_final  = aumento.pensionFinal or resultado.pensionMensual,
            meses_garantia = garantia if garantia > 0 else 0,
        )
    if garantia > 0:
        return Garantizada(meses=garantia)
    return Inmediata()


_FORMA_POR_MODALIDAD = {
    SeccionTipo.RV_INMEDIATA:   Inmediata,
    SeccionTipo.RV_GARANTIZADA: Garantizada,
    SeccionTipo.RV_AUMENTO:     Aumentada,
}


def modalidad_coherente(resultado: ResultadoData) -> bool:
    """
    False si `modalidad` contradice la forma del escenario
    (p.ej. rv_garantizada con aumento temporal, o rv_aumento sin él).
    """
    esperada = _FORMA_POR_MODALIDAD.get(resultado.modalidad)
    return esperada is None or isinstance(forma_de(resultado), esperada)
