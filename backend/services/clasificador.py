"""
Estudio de Pensión — services/clasificador.py
Ordena la lista plana de escenarios calculados en las secciones del reporte.

Reglas por tipo de pensión:
  · vejez         → Retiro Programado, RV Inmediata, RV Garantizadas*, RV con Aumento*
  · invalidez     → Retiro Programado, RV Inmediata, RV Garantizadas*, RV con Aumento*,
                    Pensión de Invalidez (solo si es el único escenario)
  · sobrevivencia → un escenario por sección, en el orden recibido
  (* una sección por escenario, en el orden recibido)

Si el escenario trae `modalidad`, esa es su sección. Si no, se deduce del
nombre y de la forma (garantía / aumento temporal) como lo hace el motor de
cálculo hoy. La numeración sale de la posición final en la lista.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from models import Forma, ResultadoData, SeccionTipo, forma_de, modalidad_coherente

logger = logging.getLogger("clasificador")


@dataclass(frozen=True)
class Seccion:
    numero:    int
    tipo:      SeccionTipo
    resultado: ResultadoData
    forma:     Forma


@dataclass
class Clasificacion:
    secciones:    list[Seccion] = field(default_factory=list)
    advertencias: list[str]     = field(default_factory=list)


Predicado = Callable[[ResultadoData], bool]


def _pertenece(r: ResultadoData, tipo: SeccionTipo, legado: Predicado) -> bool:
    # una modalidad que contradice la forma no manda: decide el nombre/forma
    if r.modalidad is not None and modalidad_coherente(r):
        return r.modalidad is tipo
    return legado(r)


def _primero(resultados, tipo: SeccionTipo, legado: Predicado) -> Optional[ResultadoData]:
    return next((r for r in resultados if _pertenece(r, tipo, legado)), None)


def _todos(resultados, tipo: SeccionTipo, legado: Predicado) -> list[ResultadoData]:
    return [r for r in resultados if _pertenece(r, tipo, legado)]


# ─── Predicados por nombre / forma ────────────────────────────

def _sin_garantia_ni_aumento(r: ResultadoData) -> bool:
    return not r.periodoGarantizado and r.aumentoTemporal is None


def _solo_garantia(r: ResultadoData) -> bool:
    return (r.periodoGarantizado or 0) > 0 and r.aumentoTemporal is None


def _con_aumento(r: ResultadoData) -> bool:
    return r.aumentoTemporal is not None


def _es_retiro_programado(r: ResultadoData) -> bool:
    return "Retiro Programado" in r.nombre


def _es_rv_inmediata_vejez(r: ResultadoData) -> bool:
    n = r.nombre
    return ("Inmediata" in n or "RV" in n or "Renta Vitalicia" in n) and _sin_garantia_ni_aumento(r)


def _es_rv_inmediata_invalidez(r: ResultadoData) -> bool:
    return "RV Inmediata" in r.nombre and "Invalidez" in r.nombre


def _es_rv_garantia_invalidez(r: ResultadoData) -> bool:
    return "RV Invalidez Garantia" in r.nombre


def _es_rv_aumento_invalidez(r: ResultadoData) -> bool:
    return "RV Invalidez +" in r.nombre and "x" in r.nombre


# ═══════════════════════════════════════════════════════════════
# RAMAS
# ═══════════════════════════════════════════════════════════════

def _ramas_vejez(resultados: list[ResultadoData]) -> list[tuple[SeccionTipo, ResultadoData]]:
    T = SeccionTipo
    orden: list[tuple[SeccionTipo, ResultadoData]] = []

    rp = _primero(resultados, T.RETIRO_PROGRAMADO, _es_retiro_programado)
    if rp:
        orden.append((T.RETIRO_PROGRAMADO, rp))

    rvi = _primero(resultados, T.RV_INMEDIATA, _es_rv_inmediata_vejez)
    if rvi:
        orden.append((T.RV_INMEDIATA, rvi))

    orden += [(T.RV_GARANTIZADA, r) for r in _todos(resultados, T.RV_GARANTIZADA, _solo_garantia)]
    orden += [(T.RV_AUMENTO, r) for r in _todos(resultados, T.RV_AUMENTO, _con_aumento)]
    return orden


def _ramas_invalidez(resultados: list[ResultadoData]) -> list[tuple[SeccionTipo, ResultadoData]]:
    T = SeccionTipo
    orden: list[tuple[SeccionTipo, ResultadoData]] = []

    rp = _primero(resultados, T.RETIRO_PROGRAMADO, _es_retiro_programado)
    if rp:
        orden.append((T.RETIRO_PROGRAMADO, rp))

    rvi = _primero(resultados, T.RV_INMEDIATA, _es_rv_inmediata_invalidez)
    if rvi:
        orden.append((T.RV_INMEDIATA, rvi))

    orden += [(T.RV_GARANTIZADA, r) for r in _todos(resultados, T.RV_GARANTIZADA, _es_rv_garantia_invalidez)]
    orden += [(T.RV_AUMENTO, r) for r in _todos(resultados, T.RV_AUMENTO, _es_rv_aumento_invalidez)]

    # La pensión básica solo se informa cuando no hay otros escenarios
    unico = len(resultados) == 1
    basica = _primero(resultados, T.PENSION_INVALIDEZ,
                      lambda r: unico and "Pension Invalidez" in r.nombre)
    if basica:
        orden.append((T.PENSION_INVALIDEZ, basica))
    return orden


def _ramas_sobrevivencia(resultados: list[ResultadoData]) -> list[tuple[SeccionTipo, ResultadoData]]:
    return [(SeccionTipo.SOBREVIVENCIA, r) for r in resultados]


_RAMAS = {
    "vejez":         _ramas_vejez,
    "invalidez":     _ramas_invalidez,
    "sobrevivencia": _ramas_sobrevivencia,
}


# ═══════════════════════════════════════════════════════════════
# FUNCIÓN PRINCIPAL
# ═══════════════════════════════════════════════════════════════

def clasificar(resultados: list[ResultadoData], tipo_pension: str) -> Clasificacion:
    """
    Retorna las secciones a dibujar, ya numeradas, y las advertencias de
    clasificación (escenarios esperados que no aparecieron o escenarios que
    no calzaron con ninguna sección). Una omisión nunca es un error.
    """
    rama = _RAMAS.get(tipo_pension)
    if rama is None:
        raise ValueError(f"Tipo de pensión desconocido: {tipo_pension}")

    orden = rama(resultados)
    secciones = [
        Seccion(numero=i, tipo=tipo, resultado=r, forma=forma_de(r))
        for i, (tipo, r) in enumerate(orden, start=1)
    ]
    clasificacion = Clasificacion(secciones=secciones)

    if tipo_pension != "sobrevivencia":
        tipos = {s.tipo for s in secciones}
        if SeccionTipo.PENSION_INVALIDEZ not in tipos:
            if SeccionTipo.RETIRO_PROGRAMADO not in tipos:
                clasificacion.advertencias.append("Sin escenario de Retiro Programado")
            if SeccionTipo.RV_INMEDIATA not in tipos:
                clasificacion.advertencias.append("Sin escenario de Renta Vitalicia Inmediata")

    usados = {id(s.resultado) for s in secciones}
    for r in resultados:
        if id(r) not in usados:
            clasificacion.advertencias.append(f"Escenario no incluido en el reporte: {r.nombre}")

    for adv in clasificacion.advertencias:
        logger.warning(f"[Clasificador] {tipo_pension}: {adv}")
    logger.info(f"[Clasificador] {tipo_pension}: {len(secciones)} secciones "
                f"de {len(resultados)} escenarios")
    return clasificacion
