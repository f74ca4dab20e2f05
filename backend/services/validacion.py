"""
Estudio de Pensión — services/validacion.py
Chequeos previos al dibujo: si algo falla no se genera ni una página.

Pydantic ya rechaza campos obligatorios ausentes; aquí se revisa lo que el
esquema no puede saber (valores no finitos, divisores en cero, listas vacías).
"""
import math

from models import ReporteRequest, modalidad_coherente


class ReporteValidationError(Exception):
    """Datos de entrada insuficientes para armar el reporte."""

    def __init__(self, errores: list[str]):
        self.errores = errores
        super().__init__("; ".join(errores))


def _finito(valor) -> bool:
    return valor is not None and math.isfinite(valor)


def validar_solicitud(solicitud: ReporteRequest) -> None:
    """Lanza ReporteValidationError con todos los problemas encontrados."""
    errores: list[str] = []
    afiliado   = solicitud.afiliado
    parametros = solicitud.parametros
    tipo       = afiliado.tipo_pension

    if not _finito(parametros.uf) or parametros.uf <= 0:
        errores.append(f"parametros.uf debe ser un número positivo (recibido: {parametros.uf})")

    if not _finito(afiliado.fondosAcumulados):
        errores.append("afiliado.fondosAcumulados debe ser un número finito")

    if afiliado.ingresoBase is not None and not _finito(afiliado.ingresoBase):
        errores.append("afiliado.ingresoBase debe ser un número finito")

    for k, b in enumerate(solicitud.beneficiarios):
        if not _finito(b.porcentajePension):
            errores.append(f"beneficiarios[{k}].porcentajePension debe ser un número finito")

    if not solicitud.resultados:
        errores.append(f"No hay escenarios calculados para la pensión de {tipo}")

    for i, r in enumerate(solicitud.resultados):
        campo = f"resultados[{i}] ({r.nombre})"
        for nombre in ("pensionMensual", "pensionEnUF", "tasaInteres"):
            if not _finito(getattr(r, nombre)):
                errores.append(f"{campo}.{nombre} debe ser un número finito")

        if r.aumentoTemporal is not None:
            a = r.aumentoTemporal
            if not (_finito(a.porcentaje) and _finito(a.pensionFinal)):
                errores.append(f"{campo}.aumentoTemporal tiene montos no finitos")
            if a.meses < 0:
                errores.append(f"{campo}.aumentoTemporal.meses no puede ser negativo")

        if (r.periodoGarantizado or 0) < 0:
            errores.append(f"{campo}.periodoGarantizado no puede ser negativo")

        if r.modalidad is not None and not modalidad_coherente(r):
            errores.append(f"{campo}.modalidad '{r.modalidad.value}' no corresponde a su "
                           "garantía / aumento temporal")

        if r.ingresoBase is not None and not _finito(r.ingresoBase):
            errores.append(f"{campo}.ingresoBase debe ser un número finito")

        if tipo == "sobrevivencia" and r.pensionPorBeneficiario:
            for j, b in enumerate(r.pensionPorBeneficiario):
                if not (_finito(b.porcentaje) and _finito(b.pensionMensual)):
                    errores.append(f"{campo}.pensionPorBeneficiario[{j}] tiene montos no finitos")

    if errores:
        raise ReporteValidationError(errores)
