"""
Estudio de Pensión — routers/reportes.py
Descarga del Estudio Preliminar de Pensión en PDF.

Rutas:
  POST /api/reporte  — Recibe afiliado, parámetros, escenarios y beneficiarios;
                       retorna el PDF como adjunto
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from models import ReporteRequest
from services.pdf_service import generar_pdf_reporte
from services.validacion import ReporteValidationError

logger = logging.getLogger("router.reportes")

router = APIRouter(prefix="/api", tags=["Reportes PDF"])


# ═══════════════════════════════════════════════════════════════
# ENDPOINT
# ═══════════════════════════════════════════════════════════════

@router.post("/reporte")
def descargar_reporte(solicitud: ReporteRequest):
    """
    Genera el estudio según el tipo de pensión del afiliado
    (vejez | invalidez | sobrevivencia) y lo entrega como descarga.

    Errores:
        422: datos insuficientes para armar el reporte
        500: falla al dibujar o serializar el PDF
    """
    tipo = solicitud.afiliado.tipo_pension
    logger.info(f"[Reportes] Solicitud {tipo}: {len(solicitud.resultados)} escenarios, "
                f"{len(solicitud.beneficiarios)} beneficiarios")

    try:
        reporte = generar_pdf_reporte(solicitud)
    except ReporteValidationError as e:
        logger.warning(f"[Reportes] Solicitud inválida: {e}")
        return JSONResponse(
            status_code = 422,
            content     = {"success": False, "error": f"Datos insuficientes: {e}", "errores": e.errores},
        )
    except Exception as e:
        logger.error(f"[Reportes] Error generando reporte: {e}", exc_info=True)
        return JSONResponse(
            status_code = 500,
            content     = {"success": False, "error": f"Error al generar el reporte PDF: {e}"},
        )

    for adv in reporte.advertencias:
        logger.info(f"[Reportes] Advertencia: {adv}")
    logger.info(f"[Reportes] PDF generado: {reporte.nombre_archivo} "
                f"({len(reporte.contenido):,} bytes, {reporte.paginas} pág.)")

    return Response(
        content    = reporte.contenido,
        media_type = "application/pdf",
        headers    = {
            "Content-Disposition":    f'attachment; filename="{reporte.nombre_archivo}"',
            "Content-Length":         str(len(reporte.contenido)),
            "X-Reporte-Advertencias": str(len(reporte.advertencias)),
        },
    )
