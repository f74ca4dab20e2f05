"""
Estudio de Pensión — services/superficie.py
Superficie de dibujo: envoltorio mínimo sobre el canvas de ReportLab.

El ensamblador del reporte solo conoce estas primitivas (página, texto,
rectángulo, serialización); cualquier objeto con la misma interfaz sirve,
lo que permite probar la diagramación sin generar un PDF real.
"""
import io
import logging

from reportlab.lib import colors
from reportlab.pdfgen import canvas

logger = logging.getLogger("superficie")


class SuperficieReportLab:

    fuente_regular = "Helvetica"
    fuente_negrita = "Helvetica-Bold"

    def __init__(self, ancho: float, alto: float, titulo: str = "", autor: str = ""):
        self._buf    = io.BytesIO()
        self._canvas = canvas.Canvas(self._buf, pagesize=(ancho, alto))
        if titulo:
            self._canvas.setTitle(titulo)
        if autor:
            self._canvas.setAuthor(autor)
        # La primera página la abre el canvas al crearse
        self.pagina = 1

    def nueva_pagina(self) -> int:
        """Cierra la página actual y abre otra del mismo tamaño."""
        self._canvas.showPage()
        self.pagina += 1
        return self.pagina

    def texto(self, x: float, y: float, texto: str, tamano: float = 10,
              fuente: str | None = None, color: colors.Color | None = None) -> None:
        c = self._canvas
        c.setFillColor(color or colors.black)
        c.setFont(fuente or self.fuente_regular, tamano)
        c.drawString(x, y, texto)

    def rectangulo(self, x: float, y: float, ancho: float, alto: float,
                   relleno: colors.Color | None = None,
                   borde: colors.Color | None = None,
                   grosor: float = 0.0) -> None:
        c       = self._canvas
        rellena = relleno is not None
        traza   = borde is not None and grosor > 0
        if not (rellena or traza):
            return
        c.saveState()
        if rellena:
            c.setFillColor(relleno)
        if traza:
            c.setStrokeColor(borde)
            c.setLineWidth(grosor)
        c.rect(x, y, ancho, alto, fill=int(rellena), stroke=int(traza))
        c.restoreState()

    def serializar(self) -> bytes:
        self._canvas.save()
        data = self._buf.getvalue()
        logger.debug(f"[Superficie] {self.pagina} página(s), {len(data):,} bytes")
        return data
