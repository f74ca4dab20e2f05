"""
Estudio de Pensión — services/paginador.py
Cursor de diagramación: página actual + posición vertical.

La coordenada y crece hacia arriba (origen abajo a la izquierda, como en PDF),
así que "avanzar" resta. Cada construcción de reporte usa su propia instancia.
"""
import logging

from config import ReportConfig

logger = logging.getLogger("paginador")


class Paginador:

    def __init__(self, superficie, config: ReportConfig):
        self.superficie = superficie
        self.config     = config
        self.pagina     = superficie.pagina
        self.y          = config.margen_superior

    def asegurar_espacio(self, minimo: float) -> bool:
        """
        Si el cursor quedó bajo `minimo`, abre una página nueva y vuelve al
        margen superior. Retorna True cuando hubo salto.
        """
        if self.y >= minimo:
            return False
        self.pagina = self.superficie.nueva_pagina()
        self.y      = self.config.margen_superior
        logger.debug(f"[Paginador] Salto a página {self.pagina} (umbral {minimo})")
        return True

    def avanzar(self, delta: float) -> float:
        if delta < 0:
            raise ValueError(f"El cursor solo avanza hacia abajo (delta={delta})")
        self.y -= delta
        return self.y

    def fijar(self, y: float) -> float:
        """Mueve el cursor a `y` (p.ej. el retorno de una tabla). Nunca hacia arriba."""
        if y > self.y:
            raise ValueError(f"El cursor no puede subir de {self.y} a {y}")
        self.y = y
        return self.y
