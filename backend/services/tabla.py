"""
Estudio de Pensión — services/tabla.py
Dibuja una grilla con encabezado + filas de datos a partir de un origen.

Convenciones visuales:
  · Fila 0 (encabezado): fondo azul corporativo, texto blanco en negrita
  · Fila 1: sin fondo, es el resultado principal del bloque
  · Filas 2+: fondo celeste suave
  · Todas las celdas llevan borde fino
El texto no se ajusta ni se corta; si no cabe, desborda la celda.
"""
from dataclasses import dataclass, field

from reportlab.lib import colors

C_HEADER_BG   = colors.HexColor("#1F4E79")
C_ROW_ALT     = colors.HexColor("#E8F4FD")
C_BORDER      = colors.Color(0.8, 0.8, 0.8)
C_TEXT_HEADER = colors.white
C_TEXT_BODY   = colors.Color(0.2, 0.2, 0.2)


@dataclass(frozen=True)
class EstiloTabla:
    alto_fila:      float = 18
    padding:        float = 4
    offset_texto:   float = 2      # sobre la línea base de la fila
    offset_celda:   float = 4      # la celda arranca bajo la línea base
    tamano_fuente:  float = 7
    grosor_borde:   float = 0.5
    separacion:     float = 10     # espacio libre bajo la tabla
    fondo_header:   colors.Color = field(default=C_HEADER_BG)
    fondo_alterno:  colors.Color = field(default=C_ROW_ALT)
    color_borde:    colors.Color = field(default=C_BORDER)
    texto_header:   colors.Color = field(default=C_TEXT_HEADER)
    texto_cuerpo:   colors.Color = field(default=C_TEXT_BODY)


ESTILO_DEFAULT = EstiloTabla()


def alto_tabla(n_filas: int, estilo: EstiloTabla = ESTILO_DEFAULT) -> float:
    """Espacio vertical que consume una tabla, separación incluida."""
    return n_filas * estilo.alto_fila + estilo.separacion


def dibujar_tabla(superficie, filas: list[list[str]], x: float, y: float,
                  anchos: list[float], estilo: EstiloTabla = ESTILO_DEFAULT) -> float:
    """
    Dibuja `filas` con la primera como encabezado y retorna el nuevo cursor
    vertical (debajo de la tabla, separación incluida).

    Cada fila debe tener tantas celdas como `anchos`.
    """
    for i, fila in enumerate(filas):
        if len(fila) != len(anchos):
            raise ValueError(
                f"Fila {i} tiene {len(fila)} celdas y se esperaban {len(anchos)}"
            )

    cursor_y = y
    for r, fila in enumerate(filas):
        cursor_x = x
        es_header = r == 0
        for texto, ancho in zip(fila, anchos):
            base = cursor_y - estilo.offset_celda

            if es_header:
                superficie.rectangulo(cursor_x, base, ancho, estilo.alto_fila,
                                      relleno=estilo.fondo_header)
            elif r > 1:
                superficie.rectangulo(cursor_x, base, ancho, estilo.alto_fila,
                                      relleno=estilo.fondo_alterno)

            superficie.rectangulo(cursor_x, base, ancho, estilo.alto_fila,
                                  borde=estilo.color_borde, grosor=estilo.grosor_borde)

            superficie.texto(
                cursor_x + estilo.padding, cursor_y + estilo.offset_texto, texto,
                tamano = estilo.tamano_fuente,
                fuente = superficie.fuente_negrita if es_header else superficie.fuente_regular,
                color  = estilo.texto_header if es_header else estilo.texto_cuerpo,
            )
            cursor_x += ancho
        cursor_y -= estilo.alto_fila

    return cursor_y - estilo.separacion
