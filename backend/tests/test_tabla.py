"""
Pruebas del dibujo de tablas sobre la superficie.
"""
import pytest

from services.tabla import C_HEADER_BG, C_ROW_ALT, C_BORDER, alto_tabla, dibujar_tabla


FILAS = [
    ["Modalidad", "Monto"],
    ["RETIRO PROGRAMADO", "$460.250"],
    ["Pension + PGU", "$684.254"],
]


class TestDibujarTabla:

    def test_retorna_cursor_bajo_la_tabla(self, superficie):
        y = dibujar_tabla(superficie, FILAS, 50, 700, [100, 50])
        assert y == 700 - 3 * 18 - 10
        assert y == 700 - alto_tabla(3)

    def test_fondo_de_encabezado_y_filas_alternas(self, superficie):
        dibujar_tabla(superficie, FILAS, 50, 700, [100, 50])

        rellenos = [r for r in superficie.rectangulos if r.relleno is not None]
        encabezado = [r for r in rellenos if r.relleno is C_HEADER_BG]
        alternos   = [r for r in rellenos if r.relleno is C_ROW_ALT]

        assert [(r.x, r.y, r.ancho, r.alto) for r in encabezado] == [(50, 696, 100, 18), (150, 696, 50, 18)]
        # la fila 1 va sin fondo; desde la fila 2 celeste
        assert [(r.x, r.y) for r in alternos] == [(50, 660), (150, 660)]
        assert len(rellenos) == 4

    def test_cada_celda_lleva_borde(self, superficie):
        dibujar_tabla(superficie, FILAS, 50, 700, [100, 50])

        bordes = [r for r in superficie.rectangulos if r.borde is not None]
        assert len(bordes) == 6
        assert all(r.borde is C_BORDER and r.grosor == 0.5 for r in bordes)
        assert {r.y for r in bordes} == {696, 678, 660}

    def test_posicion_y_estilo_del_texto(self, superficie):
        dibujar_tabla(superficie, FILAS, 50, 700, [100, 50])

        header = superficie.uno("Modalidad")
        assert (header.x, header.y) == (54, 702)
        assert header.fuente == "Helvetica-Bold"
        assert header.tamano == 7

        celda = superficie.uno("$684.254")
        assert (celda.x, celda.y) == (154, 666)
        assert celda.fuente == "Helvetica"

    def test_texto_largo_no_se_corta(self, superficie):
        largo = "PENSION BASE (desde mes 37) CON UN TEXTO MUY LARGO"
        dibujar_tabla(superficie, [["A"], [largo]], 50, 700, [40])
        assert largo in superficie.cadenas

    def test_fila_con_celdas_de_mas(self, superficie):
        with pytest.raises(ValueError, match="Fila 1"):
            dibujar_tabla(superficie, [["A", "B"], ["1", "2", "3"]], 50, 700, [100, 50])
        assert superficie.rectangulos == []
