"""
Pruebas del formato de montos y etiquetas.
"""
import pytest

from services.formato import (
    GRADO_INVALIDEZ_LABELS,
    TIPO_BENEFICIARIO_LABELS,
    etiqueta,
    formatear_entero,
    formatear_pct,
    formatear_uf,
    porcentaje_aumento,
    redondear,
    texto_periodo,
)


class TestRedondeo:
    """El medio se aleja de cero, igual para positivos y negativos."""

    @pytest.mark.parametrize("valor, esperado", [
        (2.5, 3),
        (3.5, 4),
        (-2.5, -3),
        (4750.4999, 4750),
        (0.5, 1),
        (0, 0),
    ])
    def test_medio_se_aleja_de_cero(self, valor, esperado):
        assert redondear(valor) == esperado

    def test_idempotente(self):
        for valor in (1.4, 2.5, -7.5, 1234567.89):
            assert redondear(redondear(valor)) == redondear(valor)


class TestFormatearEntero:

    def test_agrupa_miles_con_punto(self):
        assert formatear_entero(1234567.5) == "1.234.568"

    def test_separador_configurable(self):
        assert formatear_entero(1234567.5, ",") == "1,234,568"

    def test_sin_miles(self):
        assert formatear_entero(999) == "999"
        assert formatear_entero(0) == "0"

    def test_negativo_lleva_signo_adelante(self):
        assert formatear_entero(-4750) == "-4.750"

    def test_quitar_separador_devuelve_el_entero_redondeado(self):
        """Leer el texto sin separadores reconstruye el valor redondeado."""
        for valor in (0.4, 12.5, 4750, 224004, 38500000, 1234567.49, -35000.5):
            texto = formatear_entero(valor)
            assert int(texto.replace(".", "")) == redondear(valor)


class TestFormatosCortos:

    def test_uf_dos_decimales(self):
        assert formatear_uf(12.987) == "12.99"
        assert formatear_uf(10) == "10.00"

    def test_porcentaje_desde_fraccion(self):
        assert formatear_pct(0.6) == "60%"
        assert formatear_pct(0.15) == "15%"
        assert formatear_pct(1) == "100%"

    def test_aumento_como_fraccion_o_porcentaje(self):
        assert porcentaje_aumento(0.3) == 30
        assert porcentaje_aumento(30) == 30
        assert porcentaje_aumento(0.25) == 25

    @pytest.mark.parametrize("meses, esperado", [
        (60, "5 anos"),
        (120, "10 anos"),
        (66, "5a 6m"),
        (36, "3 anos"),
        (7, "0a 7m"),
    ])
    def test_texto_periodo(self, meses, esperado):
        assert texto_periodo(meses) == esperado


class TestEtiquetas:

    def test_codigo_conocido(self):
        assert etiqueta(TIPO_BENEFICIARIO_LABELS, "hijo") == "Hijo/a"
        assert etiqueta(GRADO_INVALIDEZ_LABELS, "total_2_3") == "Total 2/3 (50%)"

    def test_codigo_desconocido_se_muestra_tal_cual(self):
        assert etiqueta(TIPO_BENEFICIARIO_LABELS, "nieto") == "nieto"

    def test_sin_codigo(self):
        assert etiqueta(GRADO_INVALIDEZ_LABELS, None) == ""
