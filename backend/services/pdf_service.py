"""
Estudio de Pensión — services/pdf_service.py
Generación del Estudio Preliminar de Pensión en PDF.

Arma el documento completo a partir de los escenarios ya calculados:
  1. Título + nombre del afiliado (o causante)
  2. Bloque de datos comunes (UF, edad, tipo de pensión, saldo)
  3. Secciones según el tipo de pensión (ver services/clasificador.py)
  4. Notas legales al pie

Uso:
    from services.pdf_service import generar_pdf_reporte
    reporte = generar_pdf_reporte(solicitud)
    reporte.contenido        # bytes del PDF
    reporte.nombre_archivo   # 'Estudio_JUAN_PEREZ.pdf'
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from reportlab.lib import colors

from config import ReportConfig, get_report_config
from models import Aumentada, ReporteRequest, SeccionTipo
from services.clasificador import Seccion, clasificar
from services.formato import (
    GRADO_INVALIDEZ_LABELS,
    TIPO_BENEFICIARIO_LABELS,
    TIPO_PENSION_LABELS,
    etiqueta,
    formatear_entero,
    formatear_pct,
    formatear_uf,
    porcentaje_aumento,
    redondear,
    texto_periodo,
)
from services.paginador import Paginador
from services.superficie import SuperficieReportLab
from services.tabla import alto_tabla, dibujar_tabla
from services.validacion import validar_solicitud

logger = logging.getLogger("pdf_service")

# ─── Paleta ───────────────────────────────────────────────────
C_TITULO     = colors.Color(0.102, 0.212, 0.365)
C_NOMBRE     = colors.Color(0.176, 0.216, 0.282)
C_SECCION    = colors.Color(0.122, 0.306, 0.475)
C_AUMENTO    = colors.Color(0.2, 0.5, 0.2)
C_POST       = colors.Color(0.6, 0.2, 0.2)
C_PGU_AUM    = colors.Color(0.2, 0.4, 0.6)
C_PGU_BASE   = colors.Color(0.4, 0.2, 0.4)
C_NOTA       = colors.Color(0.3, 0.3, 0.3)
C_ADVERTENCIA = colors.Color(0.4, 0.4, 0.4)
C_DIFERENCIA = colors.Color(0.5, 0.5, 0.5)
C_SEPARADOR  = colors.Color(0.7, 0.7, 0.7)

TITULOS = {
    "vejez":         "ESTUDIO PRELIMINAR DE PENSION",
    "invalidez":     "ESTUDIO PRELIMINAR DE PENSION DE INVALIDEZ",
    "sobrevivencia": "ESTUDIO PRELIMINAR DE PENSION DE SOBREVIVENCIA",
}

NOTAS_COMUNES = [
    "NOTA: VALORES ESTIMATIVOS NO CONSTITUYEN UNA OFERTA FORMAL DE PENSION.",
    "LA PGU SE SOLICITA A LOS 65 ANOS, REQUISITO TENER REGISTRO SOCIAL DE HOGARES.",
    "BONIFICACION POR ANO COTIZADO: 0.1 UF POR ANO COTIZADO.",
]

NOTAS_EXTRA = {
    "invalidez":     ["PENSION DE INVALIDEZ: REQUIERE DICTAMEN DE COMISION MEDICA."],
    "sobrevivencia": ["PENSION DE SOBREVIVENCIA: PORCENTAJES SEGUN ART. 58 DL 3500."],
}

_RENTAS_VITALICIAS = {SeccionTipo.RV_INMEDIATA, SeccionTipo.RV_GARANTIZADA, SeccionTipo.RV_AUMENTO}


# ═══════════════════════════════════════════════════════════════
# MONTOS DERIVADOS
# ═══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Montos:
    bruto:           float
    descuento_afp:   int
    descuento_salud: int
    monto_pgu:       int  = 0
    con_comision:    bool = False

    @property
    def descuentos(self) -> int:
        return self.descuento_afp + self.descuento_salud

    @property
    def liquida(self) -> float:
        return self.bruto - self.descuentos

    @property
    def con_pgu(self) -> float:
        return self.liquida + self.monto_pgu


def calcular_montos(bruto: float, tipo: SeccionTipo, cfg: ReportConfig) -> Montos:
    """
    Comisión AFP solo en Retiro Programado; 7% de salud en todos;
    la PGU se suma únicamente en rentas vitalicias.
    """
    con_comision = tipo is SeccionTipo.RETIRO_PROGRAMADO
    return Montos(
        bruto           = bruto,
        descuento_afp   = redondear(bruto * cfg.comision_afp) if con_comision else 0,
        descuento_salud = redondear(bruto * cfg.descuento_salud),
        monto_pgu       = cfg.monto_pgu if tipo in _RENTAS_VITALICIAS else 0,
        con_comision    = con_comision,
    )


def _pct_tasa(tasa: float) -> str:
    """0.0095 → '0.95%', 0.07 → '7%'."""
    return f"{tasa * 100:g}%"


def diferencia_porcentual(durante: float, despues: float) -> Optional[float]:
    """(durante - después) / después en %, o None si después es cero."""
    if despues == 0:
        return None
    return (durante - despues) / despues * 100


def nombre_archivo(nombre: str, tipo_pension: str) -> str:
    """'Juan Pérez' + invalidez → 'Estudio_invalidez_JUAN_PREZ.pdf'."""
    limpio = re.sub(r"[^A-Z\s]", "", (nombre or "AFILIADO").strip().upper())
    limpio = re.sub(r"\s+", "_", limpio).strip()
    sufijo = "" if tipo_pension == "vejez" else f"_{tipo_pension}"
    return f"Estudio{sufijo}_{limpio}.pdf"


@dataclass
class ReporteGenerado:
    contenido:      bytes
    nombre_archivo: str
    paginas:        int
    advertencias:   list[str] = field(default_factory=list)


# ═══════════════════════════════════════════════════════════════
# ENSAMBLADOR
# ═══════════════════════════════════════════════════════════════

class _Ensamblador:

    def __init__(self, solicitud: ReporteRequest, cfg: ReportConfig, superficie):
        self.solicitud    = solicitud
        self.cfg          = cfg
        self.sup          = superficie
        self.pag          = Paginador(superficie, cfg)
        self.tipo         = solicitud.afiliado.tipo_pension
        self.advertencias: list[str] = []

        self.h_comision = f"Desc. {_pct_tasa(cfg.comision_afp)}"
        self.h_salud    = f"Dscto. {_pct_tasa(cfg.descuento_salud)} Salud"

    # ── Primitivas con cursor ─────────────────────────────────
    def _fmt(self, valor: float) -> str:
        return formatear_entero(valor, self.cfg.separador_miles)

    def _pesos(self, valor: float) -> str:
        return f"${self._fmt(valor)}"

    def _menos(self, valor: float) -> str:
        return f"-${self._fmt(valor)}"

    def _texto(self, texto: str, tamano: float = 10, negrita: bool = False,
               color: colors.Color | None = None, x: float | None = None) -> None:
        self.sup.texto(
            self.cfg.margen_izquierdo if x is None else x, self.pag.y, texto,
            tamano = tamano,
            fuente = self.sup.fuente_negrita if negrita else self.sup.fuente_regular,
            color  = color,
        )

    def _titulo_seccion(self, texto: str) -> None:
        self._texto(texto, tamano=11, negrita=True, color=C_SECCION)

    def _tabla(self, filas: list[list[str]], anchos: list[float], x: float | None = None) -> None:
        x = self.cfg.margen_izquierdo if x is None else x
        self.pag.fijar(dibujar_tabla(self.sup, filas, x, self.pag.y, anchos))

    def _lista(self, items: list[str], tamano: float, color=None, x: float | None = None) -> None:
        for item in items:
            self.pag.asegurar_espacio(self.cfg.umbral_lista)
            self._texto(item, tamano=tamano, color=color, x=x)
            self.pag.avanzar(12)

    def _fila_montos(self, modalidad: str | None, uf: str, m: Montos, tasa: str | None = None) -> list[str]:
        """Celdas de una fila de montos; `modalidad=None` omite la primera columna."""
        fila = [] if modalidad is None else [modalidad]
        if tasa is not None:
            fila.append(tasa)
        fila += [f"{uf} UF", self._pesos(m.bruto)]
        if m.con_comision:
            fila.append(self._menos(m.descuento_afp))
        fila += [self._menos(m.descuento_salud), self._pesos(m.liquida)]
        return fila

    def _fila_pgu(self, m: Montos, columnas: int) -> list[str]:
        return [f"Pension + PGU ({self._pesos(self.cfg.monto_pgu)})"] + [""] * (columnas - 2) + [self._pesos(m.con_pgu)]

    # ── Cabecera ──────────────────────────────────────────────
    def encabezado(self) -> None:
        afiliado = self.solicitud.afiliado
        self._texto(TITULOS[self.tipo], tamano=16, negrita=True, color=C_TITULO, x=150)
        self.pag.avanzar(25)

        saludo = "CAUSANTE" if self.tipo == "sobrevivencia" else "SR."
        nombre = (afiliado.nombre or "AFILIADO").upper()
        self._texto(f"{saludo} {nombre}", tamano=14, negrita=True, color=C_NOMBRE, x=220)
        self.pag.avanzar(25)

    def bloque_info(self) -> None:
        afiliado   = self.solicitud.afiliado
        uf         = self.solicitud.parametros.uf
        fondos_uf  = redondear(afiliado.fondosAcumulados / uf)

        self._texto(f"Valor UF Utilizado: {self._pesos(uf)}")
        self.pag.avanzar(15)
        self._texto(f"Edad: {afiliado.edad} anos")
        self.pag.avanzar(15)
        self._texto(f"Tipo de Pension: {etiqueta(TIPO_PENSION_LABELS, self.tipo)}")
        self.pag.avanzar(15)
        self._texto(f"Saldo Acumulado (Bruto): {self._fmt(fondos_uf)} UF")
        self.pag.avanzar(20)

    # ── Secciones de vejez ────────────────────────────────────
    def retiro_programado(self, s: Seccion) -> None:
        r = s.resultado
        invalidez = self.tipo == "invalidez"
        self.pag.asegurar_espacio(self.cfg.umbral_tabla)

        self._titulo_seccion(f"{s.numero}. Retiro Programado" + (" (Invalidez)" if invalidez else ""))
        self.pag.avanzar(15)
        subtitulo = ("(Usa tabla de mortalidad de invalidos I-H/I-M-2020)" if invalidez
                     else f"({self.cfg.etiqueta_afp})")
        self._texto(subtitulo, tamano=9)
        self.pag.avanzar(20)

        m = calcular_montos(r.pensionMensual, s.tipo, self.cfg)
        self._tabla([
            ["Modalidad", "Pension (UF)", "Pension M. Bruto", self.h_comision, self.h_salud, "Pension Liquida"],
            self._fila_montos("RP INVALIDEZ" if invalidez else "RETIRO PROGRAMADO",
                              formatear_uf(r.pensionEnUF), m),
        ], [110, 70, 90, 70, 80, 85])
        self.pag.avanzar(10)

    def _rv_con_pgu(self, s: Seccion, titulo: str, subtitulo: str, modalidad: str) -> None:
        r = s.resultado
        self.pag.asegurar_espacio(self.cfg.umbral_tabla)
        self._titulo_seccion(titulo)
        self.pag.avanzar(15)
        self._texto(subtitulo, tamano=9)
        self.pag.avanzar(20)

        m    = calcular_montos(r.pensionMensual, s.tipo, self.cfg)
        tasa = f"{r.tasaInteres * 100:.2f}%"
        self._tabla([
            ["Modalidad", "Tasa (%)", "Pension (UF)", "Pension M. Bruto", self.h_salud, "Pension Liquida"],
            self._fila_montos(modalidad, formatear_uf(r.pensionEnUF), m, tasa=tasa),
            self._fila_pgu(m, 6),
        ], [120, 55, 70, 85, 75, 85])
        self.pag.avanzar(10)

    def rv_inmediata_vejez(self, s: Seccion) -> None:
        tasa = f"{s.resultado.tasaInteres * 100:.2f}"
        self._rv_con_pgu(
            s,
            f"{s.numero}. Renta Vitalicia Inmediata (Simple)",
            f"Calculo RVI: Tasa de Venta: Media Mercado (Vejez: {tasa}%)",
            "RVI SIMPLE (Media Mercado)",
        )

    def rv_garantizada_vejez(self, s: Seccion) -> None:
        meses    = s.resultado.periodoGarantizado or 0
        garantia = texto_periodo(meses)
        self._rv_con_pgu(
            s,
            f"{s.numero}. RV con Garantia {garantia} ({meses} meses)",
            "Si fallece antes del periodo, beneficiarios reciben el 100% de la pension",
            f"RV GARANTIZADA {garantia}",
        )

    def rv_aumento_vejez(self, s: Seccion) -> None:
        r     = s.resultado
        forma = s.forma if isinstance(s.forma, Aumentada) else Aumentada(0, 0.0, r.pensionMensual)
        uf    = self.solicitud.parametros.uf

        # título + subtítulo (+ garantía) + dos tablas con su línea PGU + diferencia
        alto = 15 + 18 + (15 if forma.con_garantia else 0) + 2 * (15 + alto_tabla(2) + 20) + 15 + 15
        self.pag.asegurar_espacio(max(self.cfg.umbral_aumento, self.cfg.margen_inferior + alto))

        anos_garantia = forma.meses_garantia // 12
        garantia_txt  = f" + Garantia {anos_garantia} anos" if forma.con_garantia else ""
        pct           = porcentaje_aumento(forma.porcentaje)

        self._titulo_seccion(f"{s.numero}. RV CON AUMENTO TEMPORAL")
        self.pag.avanzar(15)
        self._texto(f"Aumento: {pct:g}% por {texto_periodo(forma.meses)}{garantia_txt}", tamano=9)
        self.pag.avanzar(18)
        if forma.con_garantia:
            self._texto(f"Periodo garantizado: {anos_garantia} anos - Si fallece, beneficiarios reciben el 100%",
                        tamano=8, color=C_NOTA)
            self.pag.avanzar(15)

        durante = calcular_montos(r.pensionMensual, s.tipo, self.cfg)
        despues = calcular_montos(forma.pension_final, s.tipo, self.cfg)
        encabezado = ["Pension (UF)", "Pension Mensual Bruto", self.h_salud, "Pension Liquida"]
        anchos     = [80, 120, 100, 100]
        pgu        = self._pesos(self.cfg.monto_pgu)

        # Tabla 1: durante el aumento
        self._texto(">>> PENSION DURANTE EL PERIODO DE AUMENTO:", negrita=True, color=C_AUMENTO)
        self.pag.avanzar(15)
        self._tabla([encabezado, self._fila_montos(None, formatear_uf(r.pensionEnUF), durante)], anchos)
        self._texto(f"Con PGU (+{pgu}): {self._pesos(durante.con_pgu)}/mes", tamano=9, color=C_PGU_AUM, x=60)
        self.pag.avanzar(20)

        self.sup.rectangulo(self.cfg.margen_izquierdo, self.pag.y + 5, 500, 0.5, relleno=C_SEPARADOR)
        self.pag.avanzar(15)

        # Tabla 2: después del aumento
        self._texto(">>> PENSION DESPUES DEL PERIODO DE AUMENTO:", negrita=True, color=C_POST)
        self.pag.avanzar(15)
        self._tabla([encabezado, self._fila_montos(None, formatear_uf(forma.pension_final / uf), despues)], anchos)
        self._texto(f"Con PGU (+{pgu}): {self._pesos(despues.con_pgu)}/mes", tamano=9, color=C_PGU_BASE, x=60)
        self.pag.avanzar(20)

        delta = diferencia_porcentual(durante.liquida, despues.liquida)
        if delta is None:
            self.advertencias.append(f"{r.nombre}: pension liquida posterior al aumento es cero, "
                                     "se omite la diferencia porcentual")
        else:
            diferencia = durante.liquida - despues.liquida
            self._texto(f"Diferencia: {self._pesos(diferencia)}/menos "
                        f"({delta:.1f}% menos despues del aumento)", tamano=8, color=C_DIFERENCIA)
            self.pag.avanzar(15)

    # ── Secciones de invalidez ────────────────────────────────
    def bloque_grado_invalidez(self) -> None:
        afiliado = self.solicitud.afiliado
        basica = next((r for r in self.solicitud.resultados
                       if r.modalidad is SeccionTipo.PENSION_INVALIDEZ
                       or (r.modalidad is None and "Pension Invalidez" in r.nombre)), None)
        grado = afiliado.gradoInvalidez or (basica.gradoInvalidez if basica else None)
        if not grado:
            return
        ingreso = afiliado.ingresoBase or (basica.ingresoBase if basica else None) or 0

        self._texto(f"Grado de Invalidez: {etiqueta(GRADO_INVALIDEZ_LABELS, grado)}", negrita=True)
        self.pag.avanzar(15)
        self._texto(f"Ingreso Base de Referencia: {self._pesos(ingreso)}")
        self.pag.avanzar(25)

    def _tabla_cinco(self, modalidades: list[tuple[str, str, Montos]], anchos: list[float],
                     primera: str = "Modalidad") -> None:
        filas = [[primera, "Pension (UF)", "Pension M. Bruto", self.h_salud, "Pension Liquida"]]
        filas += [self._fila_montos(nombre, uf, m) for nombre, uf, m in modalidades]
        self._tabla(filas, anchos)
        self.pag.avanzar(10)

    def rv_inmediata_invalidez(self, s: Seccion) -> None:
        r = s.resultado
        self.pag.asegurar_espacio(self.cfg.umbral_tabla)
        self._titulo_seccion(f"{s.numero}. Renta Vitalicia Inmediata (Invalidez)")
        self.pag.avanzar(15)
        self._texto(f"Tasa: {r.tasaInteres * 100:.2f}% - Tabla de invalidos", tamano=9)
        self.pag.avanzar(20)
        m = calcular_montos(r.pensionMensual, s.tipo, self.cfg)
        self._tabla_cinco([("RV INMEDIATA INVALIDEZ", formatear_uf(r.pensionEnUF), m)],
                          [130, 80, 100, 90, 100])

    def rv_garantizada_invalidez(self, s: Seccion) -> None:
        r    = s.resultado
        anos = (r.periodoGarantizado or 0) // 12
        self.pag.asegurar_espacio(self.cfg.umbral_tabla)
        self._titulo_seccion(f"{s.numero}. RV Invalidez con Garantia {anos} anos")
        self.pag.avanzar(20)
        m = calcular_montos(r.pensionMensual, s.tipo, self.cfg)
        self._tabla_cinco([(f"RV GARANTIA {anos} ANOS", formatear_uf(r.pensionEnUF), m)],
                          [130, 80, 100, 90, 100])

    def rv_aumento_invalidez(self, s: Seccion) -> None:
        r     = s.resultado
        forma = s.forma if isinstance(s.forma, Aumentada) else Aumentada(0, 0.0, r.pensionMensual)
        self.pag.asegurar_espacio(self.cfg.umbral_tabla)

        self._titulo_seccion(f"{s.numero}. RV Invalidez con Aumento Temporal")
        self.pag.avanzar(15)
        self._texto(f"Aumento {porcentaje_aumento(forma.porcentaje):g}% por {forma.meses // 12} anos", tamano=9)
        self.pag.avanzar(20)

        durante = calcular_montos(r.pensionMensual, s.tipo, self.cfg)
        base    = calcular_montos(forma.pension_final, s.tipo, self.cfg)
        base_uf = formatear_uf(forma.pension_final / self.solicitud.parametros.uf)
        self._tabla_cinco([
            (f"RV AUMENTADA {forma.meses} MESES", formatear_uf(r.pensionEnUF), durante),
            (f"PENSION BASE (desde mes {forma.meses + 1})", base_uf, base),
        ], [140, 70, 100, 90, 100])

    def pension_invalidez(self, s: Seccion) -> None:
        r     = s.resultado
        grado = r.gradoInvalidez or self.solicitud.afiliado.gradoInvalidez or "total"
        self.pag.asegurar_espacio(self.cfg.umbral_tabla)

        self._titulo_seccion(f"{s.numero}. Pension de Invalidez")
        self.pag.avanzar(15)
        self._texto(f"Grado: {etiqueta(GRADO_INVALIDEZ_LABELS, grado)} - "
                    f"Tasa: {r.tasaInteres * 100:.2f}%", tamano=9)
        self.pag.avanzar(20)
        m = calcular_montos(r.pensionMensual, s.tipo, self.cfg)
        self._tabla_cinco([(etiqueta(GRADO_INVALIDEZ_LABELS, grado), formatear_uf(r.pensionEnUF), m)],
                          [100, 80, 100, 90, 100], primera="Grado")

        if r.advertencias:
            self.pag.avanzar(5)
            self._lista([f"- {adv}" for adv in r.advertencias], tamano=8, color=C_ADVERTENCIA)

    # ── Secciones de sobrevivencia ────────────────────────────
    def bloque_beneficiarios(self) -> None:
        beneficiarios = self.solicitud.beneficiarios
        if not beneficiarios:
            return
        self._texto("Beneficiarios:", negrita=True)
        self.pag.avanzar(15)
        self._lista([
            f"- {etiqueta(TIPO_BENEFICIARIO_LABELS, b.tipo)}: {b.edad} anos, "
            f"{formatear_pct(b.porcentajePension)} de pension"
            for b in beneficiarios
        ], tamano=9, x=60)
        self.pag.avanzar(10)

    def sobrevivencia(self, s: Seccion) -> None:
        r       = s.resultado
        reparto = r.pensionPorBeneficiario or []

        # Alto real del bloque: título + tabla principal (+ subtítulo y tabla de reparto)
        alto = 20 + alto_tabla(2)
        if reparto:
            alto += 5 + 15 + alto_tabla(len(reparto) + 1)
        self.pag.asegurar_espacio(max(self.cfg.umbral_tabla, self.cfg.margen_inferior + alto))

        self._titulo_seccion(f"{s.numero}. {r.nombre}")
        self.pag.avanzar(20)
        m = calcular_montos(r.pensionMensual, s.tipo, self.cfg)
        self._tabla([
            ["Modalidad", "Pension (UF)", "Pension M. Bruto", self.h_salud, "Pension Liquida"],
            self._fila_montos(r.nombre[:25], formatear_uf(r.pensionEnUF), m),
        ], [130, 70, 100, 90, 90])

        if reparto:
            self.pag.avanzar(5)
            self._texto("Distribucion por Beneficiario:", tamano=9, negrita=True)
            self.pag.avanzar(15)
            filas = [["Beneficiario", "Porcentaje", "Pension Mensual"]]
            filas += [[etiqueta(TIPO_BENEFICIARIO_LABELS, b.tipo),
                       formatear_pct(b.porcentaje),
                       self._pesos(b.pensionMensual)] for b in reparto]
            self._tabla(filas, [120, 80, 120], x=60)

    # ── Notas ─────────────────────────────────────────────────
    def notas(self) -> None:
        lineas = NOTAS_COMUNES + NOTAS_EXTRA.get(self.tipo, [])
        self.pag.asegurar_espacio(self.cfg.margen_inferior + 12 * (len(lineas) - 1))
        self.pag.fijar(min(self.pag.y, self.cfg.piso_notas))
        for i, linea in enumerate(lineas):
            if i:
                self.pag.avanzar(12)
            self._texto(linea, tamano=7)

    # ── Orquestación ──────────────────────────────────────────
    def construir(self, secciones: list[Seccion]) -> None:
        T = SeccionTipo
        if self.tipo == "vejez":
            dibujar = {
                T.RETIRO_PROGRAMADO: self.retiro_programado,
                T.RV_INMEDIATA:      self.rv_inmediata_vejez,
                T.RV_GARANTIZADA:    self.rv_garantizada_vejez,
                T.RV_AUMENTO:        self.rv_aumento_vejez,
            }
        elif self.tipo == "invalidez":
            dibujar = {
                T.RETIRO_PROGRAMADO: self.retiro_programado,
                T.RV_INMEDIATA:      self.rv_inmediata_invalidez,
                T.RV_GARANTIZADA:    self.rv_garantizada_invalidez,
                T.RV_AUMENTO:        self.rv_aumento_invalidez,
                T.PENSION_INVALIDEZ: self.pension_invalidez,
            }
        else:
            dibujar = {T.SOBREVIVENCIA: self.sobrevivencia}

        self.encabezado()
        self.bloque_info()
        if self.tipo == "invalidez":
            self.bloque_grado_invalidez()
        elif self.tipo == "sobrevivencia":
            self.bloque_beneficiarios()

        for seccion in secciones:
            dibujar[seccion.tipo](seccion)

        self.notas()


# ═══════════════════════════════════════════════════════════════
# FUNCIÓN PRINCIPAL
# ═══════════════════════════════════════════════════════════════

def generar_pdf_reporte(solicitud: ReporteRequest,
                        config: ReportConfig | None = None,
                        superficie=None) -> ReporteGenerado:
    """
    Genera el Estudio Preliminar de Pensión.

    Args:
        solicitud:  afiliado, parámetros, escenarios y beneficiarios
        config:     parámetros regulatorios / diagramación (por defecto, los del entorno)
        superficie: destino de dibujo; por defecto un canvas ReportLab tamaño carta

    Returns:
        ReporteGenerado con los bytes, el nombre de archivo y las advertencias

    Raises:
        ReporteValidationError si los datos no alcanzan para armar el reporte
    """
    cfg  = config or get_report_config()
    tipo = solicitud.afiliado.tipo_pension
    validar_solicitud(solicitud)

    clasificacion = clasificar(solicitud.resultados, tipo)
    archivo       = nombre_archivo(solicitud.afiliado.nombre, tipo)

    if superficie is None:
        superficie = SuperficieReportLab(
            cfg.ancho_pagina, cfg.alto_pagina,
            titulo = f"{TITULOS[tipo].title()} - {(solicitud.afiliado.nombre or 'AFILIADO').upper()}",
        )

    ensamblador = _Ensamblador(solicitud, cfg, superficie)
    try:
        ensamblador.construir(clasificacion.secciones)
        contenido = superficie.serializar()
    except Exception as e:
        logger.error(f"[PDF] Error generando {archivo}: {e}", exc_info=True)
        raise

    advertencias = clasificacion.advertencias + ensamblador.advertencias
    logger.info(f"[PDF] {archivo}: {len(clasificacion.secciones)} secciones, "
                f"{ensamblador.pag.pagina} página(s), {len(contenido):,} bytes")
    return ReporteGenerado(
        contenido      = contenido,
        nombre_archivo = archivo,
        paginas        = ensamblador.pag.pagina,
        advertencias   = advertencias,
    )
