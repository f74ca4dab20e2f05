#!/usr/bin/env python3
# ============================================================
# Estudio de Pensión — generar_reporte.py
# Genera el PDF desde un JSON guardado, sin levantar la API
# Uso: python generar_reporte.py solicitud.json [directorio_salida]
# ============================================================

import json
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import ReporteRequest
from services.pdf_service import generar_pdf_reporte
from services.validacion import ReporteValidationError


def main(argv: list[str]) -> int:
    if len(argv) < 2:
        print("Uso: python generar_reporte.py solicitud.json [directorio_salida]")
        return 2

    entrada = Path(argv[1])
    salida  = Path(argv[2]) if len(argv) > 2 else Path.cwd()

    solicitud = ReporteRequest.model_validate(json.loads(entrada.read_text(encoding="utf-8")))

    try:
        reporte = generar_pdf_reporte(solicitud)
    except ReporteValidationError as e:
        print("❌ Datos insuficientes:")
        for err in e.errores:
            print(f"   - {err}")
        return 1

    salida.mkdir(parents=True, exist_ok=True)
    destino = salida / reporte.nombre_archivo
    destino.write_bytes(reporte.contenido)

    print(f"✅ {destino} ({len(reporte.contenido):,} bytes, {reporte.paginas} página(s))")
    for adv in reporte.advertencias:
        print(f"   ⚠ {adv}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
