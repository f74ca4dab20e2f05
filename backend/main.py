"""
Estudio de Pensión — API Backend
FastAPI + ReportLab
"""
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import reportes as reportes_router

logging.basicConfig(
    level  = os.getenv("LOG_LEVEL", "INFO").upper(),
    format = "%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Estudio de Pensión API",
    description="Generación del Estudio Preliminar de Pensión en PDF",
    version="1.0.0",
)

# ─── CORS: orígenes del frontend ────────────────────────────
origins = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Reporte-Advertencias"],
)
app.include_router(reportes_router.router)


# ═══════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════

@app.get("/health")
def health():
    return {"status": "ok", "app": "Estudio de Pensión", "version": "1.0.0"}
