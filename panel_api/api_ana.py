# panel_api/api_ana.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from .config import settings
from .rol_yapilandirma import ROL_YAPILANDIRMALARI
from .rotalar import dogrulama, menu, roller, yetkiler

# Loglama ayarları
logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Uygulama başlangıç ve kapanışında çalışacak kod.
    """
    logger.info("API başlatılıyor...")
    logger.info(f"{len(ROL_YAPILANDIRMALARI)} rol için menü yapılandırması yüklendi.")
    if not settings.DASHBOARD_API_URL:
        logger.warning("DASHBOARD_API_URL tanımlı değil, menü rozetleri gösterilmeyecek.")
    yield
    logger.info("API kapanıyor...")

app = FastAPI(
    lifespan=lifespan,
    title="Sigorta Danışmanlık Paneli API",
    description="Rol bazlı menü ve yetki servisi",
    version="1.0.0",
)

# CORS ayarları
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Router'ları (rotaları) uygulamaya dahil etme
app.include_router(menu.router, tags=["Menü"])
app.include_router(yetkiler.router, tags=["Yetkiler"])
app.include_router(roller.router, tags=["Rol Yönetimi"])
app.include_router(dogrulama.router, tags=["Girdi Doğrulama"])

@app.get("/")
def read_root():
    return {"message": "Sigorta Danışmanlık Paneli API'sine hoş geldiniz!"}
