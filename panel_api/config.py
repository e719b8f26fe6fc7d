# panel_api/config.py
import os
from dotenv import load_dotenv

# .env dosyasını projenin kök dizininden yükle
load_dotenv()


def _liste_oku(deger: str):
    return [parca.strip() for parca in deger.split(",") if parca.strip()]


# Ayarları .env dosyasından oku ve merkezi bir nesne olarak sun
class Settings:
    # Token'lar kimlik doğrulama servisi tarafından bu anahtarla imzalanır
    SECRET_KEY: str = os.getenv("SECRET_KEY") or "gelistirme-anahtari-uretimde-degistirin"
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")

    # Dashboard istatistik servisi (boş bırakılırsa menü rozetsiz döner)
    DASHBOARD_API_URL: str = os.getenv("DASHBOARD_API_URL", "").rstrip("/")
    DASHBOARD_API_TIMEOUT: float = float(os.getenv("DASHBOARD_API_TIMEOUT", "5"))

    CORS_ORIGINS = _liste_oku(os.getenv("CORS_ORIGINS", "*"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# Ayarları diğer dosyaların kullanabilmesi için tek bir nesne oluştur
settings = Settings()
