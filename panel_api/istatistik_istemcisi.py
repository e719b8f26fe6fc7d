# panel_api/istatistik_istemcisi.py
import logging
from typing import Optional

import requests
from fastapi import Depends
from pydantic import ValidationError
from requests.exceptions import RequestException

from .config import settings
from .guvenlik import oauth2_scheme
from .modeller import DashboardIstatistik

logger = logging.getLogger(__name__)


def dashboard_istatistiklerini_getir(access_token: Optional[str] = None) -> Optional[DashboardIstatistik]:
    """
    Dashboard servisinden sayaçları çeker. Menü rozetleri için kullanılır;
    herhangi bir hata durumunda None döner ve menü rozetsiz gösterilir.
    """
    if not settings.DASHBOARD_API_URL:
        return None

    headers = {"Accept": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"

    url = f"{settings.DASHBOARD_API_URL}/dashboard/stats"
    try:
        response = requests.get(url, headers=headers, timeout=settings.DASHBOARD_API_TIMEOUT)
        response.raise_for_status()
        veri = response.json()
    except (RequestException, ValueError) as e:
        logger.warning(f"Dashboard istatistikleri alınamadı ({url}): {e}")
        return None

    if not isinstance(veri, dict):
        logger.warning(f"Dashboard istatistik yanıtı beklenen biçimde değil: {type(veri).__name__}")
        return None
    try:
        return DashboardIstatistik.model_validate(veri)
    except ValidationError as e:
        logger.warning(f"Dashboard istatistikleri çözümlenemedi: {e}")
        return None


def get_dashboard_stats(token: str = Depends(oauth2_scheme)) -> Optional[DashboardIstatistik]:
    """Rotalar için bağımlılık: isteği yapan kullanıcının token'ı ile istatistikleri getirir."""
    return dashboard_istatistiklerini_getir(token)
