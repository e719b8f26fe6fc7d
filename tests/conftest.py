# tests/conftest.py
import os
from datetime import datetime, timedelta, timezone

# Ayarlar import sırasında okunduğu için uygulamadan önce tanımlanmalı
os.environ["SECRET_KEY"] = "test-gizli-anahtar"
os.environ["DASHBOARD_API_URL"] = ""

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from panel_api.api_ana import app
from panel_api.config import settings
from panel_api.istatistik_istemcisi import get_dashboard_stats


@pytest.fixture
def client():
    app.dependency_overrides[get_dashboard_stats] = lambda: None
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def istatistik_ayarla():
    """Dashboard istatistik bağımlılığını verilen değerle değiştirir."""
    def _ayarla(stats):
        app.dependency_overrides[get_dashboard_stats] = lambda: stats
    return _ayarla


@pytest.fixture
def jwt_uret():
    """Kimlik servisinin verdiği token'ların yerine geçen imzalı JWT üretir."""
    def _uret(veri, sure=timedelta(minutes=30), anahtar=None):
        icerik = dict(veri, exp=datetime.now(timezone.utc) + sure)
        return jwt.encode(icerik, anahtar or settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return _uret


@pytest.fixture
def token_olustur(jwt_uret):
    def _olustur(rol=None, sub="test@ornek.com"):
        veri = {"sub": sub}
        if rol is not None:
            veri["rol"] = rol
        return jwt_uret(veri)
    return _olustur


@pytest.fixture
def auth_headers(token_olustur):
    def _headers(rol=None):
        return {"Authorization": f"Bearer {token_olustur(rol)}"}
    return _headers
