import pytest
import requests

from panel_api import istatistik_istemcisi
from panel_api.config import settings
from panel_api.istatistik_istemcisi import dashboard_istatistiklerini_getir


class SahteYanit:
    def __init__(self, veri=None, status_code=200, json_hatasi=False):
        self.veri = veri
        self.status_code = status_code
        self.json_hatasi = json_hatasi

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} hata")

    def json(self):
        if self.json_hatasi:
            raise ValueError("JSON değil")
        return self.veri


@pytest.fixture
def dashboard_url(monkeypatch):
    monkeypatch.setattr(settings, "DASHBOARD_API_URL", "http://dashboard.test/api")
    monkeypatch.setattr(settings, "DASHBOARD_API_TIMEOUT", 2.0)


def test_no_url_means_no_request(monkeypatch):
    monkeypatch.setattr(settings, "DASHBOARD_API_URL", "")

    def patlat(*args, **kwargs):
        raise AssertionError("istek yapılmamalı")

    monkeypatch.setattr(istatistik_istemcisi.requests, "get", patlat)
    assert dashboard_istatistiklerini_getir("token") is None


def test_fetch_forwards_token_and_parses(monkeypatch, dashboard_url):
    cagrilar = []

    def sahte_get(url, headers=None, timeout=None):
        cagrilar.append((url, headers, timeout))
        return SahteYanit({"active_customers": "12", "pending_payments": 0, "total_customers": 40})

    monkeypatch.setattr(istatistik_istemcisi.requests, "get", sahte_get)
    stats = dashboard_istatistiklerini_getir("abc")

    assert stats.active_customers == 12
    assert stats.pending_payments == 0
    assert stats.total_dealers is None
    url, headers, timeout = cagrilar[0]
    assert url == "http://dashboard.test/api/dashboard/stats"
    assert headers["Authorization"] == "Bearer abc"
    assert timeout == 2.0


@pytest.mark.parametrize(
    "davranis",
    [
        requests.ConnectionError("bağlantı yok"),
        SahteYanit(status_code=500),
        SahteYanit(json_hatasi=True),
        SahteYanit(["liste"]),
    ],
    ids=["baglanti", "http-500", "json-degil", "sozluk-degil"],
)
def test_failures_yield_none(monkeypatch, dashboard_url, davranis):
    def sahte_get(*args, **kwargs):
        if isinstance(davranis, Exception):
            raise davranis
        return davranis

    monkeypatch.setattr(istatistik_istemcisi.requests, "get", sahte_get)
    assert dashboard_istatistiklerini_getir("abc") is None
