# panel_api/modeller.py
from __future__ import annotations
import math
from typing import Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .roller import RolEnum


# --- TEMEL MODELLER ---
# Menü verisi süreç boyunca sabittir; rozet eklemek yeni bir nesne üretir (model_copy).
class SabitModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Yetenekler(SabitModel):
    can_create: bool = False
    can_edit: bool = False
    can_delete: bool = False
    can_view_all: bool = False
    can_view_own: bool = False
    can_export: bool = False


class MenuOgesi(SabitModel):
    id: str  # Rozet eşleştirmesinde kullanılan sabit modül anahtarı
    label: str
    icon: str
    route: str
    badge: Optional[str] = None
    has_submenu: bool = False
    submenu: Optional[Tuple[MenuOgesi, ...]] = None
    permissions: Optional[Yetenekler] = None


class RolYapilandirma(SabitModel):
    role: RolEnum
    display_name: str
    menu_items: Tuple[MenuOgesi, ...]


class SayfaYetkisi(SabitModel):
    """Rol yönetimi ekranında rollere atanabilen sayfa ve desteklediği yetenekler."""
    page_id: str
    page_name: str
    route: str
    can_view: bool = False
    can_create: bool = False
    can_edit: bool = False
    can_delete: bool = False
    can_view_all: bool = False
    can_view_own: bool = False
    can_export: bool = False


# --- DASHBOARD İSTATİSTİKLERİ ---
Sayi = Union[int, float]


def _sonlu_sayi(sayi: float) -> Optional[Sayi]:
    # NaN ve sonsuz değerler rozet olamaz
    if not math.isfinite(sayi):
        return None
    return int(sayi) if sayi.is_integer() else sayi


def _sayiya_cevir(deger) -> Optional[Sayi]:
    if deger is None or isinstance(deger, bool):
        return None
    if isinstance(deger, int):
        return deger
    if isinstance(deger, float):
        return _sonlu_sayi(deger)
    if isinstance(deger, str):
        metin = deger.strip()
        try:
            return int(metin)
        except ValueError:
            pass
        try:
            return _sonlu_sayi(float(metin))
        except ValueError:
            return None
    return None


class DashboardIstatistik(BaseModel):
    """
    Dashboard API'sinden gelen sayaçlar. Yalnızca menü rozetleri için kullanılır.
    Sayı içeren string'ler çevrilir; sayı olmayan değerler yok sayılır (rozet gösterilmez).
    """
    model_config = ConfigDict(extra="ignore")

    active_customers: Optional[Sayi] = None
    total_dealers: Optional[Sayi] = None
    pending_payments: Optional[Sayi] = None
    unread_notifications: Optional[Sayi] = None

    @field_validator("*", mode="before")
    @classmethod
    def sayiya_cevir(cls, deger):
        return _sayiya_cevir(deger)
