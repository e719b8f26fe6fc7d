# panel_api/erisim.py
"""
Erişim değerlendiricisi: rol yapılandırmasından menüyü, rozetleri ve yetenek cevaplarını türetir.
Buradaki fonksiyonlar hata fırlatmaz; tanınmayan girdi boş liste veya False ile sonuçlanır.
"""
from typing import Dict, Iterable, List, Optional, Union

from pydantic.alias_generators import to_camel

from .modeller import DashboardIstatistik, MenuOgesi, Yetenekler
from .rol_yapilandirma import get_role_config

# modül id -> (istatistik alanı, sıfır olduğunda da gösterilsin mi)
# Sıfır bekleyen ödeme / okunmamış bildirim gösterilmez; sıfır müşteri / bayi gösterilir.
ROZET_KURALLARI = {
    "customer-management": ("active_customers", True),
    "dealer-management": ("total_dealers", True),
    "accounting": ("pending_payments", False),
    "notifications": ("unread_notifications", False),
}

# Hem 'canDelete' hem 'can_delete' kabul edilir
_YETENEK_ALANLARI: Dict[str, str] = {}
for _alan in Yetenekler.model_fields:
    _YETENEK_ALANLARI[_alan] = _alan
    _YETENEK_ALANLARI[to_camel(_alan)] = _alan

# "İ".lower() birleşik nokta bıraktığı için önce düz "i" yapılır
_BUYUK_I = str.maketrans({"İ": "i"})


def _istatistik_hazirla(stats) -> Optional[DashboardIstatistik]:
    if stats is None or isinstance(stats, DashboardIstatistik):
        return stats
    if isinstance(stats, dict):
        return DashboardIstatistik.model_validate(stats)
    return None


def _rozetle(oge: MenuOgesi, stats: DashboardIstatistik) -> MenuOgesi:
    kural = ROZET_KURALLARI.get(oge.id)
    if kural is None:
        return oge
    alan, sifirda_goster = kural
    deger = getattr(stats, alan)
    if deger is None:
        return oge
    rozet = str(deger) if (sifirda_goster or deger) else None
    return oge.model_copy(update={"badge": rozet})


def resolve_menu(rol, stats: Union[DashboardIstatistik, dict, None] = None) -> List[MenuOgesi]:
    """
    Rolün menüsünü kayıtlı sırayla döndürür. İstatistik verilirse ilgili
    öğelere rozet eklenmiş kopyaları koyar; kayıttaki öğeler değiştirilmez.
    """
    yapilandirma = get_role_config(rol)
    if yapilandirma is None:
        return []

    istatistik = _istatistik_hazirla(stats)
    if istatistik is None:
        return list(yapilandirma.menu_items)
    return [_rozetle(oge, istatistik) for oge in yapilandirma.menu_items]


def _sadelestir(metin: str) -> str:
    return metin.translate(_BUYUK_I).lower()


def filter_menu_by_search(ogeler: Iterable[MenuOgesi], arama: Optional[str]) -> List[MenuOgesi]:
    """
    Etiketi ya da alt menü etiketlerinden biri aranan metni içeren öğeleri tutar.
    Alt menü eşleşmesinde grubun tamamı döner. Boş arama listeyi olduğu gibi bırakır.
    """
    ogeler = list(ogeler)
    if not arama or not arama.strip():
        return ogeler

    aranan = _sadelestir(arama.strip())
    sonuc = []
    for oge in ogeler:
        if aranan in _sadelestir(oge.label):
            sonuc.append(oge)
        elif oge.submenu and any(aranan in _sadelestir(alt.label) for alt in oge.submenu):
            sonuc.append(oge)
    return sonuc


def _modul_bul(rol, modul_id) -> Optional[MenuOgesi]:
    yapilandirma = get_role_config(rol)
    if yapilandirma is None:
        return None
    # Sadece üst seviye aranır
    return next((oge for oge in yapilandirma.menu_items if oge.id == modul_id), None)


def has_capability(rol, modul_id, yetenek) -> bool:
    alan = _YETENEK_ALANLARI.get(yetenek) if isinstance(yetenek, str) else None
    if alan is None:
        return False
    oge = _modul_bul(rol, modul_id)
    if oge is None or oge.permissions is None:
        return False
    return bool(getattr(oge.permissions, alan))


def get_module_label(rol, modul_id) -> str:
    oge = _modul_bul(rol, modul_id)
    return oge.label if oge is not None else str(modul_id)
