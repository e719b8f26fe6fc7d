# panel_api/girdi_dogrulama.py
"""
Form girdileri için doğrulama ve temizleme yardımcıları (e-posta, Türk cep telefonu, TC Kimlik No, serbest metin).
"""
import re
from typing import Optional
from pydantic import BaseModel

EPOSTA_DESENI = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)
_RAKAM_DISI = re.compile(r"[^0-9]")

METIN_AZAMI_UZUNLUK = 1000


class DogrulamaSonucu(BaseModel):
    gecerli: bool
    temiz: str = ""
    hata: Optional[str] = None


def _hata(mesaj: str) -> DogrulamaSonucu:
    return DogrulamaSonucu(gecerli=False, temiz="", hata=mesaj)


def validate_email(email: str) -> DogrulamaSonucu:
    temiz = email.strip()
    if not temiz:
        return _hata("E-posta adresi gerekli")
    if len(temiz) > 255:
        return _hata("E-posta adresi çok uzun")
    if not EPOSTA_DESENI.match(temiz):
        return _hata("Geçersiz e-posta formatı")
    return DogrulamaSonucu(gecerli=True, temiz=temiz.lower())


def validate_phone(telefon: str) -> DogrulamaSonucu:
    """
    Türk cep telefonu numarasını 05XXXXXXXXX biçimine getirir.
    Kabul edilen biçimler: +905XXXXXXXXX, 905XXXXXXXXX, 05XXXXXXXXX, 5XXXXXXXXX
    """
    rakamlar = _RAKAM_DISI.sub("", telefon)

    if len(rakamlar) == 12 and rakamlar.startswith("90"):
        normal = "0" + rakamlar[2:]
    elif len(rakamlar) == 10:
        if not rakamlar.startswith("5"):
            return _hata("Telefon numarası 5 ile başlamalı")
        normal = "0" + rakamlar
    elif len(rakamlar) == 11:
        if not rakamlar.startswith("05"):
            return _hata("Telefon numarası 05 ile başlamalı")
        normal = rakamlar
    else:
        return _hata("Geçersiz telefon numarası formatı")

    if len(normal) != 11 or not normal.startswith("05"):
        return _hata("Telefon numarası 05XXXXXXXXX formatında olmalı")
    return DogrulamaSonucu(gecerli=True, temiz=normal)


def validate_tc_no(tc_no: str) -> DogrulamaSonucu:
    rakamlar = _RAKAM_DISI.sub("", tc_no)
    if len(rakamlar) != 11:
        return _hata("TC Kimlik No 11 haneli olmalı")
    if rakamlar[0] == "0":
        return _hata("TC Kimlik No 0 ile başlayamaz")

    d = [int(c) for c in rakamlar]
    # 10. hane: (tek sıradakilerin toplamı * 7 - çift sıradakilerin toplamı) mod 10
    onuncu = ((d[0] + d[2] + d[4] + d[6] + d[8]) * 7 - (d[1] + d[3] + d[5] + d[7])) % 10
    if onuncu != d[9]:
        return _hata("Geçersiz TC Kimlik No")
    if sum(d[:10]) % 10 != d[10]:
        return _hata("Geçersiz TC Kimlik No")
    return DogrulamaSonucu(gecerli=True, temiz=rakamlar)


def sanitize_text(metin: str) -> str:
    return metin.strip().replace("<", "").replace(">", "")[:METIN_AZAMI_UZUNLUK]
