# panel_api/semalar.py
# İstek / yanıt şemaları
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .modeller import MenuOgesi


class YanitModeli(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MenuYaniti(YanitModeli):
    rol: Optional[str] = None
    rol_adi: Optional[str] = None
    ogeler: List[MenuOgesi]


class YetenekYaniti(YanitModeli):
    modul_id: str
    yetenek: str
    izin: bool


class EtiketYaniti(YanitModeli):
    modul_id: str
    etiket: str


class YetkiOzetiYaniti(YanitModeli):
    rol: Optional[str] = None
    yetkiler: Dict[str, bool]


class TekYetkiYaniti(YanitModeli):
    yetki: str
    izin: bool


class RolOzeti(YanitModeli):
    rol: str
    gorunen_ad: str
    menu_ogeleri: List[MenuOgesi]


class MusteriFormu(BaseModel):
    ad: str
    telefon: str
    tc_no: str
    email: Optional[str] = None


class MusteriFormuSonucu(BaseModel):
    ad: str
    telefon: str
    tc_no: str
    email: Optional[str] = None
