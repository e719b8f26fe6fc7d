# panel_api/roller.py
import enum
from typing import Optional


class RolEnum(str, enum.Enum):
    SUPERADMIN = "superadmin"
    BIRINCIL_ADMIN = "birincil-admin"
    IKINCIL_ADMIN = "ikincil-admin"
    EVRAK_BIRIMI = "evrak-birimi"
    BAYI = "bayi"
    MUSTERI = "musteri"
    # Menüsü olmayan roller: yalnızca yetki kurallarında geçer
    OPERASYON = "operasyon"
    ADMIN = "admin"


ROL_GORUNEN_ADLARI = {
    RolEnum.SUPERADMIN: "Süper Admin",
    RolEnum.BIRINCIL_ADMIN: "Birincil Admin",
    RolEnum.IKINCIL_ADMIN: "İkincil Admin",
    RolEnum.EVRAK_BIRIMI: "Evrak Birimi",
    RolEnum.BAYI: "Bayi",
    RolEnum.MUSTERI: "Müşteri",
}

_DEGERDEN_ROL = {rol.value: rol for rol in RolEnum}


def rol_coz(deger) -> Optional[RolEnum]:
    """
    Dışarıdan gelen ham rol değerini RolEnum'a çevirir.
    Eşleşme birebirdir, boşluklar kırpılmaz. Tanınmayan veya string olmayan değerler için None döner.
    """
    if isinstance(deger, RolEnum):
        return deger
    if not isinstance(deger, str):
        return None
    return _DEGERDEN_ROL.get(deger)
