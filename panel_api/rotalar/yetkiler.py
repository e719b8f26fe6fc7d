# panel_api/rotalar/yetkiler.py
from fastapi import APIRouter, Depends
from typing import Optional
from ..guvenlik import get_current_role
from ..roller import RolEnum
from ..yetkiler import Yetki, yetkili_mi, yetki_ozeti
from .. import semalar

router = APIRouter(prefix="/yetkiler", tags=["Yetkiler"])


@router.get("/me", response_model=semalar.YetkiOzetiYaniti)
def read_yetkilerim(rol: Optional[RolEnum] = Depends(get_current_role)):
    """Sayfa içi butonlar ve alanlar için kullanıcının bütün yetkileri."""
    return semalar.YetkiOzetiYaniti(rol=rol.value if rol else None, yetkiler=yetki_ozeti(rol))


@router.get("/{yetki}", response_model=semalar.TekYetkiYaniti)
def read_yetki(yetki: Yetki, rol: Optional[RolEnum] = Depends(get_current_role)):
    return semalar.TekYetkiYaniti(yetki=yetki.value, izin=yetkili_mi(rol, yetki))
