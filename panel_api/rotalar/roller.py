# panel_api/rotalar/roller.py
from fastapi import APIRouter, Depends
from typing import List
import logging
from ..guvenlik import rol_gerekli
from ..modeller import SayfaYetkisi
from ..rol_yapilandirma import ROL_YAPILANDIRMALARI, KULLANILABILIR_SAYFALAR
from ..roller import RolEnum
from .. import semalar

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/roller",
    tags=["Rol Yönetimi"],
    dependencies=[Depends(rol_gerekli(RolEnum.SUPERADMIN))],  # TÜM ROTALAR SUPERADMIN KORUMALI
)


@router.get("/", response_model=List[semalar.RolOzeti], response_model_exclude_none=True)
def list_roller():
    """
    Menüsü tanımlı bütün rolleri ve menü öğelerini listeler.
    """
    return [
        semalar.RolOzeti(rol=y.role.value, gorunen_ad=y.display_name, menu_ogeleri=list(y.menu_items))
        for y in ROL_YAPILANDIRMALARI.values()
    ]


@router.get("/sayfalar", response_model=List[SayfaYetkisi])
def list_sayfalar():
    """Rollere atanabilecek sayfalar ve her sayfanın desteklediği yetenekler."""
    return list(KULLANILABILIR_SAYFALAR)
