# panel_api/rotalar/menu.py
from fastapi import APIRouter, Depends, Query
from typing import Optional
import logging
from ..erisim import resolve_menu, filter_menu_by_search, has_capability, get_module_label
from ..guvenlik import get_current_role
from ..istatistik_istemcisi import get_dashboard_stats
from ..modeller import DashboardIstatistik
from ..roller import ROL_GORUNEN_ADLARI, RolEnum
from .. import semalar

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menu", tags=["Menü"])


@router.get("/", response_model=semalar.MenuYaniti, response_model_exclude_none=True)
def read_menu(
    arama: Optional[str] = Query(None, description="Etiket veya alt menü etiketinde aranacak metin"),
    rol: Optional[RolEnum] = Depends(get_current_role),
    stats: Optional[DashboardIstatistik] = Depends(get_dashboard_stats),
):
    """
    Kullanıcının rolüne göre kenar çubuğu menüsünü döndürür.
    Tanınmayan rol için boş liste döner.
    """
    ogeler = filter_menu_by_search(resolve_menu(rol, stats), arama)
    return semalar.MenuYaniti(
        rol=rol.value if rol else None,
        rol_adi=ROL_GORUNEN_ADLARI.get(rol) if rol else None,
        ogeler=ogeler,
    )


@router.get("/yetenek/{modul_id}/{yetenek}", response_model=semalar.YetenekYaniti)
def read_yetenek(modul_id: str, yetenek: str, rol: Optional[RolEnum] = Depends(get_current_role)):
    return semalar.YetenekYaniti(modul_id=modul_id, yetenek=yetenek, izin=has_capability(rol, modul_id, yetenek))


@router.get("/etiket/{modul_id}", response_model=semalar.EtiketYaniti)
def read_etiket(modul_id: str, rol: Optional[RolEnum] = Depends(get_current_role)):
    return semalar.EtiketYaniti(modul_id=modul_id, etiket=get_module_label(rol, modul_id))
