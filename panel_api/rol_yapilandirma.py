# panel_api/rol_yapilandirma.py
"""
Rol bazlı menü yapılandırması.
Her rol aynı modülleri farklı etiketlerle görür ve her menü öğesi o rol için
geçerli yetenekleri (oluşturma, düzenleme, silme, tümünü/kendininkini görme, dışa aktarma) taşır.
Sıralama önemlidir: kenar çubuğunda yukarıdan aşağıya bu sırayla gösterilir.
"""
from typing import Dict, Optional, Tuple

from .modeller import MenuOgesi, RolYapilandirma, SayfaYetkisi, Yetenekler
from .roller import ROL_GORUNEN_ADLARI, RolEnum, rol_coz

# Ortak öğeler
_DASHBOARD = MenuOgesi(id="dashboard", label="Dashboard", icon="Home", route="/admin/dashboard")
_RAPORLAR = MenuOgesi(id="reports", label="Raporlar", icon="BarChart3", route="/admin/raporlar")
_BILDIRIM_MERKEZI = MenuOgesi(id="notifications", label="Bildirim Merkezi", icon="Bell", route="/admin/bildirimler")
_BILDIRIMLER = MenuOgesi(id="notifications", label="Bildirimler", icon="Bell", route="/admin/bildirimler")


def _rol(rol: RolEnum, *ogeler: MenuOgesi) -> RolYapilandirma:
    return RolYapilandirma(role=rol, display_name=ROL_GORUNEN_ADLARI[rol], menu_items=tuple(ogeler))


ROL_YAPILANDIRMALARI: Dict[RolEnum, RolYapilandirma] = {
    RolEnum.SUPERADMIN: _rol(
        RolEnum.SUPERADMIN,
        _DASHBOARD,
        MenuOgesi(
            id="customer-management", label="Müşteri Yönetimi", icon="Users", route="/admin/musteriler",
            permissions=Yetenekler(can_create=True, can_edit=True, can_delete=True, can_view_all=True, can_export=True),
        ),
        MenuOgesi(
            id="dealer-management", label="Bayi Yönetimi", icon="Building2", route="/admin/bayiler",
            permissions=Yetenekler(can_create=True, can_edit=True, can_delete=True, can_view_all=True),
        ),
        MenuOgesi(
            id="document-management", label="Evrak Yönetimi", icon="FileText", route="/admin/dokumanlar",
            permissions=Yetenekler(can_create=True, can_edit=True, can_delete=True, can_view_all=True),
        ),
        MenuOgesi(
            id="accounting", label="Muhasebe", icon="CreditCard", route="/admin/muhasebe",
            permissions=Yetenekler(can_view_all=True, can_export=True),
        ),
        _RAPORLAR,
        _BILDIRIM_MERKEZI,
        MenuOgesi(
            id="settings", label="Genel Ayarlar", icon="Settings", route="/admin/ayarlar",
            has_submenu=True,
            submenu=(
                MenuOgesi(id="user-management", label="Kullanıcı Yönetimi", icon="Users",
                          route="/admin/ayarlar/kullanicilar"),
                MenuOgesi(id="role-management", label="Rol Yönetimi", icon="Shield",
                          route="/admin/ayarlar/roller"),
                MenuOgesi(id="system-settings", label="Sistem Ayarları", icon="Settings",
                          route="/admin/ayarlar/sistem"),
            ),
        ),
    ),
    RolEnum.BIRINCIL_ADMIN: _rol(
        RolEnum.BIRINCIL_ADMIN,
        _DASHBOARD,
        MenuOgesi(
            id="customer-management", label="Müşteri Yönetimi", icon="Users", route="/admin/musteriler",
            permissions=Yetenekler(can_create=True, can_edit=True, can_view_all=True, can_export=True),
        ),
        MenuOgesi(
            id="document-management", label="Evrak Yönetimi", icon="FileText", route="/admin/dokumanlar",
            permissions=Yetenekler(can_create=True, can_edit=True, can_view_all=True),
        ),
        MenuOgesi(
            id="accounting", label="Muhasebe", icon="CreditCard", route="/admin/muhasebe",
            permissions=Yetenekler(can_view_all=True, can_edit=True, can_export=True),
        ),
        _RAPORLAR,
        _BILDIRIM_MERKEZI,
    ),
    RolEnum.IKINCIL_ADMIN: _rol(
        RolEnum.IKINCIL_ADMIN,
        _DASHBOARD,
        MenuOgesi(
            id="customer-management", label="Müşteri Yönetimi", icon="Users", route="/admin/musteriler",
            permissions=Yetenekler(can_create=False, can_edit=True, can_view_all=True),
        ),
        MenuOgesi(
            id="document-management", label="Sonuç Evrakları", icon="FileText", route="/admin/dokumanlar",
            permissions=Yetenekler(can_create=True, can_edit=True, can_view_all=True),
        ),
        _BILDIRIM_MERKEZI,
    ),
    RolEnum.EVRAK_BIRIMI: _rol(
        RolEnum.EVRAK_BIRIMI,
        _DASHBOARD,
        MenuOgesi(
            id="customer-management", label="Dosya Yönetimi", icon="FolderOpen", route="/admin/musteriler",
            permissions=Yetenekler(can_create=True, can_edit=False, can_view_all=True),
        ),
        MenuOgesi(
            id="dealer-management", label="Bayi Yönetimi", icon="Building2", route="/admin/bayiler",
            permissions=Yetenekler(can_create=True, can_edit=True, can_view_all=True),
        ),
        MenuOgesi(
            id="document-management", label="Evrak Yönetimi", icon="FileText", route="/admin/dokumanlar",
            permissions=Yetenekler(can_create=True, can_view_all=True),
        ),
        _BILDIRIMLER,
    ),
    RolEnum.BAYI: _rol(
        RolEnum.BAYI,
        _DASHBOARD,
        MenuOgesi(
            id="customer-management", label="Müşterilerim", icon="Users", route="/admin/musteriler",
            permissions=Yetenekler(can_create=False, can_edit=False, can_view_own=True),
        ),
        MenuOgesi(
            id="document-management", label="Evraklarım", icon="FileText", route="/admin/dokumanlar",
            permissions=Yetenekler(can_view_own=True),
        ),
        _BILDIRIMLER,
    ),
    RolEnum.MUSTERI: _rol(
        RolEnum.MUSTERI,
        MenuOgesi(id="dashboard", label="Ana Sayfa", icon="Home", route="/admin/dashboard"),
        MenuOgesi(
            id="customer-management", label="Başvuru Durumum", icon="FileText", route="/admin/musteriler",
            permissions=Yetenekler(can_view_own=True),
        ),
        _BILDIRIMLER,
    ),
}


def get_role_config(rol) -> Optional[RolYapilandirma]:
    """Rolün yapılandırmasını döndürür; tanınmayan veya menüsü olmayan roller için None."""
    rol_enum = rol_coz(rol)
    if rol_enum is None:
        return None
    return ROL_YAPILANDIRMALARI.get(rol_enum)


# --- ROLLERE ATANABİLEN SAYFALAR ---
KULLANILABILIR_SAYFALAR: Tuple[SayfaYetkisi, ...] = (
    SayfaYetkisi(page_id="dashboard", page_name="Dashboard", route="/admin/dashboard", can_view=True),
    SayfaYetkisi(
        page_id="customer-management", page_name="Müşteri Yönetimi", route="/admin/musteriler",
        can_view=True, can_create=True, can_edit=True, can_delete=True,
        can_view_all=True, can_view_own=True, can_export=True,
    ),
    SayfaYetkisi(
        page_id="dealer-management", page_name="Bayi Yönetimi", route="/admin/bayiler",
        can_view=True, can_create=True, can_edit=True, can_delete=True, can_view_all=True,
    ),
    SayfaYetkisi(
        page_id="document-management", page_name="Evrak Yönetimi", route="/admin/dokumanlar",
        can_view=True, can_create=True, can_edit=True, can_delete=True, can_view_all=True, can_view_own=True,
    ),
    SayfaYetkisi(
        page_id="accounting", page_name="Muhasebe", route="/admin/muhasebe",
        can_view=True, can_edit=True, can_view_all=True, can_export=True,
    ),
    SayfaYetkisi(page_id="reports", page_name="Raporlar", route="/admin/raporlar", can_view=True, can_export=True),
    SayfaYetkisi(page_id="notifications", page_name="Bildirim Merkezi", route="/admin/bildirimler", can_view=True),
    SayfaYetkisi(
        page_id="user-management", page_name="Kullanıcı Yönetimi", route="/admin/ayarlar/kullanicilar",
        can_view=True, can_create=True, can_edit=True, can_delete=True, can_view_all=True,
    ),
    SayfaYetkisi(
        page_id="role-management", page_name="Rol Yönetimi", route="/admin/ayarlar/roller",
        can_view=True, can_create=True, can_edit=True, can_delete=True,
    ),
    SayfaYetkisi(
        page_id="system-settings", page_name="Sistem Ayarları", route="/admin/ayarlar/sistem",
        can_view=True, can_edit=True,
    ),
)
