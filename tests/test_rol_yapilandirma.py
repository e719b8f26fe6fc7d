import pytest

from panel_api.modeller import MenuOgesi
from panel_api.rol_yapilandirma import KULLANILABILIR_SAYFALAR, ROL_YAPILANDIRMALARI, get_role_config
from panel_api.roller import RolEnum

BEKLENEN_MENULER = {
    "superadmin": [
        "dashboard", "customer-management", "dealer-management", "document-management",
        "accounting", "reports", "notifications", "settings",
    ],
    "birincil-admin": [
        "dashboard", "customer-management", "document-management", "accounting", "reports", "notifications",
    ],
    "ikincil-admin": ["dashboard", "customer-management", "document-management", "notifications"],
    "evrak-birimi": ["dashboard", "customer-management", "dealer-management", "document-management", "notifications"],
    "bayi": ["dashboard", "customer-management", "document-management", "notifications"],
    "musteri": ["dashboard", "customer-management", "notifications"],
}


@pytest.mark.parametrize("rol, beklenen", BEKLENEN_MENULER.items())
def test_menu_order_per_role(rol, beklenen):
    yapilandirma = get_role_config(rol)
    assert [oge.id for oge in yapilandirma.menu_items] == beklenen


def test_registry_covers_six_menu_roles():
    assert set(ROL_YAPILANDIRMALARI) == {RolEnum(r) for r in BEKLENEN_MENULER}


def test_role_config_is_reference_stable():
    assert get_role_config("bayi") is get_role_config("bayi")
    assert get_role_config(RolEnum.BAYI) is get_role_config("bayi")


@pytest.mark.parametrize("rol", ["operasyon", "admin", "yok-boyle-rol", "", None, 42])
def test_roles_without_menu_return_none(rol):
    assert get_role_config(rol) is None


def test_role_specific_labels():
    def etiket(rol):
        return get_role_config(rol).menu_items[1].label

    assert etiket("superadmin") == "Müşteri Yönetimi"
    assert etiket("evrak-birimi") == "Dosya Yönetimi"
    assert etiket("bayi") == "Müşterilerim"
    assert etiket("musteri") == "Başvuru Durumum"
    assert get_role_config("musteri").menu_items[0].label == "Ana Sayfa"


def test_superadmin_settings_submenu():
    ayarlar = get_role_config("superadmin").menu_items[-1]
    assert ayarlar.has_submenu is True
    assert [alt.id for alt in ayarlar.submenu] == ["user-management", "role-management", "system-settings"]


def test_registry_has_no_static_badges():
    for yapilandirma in ROL_YAPILANDIRMALARI.values():
        assert all(oge.badge is None for oge in yapilandirma.menu_items)


def test_menu_items_are_immutable():
    oge = get_role_config("superadmin").menu_items[0]
    with pytest.raises(Exception):
        oge.badge = "1"
    assert isinstance(oge, MenuOgesi)


def test_display_names():
    assert get_role_config("ikincil-admin").display_name == "İkincil Admin"
    assert get_role_config("superadmin").display_name == "Süper Admin"


def test_page_catalogue():
    assert [s.page_id for s in KULLANILABILIR_SAYFALAR] == [
        "dashboard", "customer-management", "dealer-management", "document-management", "accounting",
        "reports", "notifications", "user-management", "role-management", "system-settings",
    ]
    assert all(s.can_view for s in KULLANILABILIR_SAYFALAR)
    musteri = KULLANILABILIR_SAYFALAR[1]
    assert musteri.can_view_own and musteri.can_export
