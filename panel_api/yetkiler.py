# panel_api/yetkiler.py
"""
Sayfa içi alan ve işlem yetkileri (bayi adını görme, dosya kapatma, evrak yükleme vb.).

Menü yeteneklerinden bağımsızdır: hangi rolün hangi işlemi yapabileceği tek bir
politika tablosunda tutulur, her isimli kontrol bu tabloya bakar.
Tabloda olmayan roller için cevap her zaman False'tur.
"""
import enum
from typing import Dict, FrozenSet

from .roller import RolEnum, rol_coz


class Yetki(str, enum.Enum):
    CAN_VIEW_DEALER_INFO = "canViewDealerInfo"
    CAN_VIEW_DEALER_PAYMENT = "canViewDealerPayment"
    CAN_VIEW_DEALER_PAYMENT_DOCUMENT = "canViewDealerPaymentDocument"
    CAN_EDIT_CUSTOMER = "canEditCustomer"
    CAN_UPLOAD_APPLICATION_DOCUMENTS = "canUploadApplicationDocuments"
    CAN_UPLOAD_RESULT_DOCUMENTS = "canUploadResultDocuments"
    CAN_CLOSE_FILE = "canCloseFile"
    CAN_CREATE_CUSTOMER = "canCreateCustomer"
    CAN_CREATE_DEALER = "canCreateDealer"
    CAN_UPDATE_CUSTOMER_STATUS = "canUpdateCustomerStatus"
    CAN_VIEW_DEALER_CODE = "canViewDealerCode"
    CAN_MANAGE_DEALER_PAYMENT = "canManageDealerPayment"


_R = RolEnum

YETKI_POLITIKASI: Dict[Yetki, FrozenSet[RolEnum]] = {
    # birincil-admin bayi bilgisini görür, bayi adı ekranda "Bilinmiyor" olarak gizlenir
    Yetki.CAN_VIEW_DEALER_INFO: frozenset({_R.SUPERADMIN, _R.BAYI, _R.BIRINCIL_ADMIN}),
    Yetki.CAN_VIEW_DEALER_PAYMENT: frozenset({_R.SUPERADMIN, _R.BIRINCIL_ADMIN}),
    # Bayi ödeme belgesini hiçbir rol göremez
    Yetki.CAN_VIEW_DEALER_PAYMENT_DOCUMENT: frozenset(),
    Yetki.CAN_EDIT_CUSTOMER: frozenset({_R.SUPERADMIN, _R.BIRINCIL_ADMIN, _R.IKINCIL_ADMIN, _R.OPERASYON}),
    Yetki.CAN_UPLOAD_APPLICATION_DOCUMENTS: frozenset({_R.SUPERADMIN, _R.BIRINCIL_ADMIN, _R.EVRAK_BIRIMI, _R.OPERASYON}),
    Yetki.CAN_UPLOAD_RESULT_DOCUMENTS: frozenset({_R.SUPERADMIN, _R.BIRINCIL_ADMIN, _R.IKINCIL_ADMIN, _R.OPERASYON}),
    Yetki.CAN_CLOSE_FILE: frozenset({_R.SUPERADMIN, _R.BIRINCIL_ADMIN, _R.IKINCIL_ADMIN}),
    Yetki.CAN_CREATE_CUSTOMER: frozenset(
        {_R.SUPERADMIN, _R.BIRINCIL_ADMIN, _R.IKINCIL_ADMIN, _R.EVRAK_BIRIMI, _R.OPERASYON}
    ),
    Yetki.CAN_CREATE_DEALER: frozenset({_R.SUPERADMIN}),
    Yetki.CAN_UPDATE_CUSTOMER_STATUS: frozenset({_R.SUPERADMIN, _R.BIRINCIL_ADMIN, _R.IKINCIL_ADMIN, _R.OPERASYON}),
    Yetki.CAN_VIEW_DEALER_CODE: frozenset({_R.SUPERADMIN, _R.BIRINCIL_ADMIN}),
    Yetki.CAN_MANAGE_DEALER_PAYMENT: frozenset({_R.SUPERADMIN, _R.EVRAK_BIRIMI}),
}

# (rol, yetki) çiftleri; başlangıçta bir kez oluşturulur
_IZINLER = frozenset((rol, yetki) for yetki, roller in YETKI_POLITIKASI.items() for rol in roller)


def yetkili_mi(rol, yetki: Yetki) -> bool:
    rol_enum = rol_coz(rol)
    if rol_enum is None:
        return False
    return (rol_enum, yetki) in _IZINLER


def yetki_ozeti(rol) -> Dict[str, bool]:
    """Rol için bütün yetkilerin ad -> bool haritası."""
    return {yetki.value: yetkili_mi(rol, yetki) for yetki in Yetki}


def can_view_dealer_info(rol) -> bool:
    return yetkili_mi(rol, Yetki.CAN_VIEW_DEALER_INFO)


def can_view_dealer_payment(rol) -> bool:
    return yetkili_mi(rol, Yetki.CAN_VIEW_DEALER_PAYMENT)


def can_view_dealer_payment_document(rol) -> bool:
    return yetkili_mi(rol, Yetki.CAN_VIEW_DEALER_PAYMENT_DOCUMENT)


def can_edit_customer(rol) -> bool:
    return yetkili_mi(rol, Yetki.CAN_EDIT_CUSTOMER)


def can_upload_application_documents(rol) -> bool:
    """Başvuru evrakları."""
    return yetkili_mi(rol, Yetki.CAN_UPLOAD_APPLICATION_DOCUMENTS)


def can_upload_result_documents(rol) -> bool:
    """Süreç / sonuç evrakları."""
    return yetkili_mi(rol, Yetki.CAN_UPLOAD_RESULT_DOCUMENTS)


def can_close_file(rol) -> bool:
    return yetkili_mi(rol, Yetki.CAN_CLOSE_FILE)


def can_create_customer(rol) -> bool:
    return yetkili_mi(rol, Yetki.CAN_CREATE_CUSTOMER)


def can_create_dealer(rol) -> bool:
    return yetkili_mi(rol, Yetki.CAN_CREATE_DEALER)


def can_update_customer_status(rol) -> bool:
    return yetkili_mi(rol, Yetki.CAN_UPDATE_CUSTOMER_STATUS)


def can_view_dealer_code(rol) -> bool:
    """Bayi kodunu (dealer_id) görebilir, bayi adını değil."""
    return yetkili_mi(rol, Yetki.CAN_VIEW_DEALER_CODE)


def can_manage_dealer_payment(rol) -> bool:
    return yetkili_mi(rol, Yetki.CAN_MANAGE_DEALER_PAYMENT)
