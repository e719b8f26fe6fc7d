# panel_api/rotalar/dogrulama.py
from fastapi import APIRouter, Depends, HTTPException, status
import logging
from ..girdi_dogrulama import sanitize_text, validate_email, validate_phone, validate_tc_no
from ..guvenlik import yetki_gerekli
from ..yetkiler import Yetki
from .. import semalar

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dogrulama", tags=["Girdi Doğrulama"])


@router.post(
    "/musteri-formu",
    response_model=semalar.MusteriFormuSonucu,
    dependencies=[Depends(yetki_gerekli(Yetki.CAN_CREATE_CUSTOMER))],
)
def validate_musteri_formu(form: semalar.MusteriFormu):
    """
    Yeni müşteri formunu doğrular; temizlenmiş değerleri ya da alan bazlı hataları döndürür.
    """
    hatalar = {}

    ad = sanitize_text(form.ad)
    if not ad:
        hatalar["ad"] = "Ad soyad gerekli"

    telefon = validate_phone(form.telefon)
    if not telefon.gecerli:
        hatalar["telefon"] = telefon.hata

    tc_no = validate_tc_no(form.tc_no)
    if not tc_no.gecerli:
        hatalar["tc_no"] = tc_no.hata

    email = None
    if form.email is not None and form.email.strip():
        eposta = validate_email(form.email)
        if not eposta.gecerli:
            hatalar["email"] = eposta.hata
        email = eposta.temiz

    if hatalar:
        logger.info(f"Müşteri formu doğrulanamadı: {sorted(hatalar)}")
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=hatalar)

    return semalar.MusteriFormuSonucu(ad=ad, telefon=telefon.temiz, tc_no=tc_no.temiz, email=email)
