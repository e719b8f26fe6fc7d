import pytest

from panel_api.girdi_dogrulama import (
    sanitize_text, validate_email, validate_phone, validate_tc_no,
)


@pytest.mark.parametrize(
    "girdi",
    ["+90 532 123 45 67", "905321234567", "05321234567", "5321234567", "0 (532) 123-45-67"],
)
def test_phone_formats_normalise(girdi):
    sonuc = validate_phone(girdi)
    assert sonuc.gecerli is True
    assert sonuc.temiz == "05321234567"


@pytest.mark.parametrize(
    "girdi, hata",
    [
        ("4321234567", "Telefon numarası 5 ile başlamalı"),
        ("03121234567", "Telefon numarası 05 ile başlamalı"),
        ("12345", "Geçersiz telefon numarası formatı"),
        ("", "Geçersiz telefon numarası formatı"),
        ("٠٥٣٢١٢٣٤٥٦٧", "Geçersiz telefon numarası formatı"),
        ("903121234567", "Telefon numarası 05XXXXXXXXX formatında olmalı"),
    ],
)
def test_phone_errors(girdi, hata):
    sonuc = validate_phone(girdi)
    assert sonuc.gecerli is False
    assert sonuc.temiz == ""
    assert sonuc.hata == hata


def test_valid_tc_no():
    sonuc = validate_tc_no("100 000 001 46")
    assert sonuc.gecerli is True
    assert sonuc.temiz == "10000000146"


@pytest.mark.parametrize(
    "girdi, hata",
    [
        ("1234", "TC Kimlik No 11 haneli olmalı"),
        ("١٠٠٠٠٠٠٠١٤٦", "TC Kimlik No 11 haneli olmalı"),
        ("1000000014٦", "TC Kimlik No 11 haneli olmalı"),
        ("01234567890", "TC Kimlik No 0 ile başlayamaz"),
        ("10000000156", "Geçersiz TC Kimlik No"),
        ("10000000147", "Geçersiz TC Kimlik No"),
    ],
)
def test_invalid_tc_no(girdi, hata):
    assert validate_tc_no(girdi).hata == hata


def test_email():
    assert validate_email("  Ali.Veli@Ornek.COM ").temiz == "ali.veli@ornek.com"
    assert validate_email("").hata == "E-posta adresi gerekli"
    assert validate_email("ali@").hata == "Geçersiz e-posta formatı"
    assert validate_email("a" * 250 + "@b.com").hata == "E-posta adresi çok uzun"


def test_sanitize_text():
    assert sanitize_text("  <b>Ayşe</b> ") == "bAyşe/b"
    assert len(sanitize_text("a" * 2000)) == 1000
