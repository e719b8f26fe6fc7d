# panel_api/guvenlik.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from typing import Optional
from .config import settings
from .roller import RolEnum, rol_coz
from .yetkiler import Yetki, yetkili_mi
import logging
logger = logging.getLogger(__name__)

# Token'lar kimlik doğrulama servisi tarafından verilir; burada sadece doğrulanır.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


def get_token_payload(token: str = Depends(oauth2_scheme)) -> dict:
    """JWT token'ı doğrular ve payload'ı (içeriği) döndürür."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Kimlik bilgileri doğrulanamadı",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise credentials_exception
    if payload.get("sub") is None:
        raise credentials_exception
    return payload


def get_current_role(payload: dict = Depends(get_token_payload)) -> Optional[RolEnum]:
    """
    Token'daki 'rol' alanını çözer. Rol yoksa veya tanınmıyorsa None döner;
    bu durumda kullanıcı hiçbir menü ve yetki görmez (en yetkili role düşülmez).
    """
    ham_rol = payload.get("rol")
    rol = rol_coz(ham_rol)
    if rol is None:
        logger.warning(f"Token'da geçerli rol yok, yetkisiz kabul ediliyor: {payload.get('sub')} (Rol: {ham_rol!r})")
    return rol


def rol_gerekli(*roller: RolEnum):
    """
    Kullanıcının verilen rollerden birine sahip olmasını isteyen bağımlılık.
    """
    def kontrol(rol: Optional[RolEnum] = Depends(get_current_role)) -> RolEnum:
        if rol is None or rol not in roller:
            logger.warning(f"Rol yetkisi olmayan erişim denemesi (Rol: {rol}, Gerekli: {[r.value for r in roller]})")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Bu işlem için yetkiniz bulunmamaktadır.",
            )
        return rol

    return kontrol


def yetki_gerekli(yetki: Yetki):
    """
    Yetki politikasındaki bir izni kontrol eden bağımlılık.
    """
    def kontrol(rol: Optional[RolEnum] = Depends(get_current_role)) -> RolEnum:
        if not yetkili_mi(rol, yetki):
            logger.warning(f"'{yetki.value}' yetkisi olmayan erişim denemesi (Rol: {rol})")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Bu işlemi yapmak için '{yetki.value}' yetkiniz yok.",
            )
        return rol

    return kontrol
