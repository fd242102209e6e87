import logging
import threading
from typing import Dict, Optional

from typing_exam.core.errors import DuplicateMobile, NoSuchUser, ProfileExists
from typing_exam.models.users import UserProfile
from typing_exam.services.credentials import CredentialCodec

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    Annuaire en mémoire :
    - identity -> UserProfile
    - mobile   -> identity (index secondaire, 1 compte par mobile)

    Les deux maps sont toujours modifiées ensemble sous le même verrou.
    Les profils ne sont jamais supprimés.
    """

    def __init__(self, codec: CredentialCodec) -> None:
        self.codec = codec
        self._profiles: Dict[str, UserProfile] = {}
        self._by_mobile: Dict[str, str] = {}
        self.lock = threading.RLock()

    # ---------- lectures ----------

    def get_profile(self, identity: str) -> Optional[UserProfile]:
        p = self._profiles.get(identity)
        return p.model_copy() if p else None

    def find_identity(self, mobile: str) -> Optional[str]:
        return self._by_mobile.get(mobile.strip())

    def get_by_mobile(self, mobile: str) -> Optional[UserProfile]:
        identity = self.find_identity(mobile)
        if identity is None:
            return None
        return self.get_profile(identity)

    def is_registered(self, mobile: str) -> bool:
        return mobile.strip() in self._by_mobile

    def __len__(self) -> int:
        return len(self._profiles)

    # ---------- écritures ----------

    def register(self, identity: str, name: str, mobile: str, password: str) -> str:
        """
        Crée le profil (session vide) + l'index mobile en une seule étape.
        """
        mobile = mobile.strip()
        credential = self.codec.hash(password)

        with self.lock:
            if mobile in self._by_mobile:
                raise DuplicateMobile()
            if identity in self._profiles:
                raise ProfileExists()

            self._profiles[identity] = UserProfile(
                name=name.strip(),
                mobile=mobile,
                credential=credential,
                session_token="",
            )
            self._by_mobile[mobile] = identity

        logger.info("User registered (mobile=%s)", mobile)
        return "OK"

    def save_profile(self, identity: str, name: str, mobile: str) -> UserProfile:
        """
        Met à jour nom / mobile du profil existant de `identity`.
        Credential et session ne viennent jamais du client.
        """
        mobile = mobile.strip()

        with self.lock:
            current = self._profiles.get(identity)
            if current is None:
                raise NoSuchUser()

            owner = self._by_mobile.get(mobile)
            if owner is not None and owner != identity:
                raise DuplicateMobile()

            updated = current.model_copy(update={"name": name.strip(), "mobile": mobile})
            if current.mobile != mobile:
                self._by_mobile.pop(current.mobile, None)
                self._by_mobile[mobile] = identity
            self._profiles[identity] = updated

        logger.info("Profile updated (mobile=%s)", mobile)
        return updated.model_copy()

    def set_session(self, identity: str, token: str) -> None:
        with self.lock:
            current = self._profiles.get(identity)
            if current is None:
                raise NoSuchUser()
            self._profiles[identity] = current.model_copy(update={"session_token": token})
