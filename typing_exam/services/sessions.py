import logging
import secrets

from typing_exam.core.errors import InvalidCredential, NoSuchUser
from typing_exam.models.users import LoginResult
from typing_exam.services.directory import UserDirectory

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Une seule session active par compte : le token vit dans le profil.
    Un nouveau login écrase le slot => l'ancien token n'est plus valide.
    """

    def __init__(self, directory: UserDirectory, token_bytes: int = 24) -> None:
        self.directory = directory
        self.token_bytes = token_bytes

    def login(self, mobile: str, password: str) -> LoginResult:
        with self.directory.lock:
            identity = self.directory.find_identity(mobile)
            profile = self.directory.get_profile(identity) if identity is not None else None
            if profile is None:
                logger.info("Login failed: unknown mobile %s", mobile)
                raise NoSuchUser()

            if not self.directory.codec.verify(password, profile.credential):
                logger.info("Login failed: bad password for %s", profile.mobile)
                raise InvalidCredential()

            token = secrets.token_urlsafe(self.token_bytes)
            self.directory.set_session(identity, token)

        logger.info("Login ok (mobile=%s)", profile.mobile)
        return LoginResult(name=profile.name, mobile=profile.mobile, session_token=token)

    def check_session_valid(self, mobile: str, token: str) -> bool:
        if not token:
            return False
        profile = self.directory.get_by_mobile(mobile)
        if profile is None:
            return False
        return secrets.compare_digest(profile.session_token.encode("utf-8"), token.encode("utf-8"))

    def logout(self, identity: str) -> None:
        self.directory.set_session(identity, "")
        logger.info("Session cleared for %s", identity)
