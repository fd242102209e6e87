"""
Couche opérations : une méthode par opération exposée.

Chaque méthode reçoit l'identité appelante en premier argument. Le décorateur
`requires` vérifie la capacité AVANT d'exécuter le corps : aucun store n'est
touché si l'appelant n'a pas le droit.
"""

import functools
import logging
from typing import List, Optional

from typing_exam.core.config import Settings, get_settings
from typing_exam.core.errors import InvalidInput, NoSuchUser, Unauthorized
from typing_exam.models.passages import Passage
from typing_exam.models.results import TestResult
from typing_exam.models.users import LoginResult, Role, UserProfile
from typing_exam.services.access_control import AccessControlStore
from typing_exam.services.bootstrap import AdminBootstrap
from typing_exam.services.credentials import CredentialCodec
from typing_exam.services.directory import UserDirectory
from typing_exam.services.passages import PassageRepository
from typing_exam.services.results import ResultLedger
from typing_exam.services.sessions import SessionManager

logger = logging.getLogger(__name__)


def requires(capability: Role):
    """
    Garde d'accès uniforme : lève Unauthorized si `caller` n'a pas `capability`.
    """

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(self: "ExamBackend", caller: str, *args, **kwargs):
            if not self.access.has_permission(caller, capability):
                logger.warning("Unauthorized %s by %s (needs %s)", fn.__name__, caller, capability.value)
                raise Unauthorized(f"{capability.value.capitalize()} access required")
            return fn(self, caller, *args, **kwargs)

        wrapper.required_capability = capability
        return wrapper

    return decorator


def _check_passage(title: str, content: str, time_minutes: int) -> None:
    if not title or not title.strip():
        raise InvalidInput("Passage title is required")
    if not content or not content.strip():
        raise InvalidInput("Passage content is required")
    if time_minutes < 1:
        raise InvalidInput("time_minutes must be >= 1")


def _check_result(wpm: int, accuracy: int, mistakes: int) -> None:
    if wpm < 0 or mistakes < 0:
        raise InvalidInput("wpm and mistakes must be >= 0")
    if not 0 <= accuracy <= 100:
        raise InvalidInput("accuracy must be between 0 and 100")


class ExamBackend:
    """
    Regroupe les stores (injectés ou créés) et expose les opérations.
    Un backend neuf par test => état isolé.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        access: Optional[AccessControlStore] = None,
        directory: Optional[UserDirectory] = None,
        passages: Optional[PassageRepository] = None,
        results: Optional[ResultLedger] = None,
    ) -> None:
        s = settings or get_settings()

        self.access = access or AccessControlStore()
        self.directory = directory or UserDirectory(
            CredentialCodec(scheme=s.CREDENTIAL_SCHEME, shift=s.CREDENTIAL_SHIFT)
        )
        self.sessions = SessionManager(self.directory, token_bytes=s.SESSION_TOKEN_BYTES)
        self.passages = passages or PassageRepository()
        self.results = results or ResultLedger()
        self.bootstrap = AdminBootstrap(
            self.access,
            self.directory,
            self.passages,
            admin_mobile=s.ADMIN_MOBILE,
            admin_name=s.ADMIN_NAME,
            admin_password=s.ADMIN_PASSWORD,
        )

    # =========================================================
    # Comptes & sessions (public)
    # =========================================================
    @requires(Role.guest)
    def register_user(self, caller: str, name: str, mobile: str, password: str) -> str:
        status = self.directory.register(caller, name, mobile, password)
        # un admin qui crée son profil reste admin
        self.access.grant_at_least(caller, caller, Role.user)
        return status

    @requires(Role.guest)
    def login(self, caller: str, mobile: str, password: str) -> LoginResult:
        return self.sessions.login(mobile, password)

    @requires(Role.guest)
    def check_session_valid(self, caller: str, mobile: str, token: str) -> bool:
        return self.sessions.check_session_valid(mobile, token)

    @requires(Role.guest)
    def logout(self, caller: str, mobile: str) -> None:
        owner = self.directory.find_identity(mobile)
        is_admin = self.access.is_admin(caller)

        # propriétaire ou admin, vérifié avant toute écriture
        if not is_admin and (owner is None or owner != caller):
            raise Unauthorized("Can only log out your own account")
        if owner is None:
            raise NoSuchUser()

        self.sessions.logout(owner)

    # =========================================================
    # Profils & rôles
    # =========================================================
    @requires(Role.user)
    def get_caller_user_profile(self, caller: str) -> Optional[UserProfile]:
        return self.directory.get_profile(caller)

    @requires(Role.guest)
    def get_user_profile(self, caller: str, target: str) -> Optional[UserProfile]:
        if caller != target and not self.access.is_admin(caller):
            raise Unauthorized("Can only view your own profile")
        return self.directory.get_profile(target)

    @requires(Role.user)
    def save_caller_user_profile(self, caller: str, name: str, mobile: str) -> UserProfile:
        return self.directory.save_profile(caller, name, mobile)

    @requires(Role.guest)
    def get_caller_user_role(self, caller: str) -> Role:
        return self.access.get_role(caller)

    @requires(Role.guest)
    def is_caller_admin(self, caller: str) -> bool:
        return self.access.is_admin(caller)

    @requires(Role.guest)
    def assign_caller_user_role(self, caller: str, target: str, role: Role) -> None:
        if self.access.is_admin(caller):
            self.access.assign_role(caller, target, role)
            return
        # auto-amorçage : tant qu'aucun admin n'existe, un appelant peut se nommer admin
        if target == caller and role == Role.admin and self.access.bootstrap_admin(caller):
            return
        raise Unauthorized("Admin access required")

    # =========================================================
    # Passages
    # =========================================================
    @requires(Role.user)
    def get_passages(self, caller: str) -> List[Passage]:
        return self.passages.list()

    @requires(Role.user)
    def get_passage(self, caller: str, passage_id: str) -> Passage:
        return self.passages.get(passage_id)

    @requires(Role.admin)
    def add_passage(self, caller: str, title: str, content: str, time_minutes: int) -> str:
        _check_passage(title, content, time_minutes)
        return self.passages.add(title, content, time_minutes)

    @requires(Role.admin)
    def update_passage(
        self, caller: str, passage_id: str, title: str, content: str, time_minutes: int
    ) -> None:
        _check_passage(title, content, time_minutes)
        self.passages.update(passage_id, title, content, time_minutes)

    @requires(Role.admin)
    def delete_passage(self, caller: str, passage_id: str) -> None:
        self.passages.delete(passage_id)

    # =========================================================
    # Résultats
    # =========================================================
    @requires(Role.user)
    def submit_test_result(
        self,
        caller: str,
        user_name: str,
        user_mobile: str,
        passage_title: str,
        wpm: int,
        accuracy: int,
        mistakes: int,
    ) -> str:
        _check_result(wpm, accuracy, mistakes)
        return self.results.submit(user_name, user_mobile, passage_title, wpm, accuracy, mistakes)

    # TODO: restreindre aux résultats de l'appelant (hors admin) si la
    # confidentialité entre candidats est confirmée comme exigence.
    @requires(Role.user)
    def get_test_results(self, caller: str) -> List[TestResult]:
        return self.results.list()

    # =========================================================
    # Admin
    # =========================================================
    @requires(Role.admin)
    def seed_data(self, caller: str) -> None:
        self.bootstrap.seed_passages()

    @requires(Role.admin)
    def add_admin(self, caller: str) -> None:
        self.bootstrap.add_admin(caller)
