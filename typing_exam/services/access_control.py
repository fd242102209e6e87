import logging
import threading
from typing import Dict

from typing_exam.models.users import Role

logger = logging.getLogger(__name__)

_RANK = {Role.guest: 0, Role.user: 1, Role.admin: 2}


class AccessControlStore:
    """
    Rôles par identité appelante (admin | user | guest).
    - identité sans rôle => guest
    - admin ⊃ user
    Ne vérifie PAS qui a le droit d'assigner : c'est la couche opérations
    (ExamBackend) qui filtre avant d'appeler assign_role.
    """

    def __init__(self) -> None:
        self._roles: Dict[str, Role] = {}
        self._lock = threading.Lock()

    def get_role(self, identity: str) -> Role:
        return self._roles.get(identity, Role.guest)

    def has_permission(self, identity: str, capability: Role) -> bool:
        role = self.get_role(identity)
        if capability == Role.admin:
            return role == Role.admin
        if capability == Role.user:
            return role in (Role.user, Role.admin)
        return True

    def is_admin(self, identity: str) -> bool:
        return self.get_role(identity) == Role.admin

    def has_any_admin(self) -> bool:
        with self._lock:
            return any(r == Role.admin for r in self._roles.values())

    def bootstrap_admin(self, identity: str) -> bool:
        """
        Nomme `identity` admin seulement si aucun admin n'existe encore.
        Vérification et écriture sous le même verrou.
        """
        with self._lock:
            if any(r == Role.admin for r in self._roles.values()):
                return False
            self._roles[identity] = Role.admin
        logger.info("First admin bootstrapped: %s", identity)
        return True

    def grant_at_least(self, grantor: str, target: str, role: Role) -> Role:
        """
        Donne `role` à `target` sauf s'il a déjà au moins ce niveau
        (un admin reste admin). Retourne le rôle effectif.
        """
        with self._lock:
            current = self._roles.get(target, Role.guest)
            if _RANK[current] >= _RANK[role]:
                return current
            self._roles[target] = role
        logger.info("Role %s assigned to %s (by %s)", role.value, target, grantor)
        return role

    def assign_role(self, grantor: str, target: str, role: Role) -> None:
        with self._lock:
            self._roles[target] = role
        logger.info("Role %s assigned to %s (by %s)", role.value, target, grantor)
