import logging
import threading

from typing_exam.core.errors import ProfileExists
from typing_exam.models.users import Role
from typing_exam.services.access_control import AccessControlStore
from typing_exam.services.directory import UserDirectory
from typing_exam.services.passages import PassageRepository

logger = logging.getLogger(__name__)

# (titre, durée en minutes, contenu)
SAMPLE_PASSAGES = [
    (
        "The Quick Brown Fox",
        1,
        "The quick brown fox jumps over the lazy dog. This sentence contains every "
        "letter of the alphabet and has been used for generations to test typewriters "
        "and keyboards. Practice it until your fingers find each key without looking.",
    ),
    (
        "Digital India",
        2,
        "Digital India is a campaign launched to ensure that government services are "
        "made available to citizens electronically by improving online infrastructure "
        "and by increasing internet connectivity. It aims to empower the country "
        "digitally in the field of technology, connecting rural areas with high speed "
        "networks and promoting digital literacy among all sections of society.",
    ),
    (
        "Importance of Typing Skills",
        3,
        "Typing is an essential skill in the modern office. Government examinations "
        "for clerical posts often include a typing test in which candidates must reach "
        "a minimum speed with a high level of accuracy. Regular practice with varied "
        "passages improves both speed and confidence. Focus first on accuracy, keep a "
        "relaxed posture, and let speed come naturally with time.",
    ),
    (
        "Environment and Us",
        5,
        "Protecting the environment is the responsibility of every citizen. Forests, "
        "rivers and wildlife are part of a delicate balance that sustains human life. "
        "Pollution of air and water, careless disposal of plastic and the cutting of "
        "trees threaten this balance. Small actions such as saving electricity, using "
        "public transport and planting trees can make a real difference. When people "
        "work together, communities become cleaner, healthier and more pleasant places "
        "to live for present and future generations.",
    ),
]


class AdminBootstrap:
    """
    Amorçage idempotent :
    - passages d'exemple si le dépôt est vide
    - compte admin bien connu (mobile fixe) rattaché à l'identité appelante
    Le contrôle "admin only" est fait par la couche opérations.
    """

    def __init__(
        self,
        access: AccessControlStore,
        directory: UserDirectory,
        passages: PassageRepository,
        admin_mobile: str,
        admin_name: str = "Admin",
        admin_password: str = "admin@123",
    ) -> None:
        self.access = access
        self.directory = directory
        self.passages = passages
        self.admin_mobile = admin_mobile
        self.admin_name = admin_name
        self.admin_password = admin_password
        self._seed_lock = threading.Lock()

    def seed_passages(self) -> int:
        """Retourne le nombre de passages insérés (0 si déjà amorcé)."""
        with self._seed_lock:
            if not self.passages.is_empty():
                logger.info("Seed skipped: passages already present")
                return 0

            for title, minutes, content in SAMPLE_PASSAGES:
                self.passages.add(title, content, minutes)

        logger.info("Seeded %d sample passages", len(SAMPLE_PASSAGES))
        return len(SAMPLE_PASSAGES)

    def add_admin(self, grantor: str) -> bool:
        """Retourne True si le compte admin a été créé."""
        with self.directory.lock:
            if self.directory.is_registered(self.admin_mobile):
                logger.info("Admin account already registered")
                return False

            if self.directory.get_profile(grantor) is not None:
                raise ProfileExists("Caller already owns a profile; cannot bind the admin account")

            self.directory.register(grantor, self.admin_name, self.admin_mobile, self.admin_password)
            self.access.assign_role(grantor, grantor, Role.admin)

        logger.info("Admin account bound to %s", grantor)
        return True
