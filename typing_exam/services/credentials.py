import logging

import bcrypt

from typing_exam.core.errors import PasswordTooLong

logger = logging.getLogger(__name__)

# alphabet imprimable ASCII: ' ' (32) .. '~' (126)
_FIRST = 32
_SIZE = 95


def _password_bytes_ok(pw: str) -> bool:
    # bcrypt hard-limit: 72 bytes
    return len(pw.encode("utf-8")) <= 72


class CredentialCodec:
    """
    Transforme un mot de passe en credential stocké.

    - "shift" (legacy): décalage fixe de chaque caractère dans l'alphabet
      imprimable. Déterministe, sans sel, trivialement inversible.
      NE PAS considérer comme sécurisé : gardé pour compatibilité.
    - "bcrypt": hash salé ; deux comptes avec le même mot de passe
      n'ont pas le même credential.

    Contrat externe identique dans les deux cas : verify(password, credential).
    """

    SCHEMES = ("shift", "bcrypt")

    def __init__(self, scheme: str = "shift", shift: int = 3) -> None:
        if scheme not in self.SCHEMES:
            raise ValueError(f"Unknown credential scheme: {scheme!r}")
        self.scheme = scheme
        self.shift = shift

    # ---------- public API ----------

    def hash(self, password: str) -> str:
        if self.scheme == "bcrypt":
            if not _password_bytes_ok(password):
                raise PasswordTooLong()
            return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("ascii")
        return "".join(self._shift_char(c) for c in password)

    def verify(self, password: str, credential: str) -> bool:
        if self.scheme == "bcrypt":
            if not _password_bytes_ok(password):
                return False
            try:
                return bcrypt.checkpw(password.encode("utf-8"), credential.encode("ascii"))
            except ValueError:
                # credential stocké dans un autre format (ex: legacy shift)
                logger.warning("Stored credential is not a bcrypt hash")
                return False
        return self.hash(password) == credential

    # ---------- internals ----------

    def _shift_char(self, c: str) -> str:
        code = min(max(ord(c), _FIRST), _FIRST + _SIZE - 1)
        return chr(_FIRST + (code - _FIRST + self.shift) % _SIZE)
