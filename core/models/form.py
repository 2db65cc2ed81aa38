from __future__ import annotations
import logging
import re
from collections.abc import Iterable
from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core import config
from .common import PointLike, Signature, as_point

logger = logging.getLogger(__name__)

SignatureLike = Union[Signature, Iterable[PointLike]]

_SSN_RE = re.compile(r"[0-9]{9}")
_PHONE_RE = re.compile(r"[0-9]{10}")

_LABELS = {
    "first_name": "First name",
    "middle_initial": "Middle initial",
    "last_name": "Last name",
    "display_name": "Display name",
    "ssn": "Social security number",
    "phone": "Phone number",
    "email": "Email address",
    "address": "Street address",
    "signature": "Signature",
}


def validation_messages(exc: ValidationError) -> List[str]:
    """Messages lisibles (un par champ en erreur), sans reprendre les valeurs saisies."""
    out: List[str] = []
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else ""
        msg = err["msg"]
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.append(f"{_LABELS.get(field, field)}: {msg}")
    return out


class FormData(BaseModel):
    """
    Un formulaire saisi (identité, contact, signature).

    Toute modification passe par update()/try_update() : le formulaire
    candidat est validé en entier avant d'écrire quoi que ce soit, donc un
    échec laisse l'objet dans son état précédent. Une affectation directe
    (form.phone = ...) est validée elle aussi.
    """
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    first_name: str
    middle_initial: str = Field(min_length=1, max_length=1)
    last_name: str
    display_name: str
    ssn: str
    phone: str
    email: str
    address: str
    signature: Signature = Field(default_factory=Signature)

    # ---------------- Validation ---------------- #

    @field_validator("first_name", "last_name", "address")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("middle_initial", mode="before")
    @classmethod
    def _first_char(cls, v: Any) -> Any:
        # saisie tolérante : "Mary" -> "M"
        if isinstance(v, str):
            if not v:
                raise ValueError("must not be empty")
            return v[0]
        return v

    @field_validator("display_name")
    @classmethod
    def _display_name(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("ssn")
    @classmethod
    def _ssn(cls, v: str) -> str:
        if not _SSN_RE.fullmatch(v):
            raise ValueError("must be exactly 9 digits")
        return v

    @field_validator("phone")
    @classmethod
    def _phone(cls, v: str) -> str:
        if not _PHONE_RE.fullmatch(v):
            raise ValueError("must be exactly 10 digits")
        return v

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        if v.count("@") != 1:
            raise ValueError("must contain exactly one '@'")
        local, domain = v.split("@")
        if not local or not domain:
            raise ValueError("must have a name before and a domain after '@'")
        if "." not in domain:
            raise ValueError("domain must contain a '.'")
        return v

    @field_validator("signature", mode="before")
    @classmethod
    def _signature(cls, v: Any) -> Any:
        # toujours une copie : pas de liste de points partagée avec l'appelant
        if isinstance(v, Signature):
            return {"points": list(v.points)}
        raw = v.get("points") if isinstance(v, dict) else v
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
            raise ValueError("must be a sequence of (x, y) points")
        # coordonnées entières strictes, comme Signature.append
        try:
            return {"points": [as_point(p) for p in raw]}
        except (TypeError, ValueError):
            raise ValueError("must be a sequence of (x, y) integer points") from None

    # ---------------- Fabrique ---------------- #

    @classmethod
    def create_default(cls) -> "FormData":
        return cls(
            first_name=config.DEFAULT_FIRST_NAME,
            middle_initial=config.DEFAULT_MIDDLE_INITIAL,
            last_name=config.DEFAULT_LAST_NAME,
            display_name=config.DEFAULT_DISPLAY_NAME,
            ssn=config.DEFAULT_SSN,
            phone=config.DEFAULT_PHONE,
            email=config.DEFAULT_EMAIL,
            address=config.DEFAULT_ADDRESS,
        )

    # ---------------- Mise à jour ---------------- #

    def update(
        self,
        first_name: str,
        middle_initial: str,
        last_name: str,
        display_name: str,
        ssn: str,
        phone: str,
        email: str,
        address: str,
        signature: SignatureLike,
    ) -> None:
        """Remplace tous les champs d'un coup. Lève ValidationError sans rien modifier."""
        candidate = FormData(
            first_name=first_name,
            middle_initial=middle_initial,
            last_name=last_name,
            display_name=display_name,
            ssn=ssn,
            phone=phone,
            email=email,
            address=address,
            signature=signature,
        )
        for name in type(self).model_fields:
            setattr(self, name, getattr(candidate, name))
        logger.debug("Form '%s' updated", self.display_name)

    def try_update(
        self,
        first_name: str,
        middle_initial: str,
        last_name: str,
        display_name: str,
        ssn: str,
        phone: str,
        email: str,
        address: str,
        signature: SignatureLike,
    ) -> bool:
        try:
            self.update(
                first_name, middle_initial, last_name, display_name,
                ssn, phone, email, address, signature,
            )
        except ValidationError as exc:
            logger.info(
                "Update of form '%s' rejected (%s)",
                self.display_name,
                ", ".join(str(e["loc"][0]) for e in exc.errors() if e["loc"]),
            )
            return False
        return True

    def reset(self) -> None:
        default = FormData.create_default()
        for name in type(self).model_fields:
            setattr(self, name, getattr(default, name))

    # ---------------- Accès / tri ---------------- #

    def get_display_name(self) -> str:
        return self.display_name

    def __lt__(self, other: object) -> bool:
        # ordre = display_name seul (comparaison par code de caractère)
        if not isinstance(other, FormData):
            return NotImplemented
        return self.display_name < other.display_name
