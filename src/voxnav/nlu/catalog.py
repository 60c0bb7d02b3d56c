"""
Intent Catalog
Static, ordered list of the navigation intents reachable by voice.

Order matters only when two intents score identically for the same query:
the one declared first wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple


class IntentKind(str, Enum):
    SIMPLE = "simple"
    PARAMETERIZED = "parameterized"


@dataclass(frozen=True)
class Intent:
    """
    One navigation target.

    ``param_names`` maps an extracted field (``amount`` / ``label``) to the
    query-string key it is sent under; ``extra_params`` are added to the query
    string only when at least one field was extracted.
    """

    id: str
    keywords: Tuple[str, ...]
    path: str
    feedback: str
    kind: IntentKind = IntentKind.SIMPLE
    param_names: Tuple[Tuple[str, str], ...] = ()
    extra_params: Tuple[Tuple[str, str], ...] = ()

    @property
    def is_parameterized(self) -> bool:
        return self.kind is IntentKind.PARAMETERIZED

    def query_key(self, field_name: str) -> Optional[str]:
        for name, key in self.param_names:
            if name == field_name:
                return key
        return None

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "keywords": list(self.keywords),
            "path": self.path,
            "feedback": self.feedback,
            "parameterized": self.is_parameterized,
        }


def simple(intent_id: str, keywords: Sequence[str], path: str, feedback: str) -> Intent:
    return Intent(id=intent_id, keywords=tuple(keywords), path=path, feedback=feedback)


def parameterized(
    intent_id: str,
    keywords: Sequence[str],
    path: str,
    feedback: str,
    *,
    param_names: Dict[str, str],
    extra_params: Optional[Dict[str, str]] = None,
) -> Intent:
    return Intent(
        id=intent_id,
        keywords=tuple(keywords),
        path=path,
        feedback=feedback,
        kind=IntentKind.PARAMETERIZED,
        param_names=tuple(param_names.items()),
        extra_params=tuple((extra_params or {}).items()),
    )


def validate_catalog(intents: Iterable[Intent]) -> Tuple[Intent, ...]:
    """Return the catalog as a tuple; raise ValueError on empty keyword sets or duplicate ids."""
    catalog = tuple(intents)
    seen: List[str] = []
    for intent in catalog:
        if not intent.keywords or not any(k.strip() for k in intent.keywords):
            raise ValueError(f"intent {intent.id!r} has no keywords")
        if intent.id in seen:
            raise ValueError(f"duplicate intent id {intent.id!r}")
        if intent.is_parameterized and not intent.param_names:
            raise ValueError(f"parameterized intent {intent.id!r} declares no parameters")
        seen.append(intent.id)
    return catalog


CATALOG: Tuple[Intent, ...] = validate_catalog((
    simple(
        "home",
        ["accueil", "maison", "dashboard", "home"],
        "/",
        "Navigation vers l'accueil",
    ),
    simple(
        "profile",
        ["profil", "compte", "paramètre", "paramètres"],
        "/profile",
        "Ouverture du profil",
    ),
    simple(
        "finance",
        ["finance", "compta", "comptabilité", "budget"],
        "/finance",
        "Navigation vers Finances",
    ),
    parameterized(
        "add_expense",
        ["dépense", "achat", "payer", "payé", "facture", "transaction"],
        "/finance?action=add",
        "Ouverture du formulaire de dépense",
        param_names={"amount": "amount", "label": "label"},
    ),
    simple(
        "analytics",
        ["analyse", "statistique", "graphique"],
        "/analytics",
        "Ouverture des statistiques",
    ),
    simple(
        "documents",
        ["document", "fichier", "dossier"],
        "/documents",
        "Accès aux documents",
    ),
    simple(
        "scanner",
        ["scanner", "scan", "ticket", "reçu"],
        "/finance?action=scan",
        "Activation du scanner",
    ),
    simple(
        "mails",
        ["mail", "courrier", "inbox"],
        "/mails",
        "Ouverture de la messagerie",
    ),
    parameterized(
        "editor",
        ["éditeur", "écrire", "rédiger", "lettre"],
        "/editor",
        "Ouverture de l'éditeur",
        param_names={"label": "organism"},
        extra_params={"action": "create"},
    ),
    simple(
        "organisms",
        ["admin", "organisme", "gestion"],
        "/add-organisms",
        "Gestion des organismes",
    ),
    simple(
        "marketplace",
        ["magasin", "boutique", "plugin"],
        "/marketplace",
        "Ouverture de la boutique",
    ),
    simple(
        "legal_privacy",
        ["légal", "cgu", "confidentialité"],
        "/legal/privacy",
        "Politique de confidentialité",
    ),
    simple(
        "legal_cgv",
        ["cgv", "vente"],
        "/legal/cgv",
        "Conditions générales de vente",
    ),
    simple(
        "legal_mentions",
        ["mentions légales", "éditeur du site"],
        "/legal/mentions",
        "Mentions légales",
    ),
    simple(
        "faq",
        ["aide", "faq", "support"],
        "/faq",
        "Ouverture de l'aide",
    ),
))


def get_intent(intent_id: str, catalog: Sequence[Intent] = CATALOG) -> Optional[Intent]:
    for intent in catalog:
        if intent.id == intent_id:
            return intent
    return None
