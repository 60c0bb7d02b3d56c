from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from voxnav.nlu.catalog import CATALOG, IntentKind, get_intent, parameterized, simple, validate_catalog


def test_catalog_keywords_are_never_empty() -> None:
    for intent in CATALOG:
        assert intent.keywords
        assert all(keyword.strip() for keyword in intent.keywords)


def test_catalog_ids_are_unique() -> None:
    ids = [intent.id for intent in CATALOG]
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize(
    "intent_id, path",
    [
        ("home", "/"),
        ("profile", "/profile"),
        ("finance", "/finance"),
        ("add_expense", "/finance?action=add"),
        ("analytics", "/analytics"),
        ("documents", "/documents"),
        ("scanner", "/finance?action=scan"),
        ("mails", "/mails"),
        ("editor", "/editor"),
        ("organisms", "/add-organisms"),
        ("marketplace", "/marketplace"),
        ("legal_privacy", "/legal/privacy"),
        ("legal_cgv", "/legal/cgv"),
        ("legal_mentions", "/legal/mentions"),
        ("faq", "/faq"),
    ],
)
def test_catalog_paths(intent_id: str, path: str) -> None:
    assert get_intent(intent_id).path == path


def test_only_expense_and_editor_are_parameterized() -> None:
    kinds = {intent.id for intent in CATALOG if intent.kind is IntentKind.PARAMETERIZED}
    assert kinds == {"add_expense", "editor"}


def test_intent_is_immutable() -> None:
    with pytest.raises(FrozenInstanceError):
        CATALOG[0].path = "/elsewhere"


def test_validate_rejects_empty_keywords() -> None:
    with pytest.raises(ValueError):
        validate_catalog([simple("empty", [], "/", "x")])


def test_validate_rejects_duplicate_ids() -> None:
    with pytest.raises(ValueError):
        validate_catalog([simple("a", ["un"], "/a", "A"), simple("a", ["deux"], "/b", "B")])


def test_validate_rejects_parameterized_without_parameters() -> None:
    with pytest.raises(ValueError):
        validate_catalog([parameterized("p", ["mot"], "/p", "P", param_names={})])


def test_query_key_lookup() -> None:
    editor = get_intent("editor")
    assert editor.query_key("label") == "organism"
    assert editor.query_key("amount") is None
    assert get_intent("nope") is None
