from __future__ import annotations

from decimal import Decimal

from voxnav.dispatcher import Dispatcher, append_query, not_understood
from voxnav.nlu.catalog import get_intent, parameterized
from voxnav.nlu.entity_resolver import ExtractedParams
from voxnav.schemas.api_models import FeedbackSeverity


def test_append_query_starts_or_continues_query_string() -> None:
    assert append_query("/finance?action=add", {"amount": "50"}) == "/finance?action=add&amount=50"
    assert append_query("/editor", {"action": "create", "organism": "la poste"}) == (
        "/editor?action=create&organism=la%20poste"
    )
    assert append_query("/faq", {}) == "/faq"


def test_simple_intent_uses_defaults() -> None:
    command = Dispatcher().build_command(get_intent("profile"))
    assert command.path == "/profile"
    assert command.query_params == {}
    assert command.feedback == "Ouverture du profil"


def test_simple_intent_keeps_embedded_query() -> None:
    command = Dispatcher().build_command(get_intent("scanner"))
    assert command.path == "/finance?action=scan"
    assert command.href == "/finance?action=scan"


def test_expense_with_amount_and_label() -> None:
    params = ExtractedParams(amount=Decimal("50"), label="boulangerie")
    command = Dispatcher().build_command(get_intent("add_expense"), params)
    assert command.path == "/finance?action=add&amount=50&label=boulangerie"
    assert command.query_params == {"amount": "50", "label": "boulangerie"}
    assert command.feedback == "Nouvelle dépense : 50 € pour boulangerie"


def test_expense_amount_only_uses_comma_in_feedback() -> None:
    params = ExtractedParams(amount=Decimal("12.50"))
    command = Dispatcher().build_command(get_intent("add_expense"), params)
    assert command.path == "/finance?action=add&amount=12.50"
    assert command.feedback == "Nouvelle dépense : 12,50 €"


def test_expense_label_only() -> None:
    command = Dispatcher().build_command(get_intent("add_expense"), ExtractedParams(label="lidl"))
    assert command.path == "/finance?action=add&label=lidl"
    assert command.feedback == "Nouvelle dépense pour lidl"


def test_expense_without_params_falls_back_to_default_feedback() -> None:
    command = Dispatcher().build_command(get_intent("add_expense"), ExtractedParams())
    assert command.path == "/finance?action=add"
    assert command.query_params == {}
    assert command.feedback == "Ouverture du formulaire de dépense"


def test_letter_adds_action_and_organism() -> None:
    command = Dispatcher().build_command(get_intent("editor"), ExtractedParams(label="caf"))
    assert command.path == "/editor?action=create&organism=caf"
    assert command.query_params == {"action": "create", "organism": "caf"}
    assert "caf" in command.feedback


def test_letter_ignores_unmapped_amount() -> None:
    command = Dispatcher().build_command(get_intent("editor"), ExtractedParams(amount=Decimal("3")))
    assert command.path == "/editor"
    assert command.feedback == "Ouverture de l'éditeur"


def test_reject_builds_info_feedback_with_original_transcript() -> None:
    feedback = Dispatcher().reject("Bla Bla")
    assert feedback.message == 'Je n\'ai pas compris : "Bla Bla"'
    assert feedback.severity is FeedbackSeverity.INFO
    assert not_understood(None) == 'Je n\'ai pas compris : ""'


def test_collaborators_receive_outputs() -> None:
    routed = []
    notified = []
    dispatcher = Dispatcher(
        router=lambda path, params: routed.append((path, params)),
        notifier=lambda message, severity: notified.append((message, severity)),
    )
    command, feedback = dispatcher.dispatch(get_intent("faq"))
    assert routed == [("/faq", {})]
    assert notified == [("Ouverture de l'aide", FeedbackSeverity.SUCCESS)]
    assert feedback.message == command.feedback


def test_collaborator_failure_does_not_propagate() -> None:
    notified = []

    def broken_router(path, params):
        raise RuntimeError("router down")

    dispatcher = Dispatcher(
        router=broken_router,
        notifier=lambda message, severity: notified.append(message),
    )
    command, _ = dispatcher.dispatch(get_intent("mails"))
    assert command.path == "/mails"
    assert notified == ["Ouverture de la messagerie"]


def test_failing_notifier_does_not_propagate() -> None:
    routed = []

    def broken_notifier(message, severity):
        raise RuntimeError("toast down")

    dispatcher = Dispatcher(
        router=lambda path, params: routed.append(path),
        notifier=broken_notifier,
    )
    command, feedback = dispatcher.dispatch(get_intent("faq"))
    assert routed == ["/faq"]
    assert feedback.message == "Ouverture de l'aide"

    rejected = dispatcher.reject("bla bla")
    assert rejected.message == 'Je n\'ai pas compris : "bla bla"'
    assert rejected.severity is FeedbackSeverity.INFO


def test_parameterized_intent_without_composer_lists_details() -> None:
    transfer = parameterized(
        "transfer",
        ["virement"],
        "/transfer",
        "Ouverture du virement",
        param_names={"amount": "amount", "label": "to"},
    )
    command = Dispatcher().build_command(transfer, ExtractedParams(amount=Decimal("20"), label="marc"))
    assert command.path == "/transfer?amount=20&to=marc"
    assert command.feedback == "Ouverture du virement (montant 20 €, marc)"

    label_only = Dispatcher().build_command(transfer, ExtractedParams(label="marc"))
    assert label_only.feedback == "Ouverture du virement (marc)"
