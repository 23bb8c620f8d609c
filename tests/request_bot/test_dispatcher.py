import logging
from unittest.mock import MagicMock

import pytest

from request_bot.dispatcher import Requester, RequestDispatcher
from request_bot.errors import InvalidRequestError, PermissionDeniedError, TicketNotFoundError
from request_bot.intents import ClearRequests, ListRequests, SetStatus, SubmitRequest, parse_intent
from request_bot.models import TicketStatus
from request_bot.store import TicketStore

ADMIN = Requester(id=1, name="admin")
USER = Requester(id=2, name="alice")


@pytest.fixture
def store(tmp_path):
    s = TicketStore(tmp_path / "requests.json")
    s.load()
    return s


@pytest.fixture
def dispatcher(store):
    return RequestDispatcher(store, admin_id=ADMIN.id)


def test_anyone_can_submit(dispatcher, store):
    request_id, ticket = dispatcher.submit(USER, SubmitRequest(title="Dune"))

    assert ticket.user_id == str(USER.id)
    assert ticket.username == USER.name
    assert store.get(request_id) == ticket


def test_admin_can_triage(dispatcher):
    request_id, _ = dispatcher.submit(USER, SubmitRequest(title="Dune"))

    ticket = dispatcher.set_status(ADMIN, SetStatus(request_id=request_id, status=TicketStatus.FULFILLED))
    listed = dispatcher.list_requests(ADMIN, ListRequests(status=TicketStatus.FULFILLED))
    cleared = dispatcher.clear(ADMIN, ClearRequests(status=TicketStatus.FULFILLED))

    assert ticket.status == TicketStatus.FULFILLED
    assert listed == [(request_id, ticket)]
    assert cleared == 1


def test_set_status_unknown_request(dispatcher):
    with pytest.raises(TicketNotFoundError):
        dispatcher.set_status(ADMIN, SetStatus(request_id="9999", status=TicketStatus.DELAYED))


@pytest.mark.parametrize(
    ("method", "intent"),
    [
        ("set_status", SetStatus(request_id="1234", status=TicketStatus.REJECTED)),
        ("list_requests", ListRequests()),
        ("clear", ClearRequests(status=TicketStatus.PENDING)),
    ],
)
def test_admin_only_operations_reject_other_users(method, intent):
    store = MagicMock(spec=TicketStore)
    dispatcher = RequestDispatcher(store, admin_id=ADMIN.id)

    with pytest.raises(PermissionDeniedError) as exc_info:
        getattr(dispatcher, method)(USER, intent)

    assert exc_info.value.user_message == "You don't have permission to use this command."
    assert store.method_calls == []


def test_parse_intent_strips_title():
    intent = parse_intent(SubmitRequest, title="  Dune  ")

    assert intent.title == "Dune"


def test_parse_intent_rejects_blank_title():
    with pytest.raises(InvalidRequestError) as exc_info:
        parse_intent(SubmitRequest, title="   ")

    assert "**title**" in exc_info.value.user_message


def test_parse_intent_rejects_pending_status():
    with pytest.raises(InvalidRequestError) as exc_info:
        parse_intent(SetStatus, request_id="1234", status="pending")

    assert "cannot be set to pending" in exc_info.value.user_message


def test_parse_intent_accepts_legacy_status_spelling():
    intent = parse_intent(ClearRequests, status="in progress")

    assert intent.status == TicketStatus.IN_PROGRESS


def test_parse_intent_list_without_status():
    assert parse_intent(ListRequests, status=None).status is None


def test_submit_logs_creation_once(dispatcher, caplog):
    with caplog.at_level(logging.INFO, logger="request_bot"):
        request_id, _ = dispatcher.submit(USER, SubmitRequest(title="Dune"))

    assert [record.getMessage() for record in caplog.records if request_id in record.getMessage()] == [
        f"Created request {request_id} for 'Dune' by alice (ID: 2)"
    ]
