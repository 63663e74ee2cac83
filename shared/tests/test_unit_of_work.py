"""Tests for the unit of work and message bus."""

from dataclasses import dataclass

import pytest

from shared.application.message_bus import MessageBus
from shared.application.uow import DjangoUnitOfWork
from shared.domain.base import DomainEvent


@dataclass
class SomethingHappened(DomainEvent):
    value: int


def test_message_bus_calls_every_handler_once():
    bus = MessageBus()
    received = []

    def handler(event):
        received.append(event.value)

    bus.register_event_handler(SomethingHappened, handler)
    bus.register_event_handler(SomethingHappened, handler)
    bus.publish_events([SomethingHappened(value=1), SomethingHappened(value=2)])

    assert received == [1, 2]
    assert bus.handlers_for(SomethingHappened) == [handler]


def test_failing_handler_does_not_stop_the_others():
    bus = MessageBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    def working(event):
        received.append(event.value)

    bus.register_event_handler(SomethingHappened, broken)
    bus.register_event_handler(SomethingHappened, working)
    bus.publish_events([SomethingHappened(value=3)])

    assert received == [3]


def test_event_to_dict():
    payload = SomethingHappened(value=5).to_dict()

    assert payload["event_type"] == "SomethingHappened"
    assert {"event_id", "occurred_at"} <= payload.keys()


@pytest.mark.django_db(transaction=True)
def test_events_are_published_after_commit(monkeypatch):
    bus = MessageBus()
    received = []
    bus.register_event_handler(SomethingHappened, lambda event: received.append(event.value))
    monkeypatch.setattr("shared.application.message_bus.message_bus", bus)

    with DjangoUnitOfWork() as uow:
        uow.record(SomethingHappened(value=7))
        assert uow.pending_events[0].value == 7
        assert received == []

    assert received == [7]


@pytest.mark.django_db(transaction=True)
def test_events_are_discarded_on_rollback(monkeypatch):
    bus = MessageBus()
    received = []
    bus.register_event_handler(SomethingHappened, lambda event: received.append(event.value))
    monkeypatch.setattr("shared.application.message_bus.message_bus", bus)

    with pytest.raises(RuntimeError):
        with DjangoUnitOfWork() as uow:
            uow.record(SomethingHappened(value=8))
            raise RuntimeError("abort")

    assert received == []
