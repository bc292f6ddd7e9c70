"""Tests for BaseViewModel — pure Python, no Qt dependency."""

from dataclasses import dataclass

from contentlist.events.bus import Event, EventBus
from contentlist.gui.viewmodels.base import BaseViewModel


@dataclass(kw_only=True)
class _FakeEvent(Event):
    payload: str = ""


class TestBaseViewModel:
    def test_subscribe_event_receives_events(self):
        bus = EventBus()
        vm = BaseViewModel(bus)
        received = []

        vm.subscribe_event(_FakeEvent, lambda e: received.append(e.payload))
        bus.publish(_FakeEvent(payload="hello"))

        assert received == ["hello"]

    def test_dispose_cancels_subscriptions(self):
        bus = EventBus()
        vm = BaseViewModel(bus)
        received = []

        vm.subscribe_event(_FakeEvent, lambda e: received.append(e.payload))
        bus.publish(_FakeEvent(payload="before"))
        vm.dispose()
        bus.publish(_FakeEvent(payload="after"))

        assert received == ["before"]
        assert bus.subscriber_count(_FakeEvent) == 0

    def test_without_bus_everything_is_a_no_op(self):
        vm = BaseViewModel()
        assert vm.subscribe_event(_FakeEvent, lambda e: None) is None
        vm.publish(_FakeEvent(payload="dropped"))
        vm.dispose()
        assert vm.event_bus is None

    def test_publish_goes_through_attached_bus(self):
        bus = EventBus()
        received = []
        bus.subscribe(_FakeEvent, received.append)

        BaseViewModel(bus).publish(_FakeEvent(payload="x"))

        assert [event.payload for event in received] == ["x"]
