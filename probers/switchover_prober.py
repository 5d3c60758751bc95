"""Switchover count from 'show redundancy switchover sso'."""
from prometheus_client import Gauge

from probers.base import DeviceState, Prober


class SwitchoverState(DeviceState):
    switchover_count: float


class SwitchoverProber(Prober):
    name = "switchover"
    command = "show redundancy switchover sso"
    schema = SwitchoverState

    def _register(self, registry):
        self.switchover_count_gauge = Gauge(
            "arista_redundancy_switchover_count",
            "Contains redundancy switchover count",
            registry=registry,
        )

    def _emit(self, logger):
        self.switchover_count_gauge.set(self.state.switchover_count)
