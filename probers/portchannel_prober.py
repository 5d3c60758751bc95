"""Port channel membership from 'show port-channel detailed'."""
from typing import Dict, Optional

from prometheus_client import Gauge

from probers.base import DeviceState, Prober


class LagPort(DeviceState):
    """Member port, only counted."""


class PortChannel(DeviceState):
    active_ports: Dict[str, Optional[LagPort]] = {}
    inactive_ports: Dict[str, Optional[LagPort]] = {}


class PortChannelState(DeviceState):
    port_channels: Dict[str, PortChannel]


class PortChannelProber(Prober):
    """
    Number of active and inactive member ports per port channel.

    The counts are the number of entries in the member maps reported by the
    device. Port channels missing from the output produce no series.
    """

    name = "portchannel"
    command = "show port-channel detailed"
    schema = PortChannelState

    def _register(self, registry):
        self.ports_gauge = Gauge(
            "arista_portchannel_ports",
            "Contains port channel ports by state",
            ["interface", "state"],
            registry=registry,
        )

    def _emit(self, logger):
        for interface, channel in self.state.port_channels.items():
            self.ports_gauge.labels(interface, "active").set(len(channel.active_ports))
            self.ports_gauge.labels(interface, "inactive").set(len(channel.inactive_ports))
