"""Supervisor redundancy from 'show redundancy status'."""
from prometheus_client import Gauge

from probers.base import DeviceState, Prober
from probers.utils import set_flag, set_health


class RedundancyState(DeviceState):
    slot_id: float = 0
    my_mode: str
    peer_mode: str = ""
    unit_desc: str = ""
    communication_desc: str = ""
    switchover_ready: bool = False
    all_agent_sso_ready: bool = False
    last_redundancy_mode_change_time: float = 0
    last_redundancy_mode_change_reason: str = ""


class RedundancyProber(Prober):
    """
    Redundancy mode of this supervisor and its peer.

    switchover_ready and all_agent_sso_ready are only ever set to 1, a false
    flag leaves the gauge at 0.
    """

    name = "redundancy"
    command = "show redundancy status"
    schema = RedundancyState

    def _register(self, registry):
        self.slot_id_gauge = Gauge(
            "arista_redundancy_slot_id",
            "Contains redundancy slot id",
            ["unitDesc"],
            registry=registry,
        )
        self.my_mode_gauge = Gauge(
            "arista_redundancy_mode",
            "Contains redundancy mode",
            ["status"],
            registry=registry,
        )
        self.peer_mode_gauge = Gauge(
            "arista_redundancy_peer_mode",
            "Contains redundancy peer mode",
            ["status"],
            registry=registry,
        )
        self.communication_desc_gauge = Gauge(
            "arista_redundancy_communication_desc",
            "Contains redundancy communication desc",
            ["status"],
            registry=registry,
        )
        self.switchover_ready_gauge = Gauge(
            "arista_redundancy_switchover_ready",
            "Contains redundancy switchover ready",
            registry=registry,
        )
        self.all_agent_sso_ready_gauge = Gauge(
            "arista_redundancy_all_agent_sso_ready",
            "Contains redundancy all Agent SSO Ready",
            registry=registry,
        )
        self.last_mode_change_time_gauge = Gauge(
            "arista_redundancy_last_mode_change_time",
            "Contains redundancy last mode change time",
            ["reason"],
            registry=registry,
        )

    def _emit(self, logger):
        redundancy = self.state

        self.slot_id_gauge.labels(redundancy.unit_desc).set(redundancy.slot_id)
        set_health(self.my_mode_gauge, redundancy.my_mode, "active")
        set_health(self.peer_mode_gauge, redundancy.peer_mode, "standby")
        set_health(self.communication_desc_gauge, redundancy.communication_desc, "Up")
        set_flag(self.switchover_ready_gauge, redundancy.switchover_ready)
        set_flag(self.all_agent_sso_ready_gauge, redundancy.all_agent_sso_ready)

        self.last_mode_change_time_gauge.labels(
            redundancy.last_redundancy_mode_change_reason
        ).set(redundancy.last_redundancy_mode_change_time)
