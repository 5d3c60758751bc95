"""MLAG state from 'show mlag detail'."""
from typing import List

from prometheus_client import Gauge
from pydantic import Field

from probers.base import DeviceState, Prober
from probers.utils import set_health

PORT_STATES = ("disabled", "configured", "inactive", "activePartial", "activeFull")


class MlagPorts(DeviceState):
    disabled: float = Field(0, ge=0, alias="Disabled")
    configured: float = Field(0, ge=0, alias="Configured")
    inactive: float = Field(0, ge=0, alias="Inactive")
    active_partial: float = Field(0, ge=0, alias="Active-partial")
    active_full: float = Field(0, ge=0, alias="Active-full")


class MlagDetail(DeviceState):
    mlag_state: str = ""
    peer_mlag_state: str = ""
    state_changes: float = 0
    last_state_change_time: float = 0
    failover: bool = False
    failover_cause_list: List[str] = []


class MlagState(DeviceState):
    neg_status: str = ""
    state: str
    config_sanity: str = ""
    peer_link_status: str = ""
    local_intf_status: str = ""
    ports: MlagPorts = Field(default_factory=MlagPorts, alias="mlagPorts")
    detail: MlagDetail = Field(default_factory=MlagDetail)


class MLAGProber(Prober):
    """
    MLAG health.

    Status strings are exported as labels with a 1/0 health value. The port
    gauge always carries all five port states so its cardinality is stable
    across scrapes.
    """

    name = "mlag"
    command = "show mlag detail"
    schema = MlagState

    def _register(self, registry):
        self.detail_gauge = Gauge(
            "arista_mlag_detail",
            "Contains MLAG state detail",
            ["mlagState", "peerMlagState"],
            registry=registry,
        )
        self.state_gauge = Gauge(
            "arista_mlag_state",
            "Contains MLAG state",
            ["state"],
            registry=registry,
        )
        self.state_changes_gauge = Gauge(
            "arista_mlag_state_changes",
            "Contains MLAG state changes",
            registry=registry,
        )
        self.last_state_change_gauge = Gauge(
            "arista_mlag_last_state_change",
            "Contains MLAG last state change",
            registry=registry,
        )
        self.config_sanity_gauge = Gauge(
            "arista_mlag_config_sanity",
            "Contains MLAG config sanity",
            ["status"],
            registry=registry,
        )
        self.neg_status_gauge = Gauge(
            "arista_mlag_neg_status",
            "Contains MLAG neg status",
            ["status"],
            registry=registry,
        )
        self.peer_link_gauge = Gauge(
            "arista_mlag_peer_link",
            "Contains MLAG peer link",
            ["status"],
            registry=registry,
        )
        self.local_inf_status_gauge = Gauge(
            "arista_mlag_local_inf_status",
            "Contains MLAG local inf status",
            ["status"],
            registry=registry,
        )
        self.failover_gauge = Gauge(
            "arista_mlag_failover",
            "Contains MLAG failover",
            ["cause"],
            registry=registry,
        )
        self.port_gauge = Gauge(
            "arista_mlag_ports",
            "Contains MLAG port information by state",
            ["state"],
            registry=registry,
        )
        for port_state in PORT_STATES:
            self.port_gauge.labels(port_state)

    def _emit(self, logger):
        mlag = self.state
        detail = mlag.detail

        self.detail_gauge.labels(detail.mlag_state, detail.peer_mlag_state).set(1)
        set_health(self.state_gauge, mlag.state, "active")
        self.state_changes_gauge.set(detail.state_changes)
        self.last_state_change_gauge.set(detail.last_state_change_time)

        set_health(self.config_sanity_gauge, mlag.config_sanity, "consistent")
        set_health(self.neg_status_gauge, mlag.neg_status, "connected")
        set_health(self.peer_link_gauge, mlag.peer_link_status, "up")
        set_health(self.local_inf_status_gauge, mlag.local_intf_status, "up")

        if detail.failover:
            causes = ",".join(detail.failover_cause_list)
            logger.warning("MLAG failover, cause: %s", causes or "unknown")
            self.failover_gauge.labels(causes).set(1)
        else:
            self.failover_gauge.labels("").set(0)

        counts = mlag.ports
        for port_state, value in zip(PORT_STATES, (
                counts.disabled,
                counts.configured,
                counts.inactive,
                counts.active_partial,
                counts.active_full)):
            self.port_gauge.labels(port_state).set(value)
