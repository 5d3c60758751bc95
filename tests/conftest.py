"""Shared pytest fixtures for the Arista exporter tests."""
import pytest
from prometheus_client import CollectorRegistry

from errors import DeviceConnectionError

POWER_OUTPUT = {
    "powerSupplies": {
        "1": {
            "modelName": "PWR-500AC-F",
            "capacity": 500.0,
            "dominant": False,
            "inputCurrent": 0.47,
            "outputCurrent": 7.875,
            "inputVoltage": 228.5,
            "outputPower": 94.5,
            "state": "ok",
            "uptime": 1706621400.12,
            "managed": True,
        },
        "2": {
            "modelName": "PWR-500AC-F",
            "capacity": 500.0,
            "state": "powerLoss",
        },
    },
}

MLAG_OUTPUT = {
    "domainId": "mlag1",
    "localInterface": "Vlan4094",
    "peerAddress": "10.255.255.2",
    "peerLink": "Port-Channel1000",
    "state": "active",
    "negStatus": "connected",
    "peerLinkStatus": "up",
    "localIntfStatus": "up",
    "configSanity": "consistent",
    "mlagPorts": {
        "Disabled": 0,
        "Configured": 0,
        "Inactive": 2,
        "Active-partial": 0,
        "Active-full": 12,
    },
    "detail": {
        "mlagState": "primary",
        "peerMlagState": "secondary",
        "stateChanges": 3,
        "lastStateChangeTime": 1706621400.5,
        "mlagHwReady": True,
        "failover": False,
        "failoverCauseList": [],
        "failoverInitiated": False,
        "secondaryFromFailover": False,
        "udpHeartbeatAlive": True,
    },
}

PORTCHANNEL_OUTPUT = {
    "portChannels": {
        "Port-Channel1": {
            "activePorts": {
                "Ethernet1": {"lacpMode": "active", "protocol": "lacp",
                              "timeBecameActive": 1706621400.0, "weight": 0},
                "Ethernet2": {"lacpMode": "active", "protocol": "lacp",
                              "timeBecameActive": 1706621400.0, "weight": 0},
            },
            "inactivePorts": {},
        },
        "Port-Channel2": {
            "activePorts": {
                "Ethernet3": {"lacpMode": "active", "protocol": "lacp"},
            },
            "inactivePorts": {
                "Ethernet4": {"timeBecameInactive": 1706621500.0,
                              "reasonUnconfigured": "waiting for LACP response"},
            },
        },
    },
}

REDUNDANCY_OUTPUT = {
    "slotId": 1,
    "myMode": "active",
    "peerMode": "standby",
    "unitDesc": "Primary",
    "communicationDesc": "Up",
    "peerState": "notInserted",
    "switchoverReady": True,
    "allAgentSsoReady": False,
    "lastRedundancyModeChangeTime": 1706621400.25,
    "lastRedundancyModeChangeReason": "Supervisor has control of the active supervisor lock",
}

SWITCHOVER_OUTPUT = {
    "switchoverCount": 2,
}

OUTPUTS = {
    "show system environment power": POWER_OUTPUT,
    "show mlag detail": MLAG_OUTPUT,
    "show port-channel detailed": PORTCHANNEL_OUTPUT,
    "show redundancy status": REDUNDANCY_OUTPUT,
    "show redundancy switchover sso": SWITCHOVER_OUTPUT,
}


class FakeConnection:
    """Answers every command from a dict of canned outputs."""

    def __init__(self, outputs, error=None):
        self.outputs = outputs
        self.error = error
        self.calls = []
        self.closed = False

    def run_commands(self, commands):
        self.calls.append(list(commands))
        if self.error is not None:
            raise self.error
        return [self.outputs[command] for command in commands]

    def close(self):
        self.closed = True


class FakeClient:
    """Stands in for EapiClient, optionally failing to connect."""

    def __init__(self, outputs=None, connect_error=False, run_error=None):
        self.connection = FakeConnection(OUTPUTS if outputs is None else outputs, run_error)
        self.connect_error = connect_error
        self.targets = []

    def connect(self, target):
        self.targets.append(target)
        if self.connect_error:
            raise DeviceConnectionError(target, "connection refused")
        return self.connection


@pytest.fixture
def registry():
    """A fresh, empty metrics registry."""
    return CollectorRegistry()


@pytest.fixture
def fake_client():
    """A device client returning the canned outputs for every module."""
    return FakeClient()
