"""Power supply state from 'show system environment power'."""
from typing import Dict

from prometheus_client import Gauge

from probers.base import DeviceState, Prober
from probers.utils import set_health


class PowerSupply(DeviceState):
    state: str = ""


class PowerState(DeviceState):
    power_supplies: Dict[str, PowerSupply]


class PowerProber(Prober):
    """One gauge per power supply, 1 if the supply reports 'ok'."""

    name = "power"
    command = "show system environment power"
    schema = PowerState

    def _register(self, registry):
        self.power_gauge = Gauge(
            "arista_power_supply_state",
            "Contains Power Supply state",
            ["powerSupply", "state"],
            registry=registry,
        )

    def _emit(self, logger):
        # anything but "ok" (e.g. "powerLoss", "failed") is reported as 0
        for supply_id, supply in self.state.power_supplies.items():
            logger.debug("Power supply %s: %s", supply_id, supply.state)
            set_health(self.power_gauge, supply.state, "ok", supply_id)
