"""
The closed set of probers the exporter knows about.

Module names are matched exactly. Resolution of a list is all or nothing: the
first unknown name fails the whole request.
"""
from errors import UnknownModuleError
from probers.mlag_prober import MLAGProber
from probers.portchannel_prober import PortChannelProber
from probers.power_prober import PowerProber
from probers.redundancy_prober import RedundancyProber
from probers.switchover_prober import SwitchoverProber

DEFAULT_MODULE = "power"

PROBERS = {
    "power": PowerProber,
    "mlag": MLAGProber,
    "portchannel": PortChannelProber,
    "redundancy": RedundancyProber,
    "switchover": SwitchoverProber,
}


def resolve(name):
    """Return a fresh prober for the module name."""
    try:
        prober_class = PROBERS[name]
    except KeyError:
        raise UnknownModuleError(name) from None

    return prober_class()


def resolve_modules(names):
    """Return fresh probers for all module names, in the given order."""
    return [resolve(name) for name in names]


def parse_module_param(value):
    """Split the comma separated module parameter, defaulting to power."""
    if not value or not value.strip():
        return [DEFAULT_MODULE]

    return [name.strip() for name in value.split(",")]
