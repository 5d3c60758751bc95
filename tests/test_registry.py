"""Tests for module name resolution."""
import pytest

from errors import UnknownModuleError
from probers.mlag_prober import MLAGProber
from probers.portchannel_prober import PortChannelProber
from probers.power_prober import PowerProber
from probers.redundancy_prober import RedundancyProber
from probers.registry import PROBERS, parse_module_param, resolve, resolve_modules
from probers.switchover_prober import SwitchoverProber


def test_known_modules():
    assert set(PROBERS) == {"power", "mlag", "portchannel", "redundancy", "switchover"}


def test_resolve_returns_fresh_instances():
    first = resolve("power")
    second = resolve("power")
    assert isinstance(first, PowerProber)
    assert first is not second


def test_resolve_keeps_order():
    probers = resolve_modules(["switchover", "mlag", "power", "redundancy", "portchannel"])
    assert [type(p) for p in probers] == [
        SwitchoverProber, MLAGProber, PowerProber, RedundancyProber, PortChannelProber,
    ]


@pytest.mark.parametrize("name", ["bogus", "Power", "MLAG", " power", "port-channel", ""])
def test_resolve_unknown(name):
    with pytest.raises(UnknownModuleError) as err:
        resolve(name)
    assert err.value.module == name


def test_unknown_name_fails_whole_list():
    with pytest.raises(UnknownModuleError) as err:
        resolve_modules(["power", "mlag", "bogus", "nope"])
    assert str(err.value) == 'Unknown module "bogus"'


@pytest.mark.parametrize("value", [None, "", "   "])
def test_default_module(value):
    assert parse_module_param(value) == ["power"]


def test_parse_module_param_splits_and_trims():
    assert parse_module_param("power, mlag ,portchannel") == ["power", "mlag", "portchannel"]


def test_parse_module_param_keeps_empty_entries():
    assert parse_module_param("power,") == ["power", ""]
