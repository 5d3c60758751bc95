"""
Base classes shared by the Arista probers.

Every prober owns exactly one eAPI command, the pydantic schema its output is
decoded into, and the gauges the decoded state is mapped onto. A prober
instance lives for a single scrape of a single target.
"""
import logging

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from errors import DecodeError, ProberStateError


class DeviceState(BaseModel):
    """Decoded eAPI output. Keys are camelCase, unknown keys are ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        # a null behaves like an absent key, the declared default applies
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Prober:
    """
    Maps the output of one eAPI command onto a set of Prometheus gauges.

    Subclasses set ``name``, ``command`` and ``schema`` and implement
    ``_register`` and ``_emit``.
    """

    name = ""
    command = ""
    schema = DeviceState

    def __init__(self):
        self.state = None
        self._registered = False

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name!r}>"

    def get_command(self):
        """Return the eAPI command whose output this prober consumes."""
        return self.command

    def decode(self, result):
        """Validate one command result and keep it as the prober state."""
        try:
            self.state = self.schema.model_validate(result)
        except ValidationError as err:
            raise DecodeError(
                f"Unexpected output for '{self.command}': "
                f"{err.error_count()} validation error(s): {err.errors()[0]['msg']}"
            ) from err

        return self.state

    def register(self, registry):
        """Create all gauges of this prober in the given registry."""
        self._register(registry)
        self._registered = True

    def emit(self, logger=None):
        """Write the decoded state into the registered gauges."""
        if not self._registered:
            raise ProberStateError(f"{self.name}: emit called before register")
        if self.state is None:
            raise ProberStateError(f"{self.name}: emit called without device state")

        self._emit(logger or logging.getLogger(__name__))

    def _register(self, registry):
        raise NotImplementedError

    def _emit(self, logger):
        raise NotImplementedError
