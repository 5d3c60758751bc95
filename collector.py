"""Scrape orchestration: one target, one batched eAPI call, one fresh registry."""
import logging
import time

from prometheus_client import CollectorRegistry
from prometheus_client.exposition import generate_latest

from errors import DuplicateModuleError, MissingTargetError
from probers.registry import parse_module_param, resolve_modules


class TargetLoggerAdapter(logging.LoggerAdapter):
    """Prefix every message with the scraped target."""

    def process(self, msg, kwargs):
        return f"Target {self.extra['target']}: {msg}", kwargs


class AristaMetricsCollector:
    """
    Collects the requested modules from one Arista switch.

    Every call to ``collect`` works on fresh prober instances and a fresh
    ``CollectorRegistry``, nothing is shared between scrapes.
    """

    def __enter__(self):
        return self

    def __init__(self, client, target, modules=None):
        if not target:
            raise MissingTargetError()

        self.target = target
        self.modules = modules or parse_module_param(None)
        self.logger = TargetLoggerAdapter(logging.getLogger(__name__), {"target": target})

        self._client = client
        self._connection = None
        self._start_time = time.time()

        # unknown module names fail the request before the switch is contacted
        self.probers = resolve_modules(self.modules)

    def collect(self):
        """Query the switch once and return a registry holding all module metrics."""
        logging.info("Target %s: Collecting modules %s", self.target, ",".join(self.modules))

        self._connection = self._client.connect(self.target)

        registry = CollectorRegistry()
        commands = []
        for prober in self.probers:
            try:
                prober.register(registry)
            except ValueError as err:
                raise DuplicateModuleError(prober.name) from err
            commands.append(prober.get_command())

        results = self._connection.run_commands(commands)

        for prober, result in zip(self.probers, results):
            prober.decode(result)

        for prober in self.probers:
            prober.emit(self.logger)

        logging.info(
            "Target %s: scrape duration: %s seconds",
            self.target, round(time.time() - self._start_time, 2)
        )
        return registry

    def render(self):
        """Collect and render in the Prometheus text format."""
        return generate_latest(self.collect())

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._connection is not None:
            self._connection.close()


def serve(client, target, modules=None):
    """Scrape the target and return the rendered metrics."""
    with AristaMetricsCollector(client, target, modules) as collector:
        return collector.render()
