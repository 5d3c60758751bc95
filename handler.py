"""
This module contains the handler classes for the Falcon web server.
"""

import logging
import time

import falcon

from prometheus_client import Counter, Histogram, REGISTRY
from prometheus_client.exposition import CONTENT_TYPE_LATEST
from prometheus_client.exposition import generate_latest

from collector import serve
from errors import ClientError, ExporterError
from probers.registry import parse_module_param

SCRAPES = Counter(
    "arista_exporter_scrapes",
    "Number of /arista scrapes by result",
    ["result"],
)
SCRAPE_DURATION = Histogram(
    "arista_exporter_scrape_duration_seconds",
    "Duration of /arista scrapes",
)

# pylint: disable=no-member

class WelcomePage:
    """
    Create the Welcome page for the API.
    """

    def on_get(self, req, resp):
        """
        Define the GET method for the API.
        """

        resp.status = falcon.HTTP_200
        resp.content_type = 'text/html'
        resp.text = """
        <html>
        <head><title>Arista Exporter</title></head>
        <body>
        <h1>Arista Exporter</h1>
        <h2>Prometheus Exporter for Arista switches using eAPI</h2>
        <ul>
            <li><strong>Arista Metrics:</strong> Use <a href="/arista">/arista</a>?target=&lt;switch&gt;&amp;module=power,mlag,portchannel,redundancy,switchover</li>
            <li><strong>Exporter Metrics:</strong> Use <a href="/metrics">/metrics</a> for metrics of the exporter itself.</li>
        </ul>
        </body>
        </html>
        """

class ProbeHandler:
    """
    Probe Handler for the Falcon API.
    """

    def __init__(self, client):
        self._client = client

    def on_get(self, req, resp):
        """
        Define the GET method for the API.
        """
        target = req.get_param("target")
        modules = parse_module_param(req.get_param("module"))

        logging.debug("Received Target %s with modules %s", target, modules)

        start_time = time.time()
        try:
            body = serve(self._client, target, modules)

        except ExporterError as err:
            if isinstance(err, ClientError):
                logging.warning("Target %s: Bad request for modules %s: %s", target, modules, err)
                SCRAPES.labels("client_error").inc()
            else:
                logging.error("Target %s: Scrape of modules %s failed: %s", target, modules, err)
                SCRAPES.labels("error").inc()

            raise falcon.HTTPError(
                falcon.code_to_http_status(err.status_code), description=str(err)
            ) from err

        SCRAPES.labels("success").inc()
        SCRAPE_DURATION.observe(time.time() - start_time)

        resp.status = falcon.HTTP_200
        resp.content_type = CONTENT_TYPE_LATEST
        resp.data = body

class ExporterMetricsHandler:
    """
    Metrics of the exporter process itself.
    """

    def on_get(self, req, resp):
        """
        Define the GET method for the API.
        """
        resp.status = falcon.HTTP_200
        resp.content_type = CONTENT_TYPE_LATEST
        resp.data = generate_latest(REGISTRY)
