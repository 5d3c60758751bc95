"""
Arista eAPI Prometheus Exporter
"""
import argparse
import logging
import os
import warnings
import sys

from wsgiref.simple_server import make_server, WSGIServer, WSGIRequestHandler
from socketserver import ThreadingMixIn
import yaml

import falcon

from eapi import EapiClient
from handler import ExporterMetricsHandler
from handler import ProbeHandler
from handler import WelcomePage

__version__ = "0.1.0"

DEFAULT_PORT = 9465

class _SilentHandler(WSGIRequestHandler):
    """WSGI handler that does not log requests."""

    def log_message(self, format, *args): # pylint: disable=redefined-builtin
        """Log nothing."""


class ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    """Thread per request HTTP server."""

def create_app(config):
    """
    Create the Falcon API
    """
    api = falcon.App()
    api.add_route("/arista", ProbeHandler(EapiClient(config)))
    api.add_route("/metrics", ExporterMetricsHandler())
    api.add_route("/", WelcomePage())
    return api

def falcon_app(config):
    """
    Start the Falcon API
    """
    port = int(os.getenv("LISTEN_PORT", config.get("listen_port", DEFAULT_PORT)))
    addr = config.get("listen_address", "0.0.0.0")
    logging.info("Starting Arista Prometheus Server %s ...", __version__)

    api = create_app(config)

    with make_server(addr, port, api, ThreadingWSGIServer, handler_class=_SilentHandler) as httpd:
        httpd.daemon = True # pylint: disable=attribute-defined-outside-init
        logging.info("Listening on Port %s", port)
        try:
            httpd.serve_forever()
        except (KeyboardInterrupt, SystemExit):
            logging.info("Stopping Arista Prometheus Server")

def enable_logging(filename, debug):
    """enable logging"""
    logger = logging.getLogger()

    formatter = logging.Formatter(
        '%(asctime)-15s %(process)d %(filename)24s:%(lineno)-3d %(levelname)-7s %(message)s'
    )

    if debug:
        logger.setLevel("DEBUG")
    else:
        logger.setLevel("INFO")

    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    if filename:
        try:
            fh = logging.FileHandler(filename, mode='w')
        except FileNotFoundError as e:
            logging.error("Could not open logfile %s: %s", filename, e)
            sys.exit(1)

        fh.setFormatter(formatter)
        logger.addHandler(fh)

def load_config(filename):
    """Read the yaml config file, an empty file gives an empty config."""
    with open(filename, "r", encoding="utf8") as config_file:
        return yaml.safe_load(config_file.read()) or {}

def get_args(argv=None):
    """
    Get the command line arguments
    """
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "-c",
        "--config",
        help="Specify config yaml file",
        metavar="FILE",
        required=False,
        default="config.yml"
    )
    parser.add_argument(
        "-l",
        "--logging",
        help="Log all messages to a file",
        metavar="FILE",
        required=False
    )
    parser.add_argument(
        "-d", "--debug",
        help="Debugging mode",
        action="store_true",
        required=False
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(argv)


def main():
    """Entry point of the arista-exporter command."""
    call_args = get_args()

    warnings.filterwarnings("ignore")

    enable_logging(call_args.logging, call_args.debug)

    # get the config

    try:
        configuration = load_config(call_args.config)
    except FileNotFoundError as err:
        print(f"Config File not found: {err}")
        sys.exit(1)
    except yaml.YAMLError as err:
        print(f"Config File invalid: {err}")
        sys.exit(1)

    falcon_app(configuration)


if __name__ == "__main__":
    main()
