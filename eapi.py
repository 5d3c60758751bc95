"""
Minimal Arista eAPI client.

Commands are sent as a single JSON-RPC ``runCmds`` request to the
``/command-api`` endpoint of the switch, so any number of commands costs one
round trip.
"""
import logging
import os
import time
import uuid

import requests

from errors import CommandError, DeviceConnectionError

DEFAULT_PORTS = {"http": 80, "https": 443}
WILDCARD_TARGET = "*"


def _env_name(target, suffix):
    return target.replace("-", "_").replace(".", "_").upper() + "_" + suffix


class EapiClient:
    """Builds eAPI connections from the ``targets`` section of the config."""

    def __init__(self, config):
        self._targets = config.get("targets") or {}
        self._timeout = int(os.getenv("TIMEOUT", config.get("timeout", 10)))

    def get_profile(self, target):
        """Return the connection profile of a target, falling back to the wildcard."""
        profile = self._targets.get(target)
        if profile is None:
            profile = self._targets.get(WILDCARD_TARGET)
        if profile is None:
            return None

        profile = dict(profile)
        profile.setdefault("host", target)
        profile["username"] = os.getenv(_env_name(target, "USERNAME"), profile.get("username"))
        profile["password"] = os.getenv(_env_name(target, "PASSWORD"), profile.get("password"))
        return profile

    def connect(self, target):
        """Return a connection to the target."""
        profile = self.get_profile(target)
        if profile is None:
            logging.error("Target %s: No connection profile found in config!", target)
            raise DeviceConnectionError(target, "no connection profile")

        transport = profile.get("transport", "https")
        if transport not in DEFAULT_PORTS:
            logging.error("Target %s: Unsupported transport %s", target, transport)
            raise DeviceConnectionError(target, f"unsupported transport {transport}")

        if not profile.get("username"):
            logging.error("Target %s: No user found in environment and config file", target)
            raise DeviceConnectionError(target, "no credentials")

        return EapiConnection(
            target,
            host=profile["host"],
            port=profile.get("port", DEFAULT_PORTS[transport]),
            transport=transport,
            usr=profile["username"],
            pwd=profile.get("password") or "",
            enable_pwd=profile.get("enablepwd"),
            verify=profile.get("verify_ssl", False),
            timeout=self._timeout,
        )


class EapiConnection:
    """An eAPI session with one switch."""

    def __enter__(self):
        return self

    def __init__(self, target, host, port, transport, usr, pwd,
                 enable_pwd=None, verify=False, timeout=10):
        self.target = target
        self.host = host
        self.url = f"{transport}://{host}:{port}/command-api"
        self._enable_pwd = enable_pwd
        self._timeout = timeout

        self._session = requests.Session()
        self._session.auth = (usr, pwd)
        self._session.verify = verify
        self._session.headers.update({"content-type": "application/json"})

    def _enable_command(self):
        if self._enable_pwd:
            return {"cmd": "enable", "input": self._enable_pwd}
        return "enable"

    def run_commands(self, commands):
        """
        Run the commands in one request and return one result per command.

        ``enable`` is prepended to the batch and its result dropped, the
        returned list is aligned with ``commands``.
        """
        payload = {
            "jsonrpc": "2.0",
            "method": "runCmds",
            "params": {
                "version": 1,
                "cmds": [self._enable_command()] + list(commands),
                "format": "json",
            },
            "id": str(uuid.uuid4()),
        }

        logging.debug("Target %s: Running %s on %s", self.target, commands, self.url)
        request_start = time.time()

        try:
            req = self._session.post(self.url, json=payload, timeout=self._timeout)
            req.raise_for_status()

        except requests.exceptions.HTTPError as err:
            if err.response is not None and err.response.status_code == 401:
                logging.error(
                    "Target %s: Authorization Error: user/password set wrong on server %s: %s",
                    self.target, self.host, err
                )
                raise DeviceConnectionError(self.target, "authorization failed") from err

            logging.error("Target %s: HTTP Error on server %s: %s", self.target, self.host, err)
            raise CommandError(f"HTTP error from {self.host}: {err}") from err

        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as err:
            logging.error("Target %s: Unable to connect to %s: %s", self.target, self.host, err)
            raise DeviceConnectionError(self.target, str(err)) from err

        except requests.exceptions.RequestException as err:
            logging.error("Target %s: Unexpected error: %s", self.target, err)
            raise CommandError(f"Request to {self.host} failed: {err}") from err

        logging.debug(
            "Target %s: Request duration: %s", self.target, round(time.time() - request_start, 2)
        )

        try:
            response = req.json()
        except requests.JSONDecodeError as err:
            logging.error("Target %s: No json data received from %s", self.target, self.host)
            raise CommandError(f"Invalid JSON from {self.host}") from err

        return self._parse_response(response, commands)

    def _parse_response(self, response, commands):
        if not isinstance(response, dict):
            raise CommandError(f"Malformed eAPI response from {self.host}")

        if "error" in response:
            error = response["error"] or {}
            message = error.get("message", "unknown error")
            # data holds one entry per command, the failing one carries 'errors'
            for item in error.get("data") or []:
                if isinstance(item, dict) and item.get("errors"):
                    message = f"{message}: {'; '.join(item['errors'])}"
                    break
            logging.error(
                "Target %s: eAPI error %s: %s", self.target, error.get("code"), message
            )
            raise CommandError(f"eAPI error {error.get('code')}: {message}")

        results = response.get("result")
        if not isinstance(results, list) or len(results) != len(commands) + 1:
            logging.error("Target %s: Unexpected number of results from %s", self.target, self.host)
            raise CommandError(f"Malformed eAPI response from {self.host}")

        return results[1:]

    def close(self):
        """Close the HTTP session."""
        logging.debug("Target %s: Closing eAPI session.", self.target)
        self._session.close()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
