"""
Startup configuration for the stress test runner.

Values come from the process environment, with a `.env` file in the working
directory loaded first (variables already set in the environment win).

    BASE_URL         target base URL (required)
    ENDPOINT_1..N    endpoint paths, at least two required
    STRESS_METHOD    HTTP method for every scenario (default POST)
    STRESS_PRESET    scenario preset name (default academic)
    STRESS_TIMEOUT   transport timeout in seconds (default 30)
    RESULTS_FILE     CSV output path (default results.csv)
    RESULTS_JSON     optional JSON summary path
"""

import math
import os
from dataclasses import dataclass
from typing import Optional, Tuple, Mapping

from dotenv import load_dotenv, find_dotenv

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")
DEFAULT_PRESET = "academic"
MIN_ENDPOINTS = 2


class StressTestError(Exception):
    """Base class for stress test errors."""


class ConfigError(StressTestError):
    """Missing or invalid startup configuration."""


@dataclass(frozen=True)
class Endpoint:
    api_name: str
    path: str


@dataclass(frozen=True)
class StressConfig:
    base_url: str
    endpoints: Tuple[Endpoint, ...]
    method: str = "POST"
    preset: str = DEFAULT_PRESET
    timeout: float = 30.0
    results_file: str = "results.csv"
    results_json: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StressConfig":
        """
        Build the config from `environ` (defaults to os.environ after loading
        `.env`). Raises ConfigError on any missing or invalid value.
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        base_url = _required(environ, "BASE_URL")

        endpoints = []
        index = 1
        while True:
            path = environ.get(f"ENDPOINT_{index}", "").strip()
            if not path:
                break
            endpoints.append(Endpoint(api_name=f"API_Endpoint{index}", path=path))
            index += 1
        if len(endpoints) < MIN_ENDPOINTS:
            missing = f"ENDPOINT_{len(endpoints) + 1}"
            raise ConfigError(
                f"{missing} is not set: at least {MIN_ENDPOINTS} endpoints are required"
            )

        method = environ.get("STRESS_METHOD", "POST").strip().upper() or "POST"
        if method not in SUPPORTED_METHODS:
            raise ConfigError(
                f"STRESS_METHOD must be one of {', '.join(SUPPORTED_METHODS)}, got {method!r}"
            )

        # Checked against the preset table by run_presets.preset_steps
        preset = environ.get("STRESS_PRESET", DEFAULT_PRESET).strip() or DEFAULT_PRESET

        raw_timeout = environ.get("STRESS_TIMEOUT", "30").strip() or "30"
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"STRESS_TIMEOUT must be a number, got {raw_timeout!r}") from None
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(f"STRESS_TIMEOUT must be a positive finite number, got {raw_timeout!r}")

        return cls(
            base_url=base_url,
            endpoints=tuple(endpoints),
            method=method,
            preset=preset,
            timeout=timeout,
            results_file=environ.get("RESULTS_FILE", "").strip() or "results.csv",
            results_json=environ.get("RESULTS_JSON", "").strip() or None,
        )


def _required(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise ConfigError(f"{name} is not set")
    return value
