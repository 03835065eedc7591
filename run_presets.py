#!/usr/bin/env python3
"""
🎯 Preset Stress Test Scenarios
================================
Static scenario lists, each a sequence of (concurrency, payload KB) steps.
Every step is applied to every configured endpoint, in declaration order.

Select one with the STRESS_PRESET environment variable. Run this module
directly to list the presets.

Usage:
    python run_presets.py
    STRESS_PRESET=heavy python stress_test.py
"""

from typing import List, Tuple

from rich.console import Console

from stress_config import ConfigError

console = Console()

# =============================================================================
# PRESET CONFIGURATIONS
# =============================================================================

PRESETS = {
    "academic": {
        "name": "🎓 Academic Showcase",
        "description": "10, 100 and 500 concurrent users with a 0.1 KB body",
        "steps": [
            {"concurrency": 10, "payload_kb": 0.1},
            {"concurrency": 100, "payload_kb": 0.1},
            {"concurrency": 500, "payload_kb": 0.1},
        ],
    },
    "gentle": {
        "name": "🌱 Gentle Warmup",
        "description": "Light load to verify the API is responding",
        "steps": [
            {"concurrency": 1, "payload_kb": 0},
            {"concurrency": 10, "payload_kb": 0},
        ],
    },
    "heavy": {
        "name": "🏋️ Heavy Load",
        "description": "Climb to 2000 simultaneous requests",
        "steps": [
            {"concurrency": 250, "payload_kb": 0.1},
            {"concurrency": 1000, "payload_kb": 0.1},
            {"concurrency": 2000, "payload_kb": 0.1},
        ],
    },
    "payload-sweep": {
        "name": "📦 Payload Sweep",
        "description": "Fixed 50 users, body grows from 1 KB to 64 KB",
        "steps": [
            {"concurrency": 50, "payload_kb": 1},
            {"concurrency": 50, "payload_kb": 8},
            {"concurrency": 50, "payload_kb": 64},
        ],
    },
    "empty-body": {
        "name": "🪶 Empty Body",
        "description": "Requests without a body at rising concurrency",
        "steps": [
            {"concurrency": 10, "payload_kb": 0},
            {"concurrency": 100, "payload_kb": 0},
            {"concurrency": 500, "payload_kb": 0},
        ],
    },
}


def preset_steps(name: str) -> List[Tuple[int, float]]:
    """(concurrency, payload_kb) pairs of a preset, in order."""
    if name not in PRESETS:
        raise ConfigError(
            f"Unknown STRESS_PRESET {name!r}, choose from {', '.join(PRESETS)}"
        )
    return [(s["concurrency"], s["payload_kb"]) for s in PRESETS[name]["steps"]]


def print_presets():
    """Print all available presets."""
    console.print("\n[bold]Available Presets:[/bold]\n")
    for key, preset in PRESETS.items():
        steps = ", ".join(
            f"{s['concurrency']}@{s['payload_kb']}KB" for s in preset["steps"]
        )
        console.print(f"  [bold cyan]{key:<15}[/bold cyan] {preset['name']} - {preset['description']}")
        console.print(f"  [dim]{'':<15} {steps}[/dim]")
    console.print("")


if __name__ == "__main__":
    print_presets()
