"""
Result persistence and console reporting.

CsvResultStore appends one row per finished scenario to a CSV file, writing
the header only when the file does not exist yet. ConsoleReporter prints the
banners, one line per scenario and a closing summary table with rich.
"""

import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from stress_config import StressConfig

CSV_HEADER = ["API", "Users", "PayloadKB", "Throughput", "AvgLatency", "MaxLatency", "ErrorRate"]


class CsvResultStore:
    """Append-only CSV file of scenario results."""

    def __init__(self, path):
        self.path = Path(path)

    def append(self, result) -> None:
        write_header = not self.path.exists()
        with self.path.open("a", newline="") as f:
            writer = csv.writer(f)
            if write_header:
                writer.writerow(CSV_HEADER)
            writer.writerow(result.csv_row())


def write_json_summary(results: Sequence, output_path, config: StressConfig) -> str:
    """Write every scenario result of the run as one JSON document."""
    report = {
        "test_name": "API Stress Test",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "target_url": config.base_url,
        "method": config.method,
        "preset": config.preset,
        "results": [r.to_dict() for r in results],
    }

    json_str = json.dumps(report, indent=2)
    Path(output_path).write_text(json_str)
    return json_str


class ConsoleReporter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def started(self, config: StressConfig, scenarios: Sequence) -> None:
        endpoints = "\n".join(
            f"  {e.api_name}: {config.base_url}{e.path}" for e in config.endpoints
        )
        self.console.print(Panel(
            f"[bold blue]Starting API stress tests...[/bold blue]\n"
            f"Method: {config.method} | Preset: {config.preset} | Scenarios: {len(scenarios)}\n"
            f"{endpoints}",
            title="🚀 Starting Test",
        ))

    def scenario_completed(self, result) -> None:
        color = "green" if result.error_rate == 0 else "yellow" if result.error_rate < 100 else "red"
        self.console.print(
            f"[bold]{result.api_name}[/bold] users={result.concurrency} "
            f"payload={result.payload_kb:g}KB | "
            f"throughput={result.throughput:.2f} req/s | "
            f"avg={result.avg_latency_ms:.2f}ms max={result.max_latency_ms:.2f}ms | "
            f"[{color}]errors={result.error_rate:.2f}%[/{color}]"
        )

    def summary_table(self, results: Sequence) -> Table:
        table = Table(title="📊 Scenario Results", expand=True)
        table.add_column("API", style="cyan")
        table.add_column("Users", justify="right")
        table.add_column("Payload KB", justify="right")
        table.add_column("Throughput (req/s)", justify="right", style="green")
        table.add_column("Avg Latency (ms)", justify="right")
        table.add_column("Max Latency (ms)", justify="right")
        table.add_column("Error Rate", justify="right")

        for r in results:
            color = "green" if r.error_rate == 0 else "yellow" if r.error_rate < 100 else "red"
            table.add_row(
                r.api_name,
                f"{r.concurrency:,}",
                f"{r.payload_kb:g}",
                f"{r.throughput:,.2f}",
                f"{r.avg_latency_ms:.2f}",
                f"{r.max_latency_ms:.2f}",
                f"[{color}]{r.error_rate:.2f}%[/{color}]",
            )
        return table

    def finished(self, results: Sequence, config: StressConfig) -> None:
        if results:
            self.console.print(self.summary_table(results))
        saved = config.results_file
        if config.results_json:
            saved += f" and {config.results_json}"
        self.console.print(f"[green]Done. Results saved to {saved}[/green]")
