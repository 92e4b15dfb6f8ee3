"""
Synthetic user generation script for the user pipeline.

Implements deterministic pseudo-random generation of JSONPlaceholder-shaped
users and writes them as a JSON array. Serve the file with any static HTTP
server (e.g. ``python -m http.server``) and point ``SOURCE_URL`` at it to run
the pipeline offline or at a larger scale.
"""

from __future__ import annotations

import json
import random
import sys
import time
from pathlib import Path
from typing import Any

import typer

app = typer.Typer(help="Generate synthetic users as a JSON array.")

_FIRST_NAMES = ["Leanne", "Ervin", "Clementine", "Patricia", "Chelsey", "Dennis", "Kurtis", "Nicholas"]
_LAST_NAMES = ["Graham", "Howell", "Bauch", "Lebsack", "Dietrich", "Schulist", "Weissnat", "Runolfsdottir"]
_CITIES = ["Gwenborough", "Wisokyburgh", "McKenziehaven", "South Elvis", "Roscoeview", "Lebsackbury"]
_STREETS = ["Kulas Light", "Victor Plains", "Douglas Extension", "Hoeger Mall", "Skiles Walks"]
_TASK_FORCE_PHRASES = [
    "Multi-tiered zero tolerance task-force",
    "Task-force oriented solutions",
    "Proactive didactic TASK-FORCE",
    "Centralized empowering Task-Force",
]
_OTHER_PHRASES = [
    "Multi-layered client-server neural-net",
    "Proactive didactic contingency",
    "Face to face bifurcated interface",
    "Synchronised bottom-line interface",
    "Just another company",
]


def _generate_users(count: int, match_ratio: float, seed: int) -> list[dict[str, Any]]:
    rng = random.Random(seed)
    users: list[dict[str, Any]] = []
    for i in range(1, count + 1):
        first = rng.choice(_FIRST_NAMES)
        last = rng.choice(_LAST_NAMES)
        phrases = _TASK_FORCE_PHRASES if rng.random() < match_ratio else _OTHER_PHRASES
        users.append(
            {
                "id": i,
                "name": f"{first} {last}",
                "username": f"{first.lower()}{i}",
                "email": f"{first.lower()}.{last.lower()}{i}@example.com",
                "address": {
                    "street": rng.choice(_STREETS),
                    "suite": f"Suite {rng.randint(100, 999)}",
                    "city": rng.choice(_CITIES),
                    "zipcode": f"{rng.randint(10000, 99999)}-{rng.randint(1000, 9999)}",
                    "geo": {"lat": f"{rng.uniform(-90, 90):.4f}", "lng": f"{rng.uniform(-180, 180):.4f}"},
                },
                "phone": f"1-770-736-{rng.randint(1000, 9999)}",
                "website": f"{last.lower()}.example.org",
                "company": {
                    "name": f"{last}-{rng.choice(_LAST_NAMES)}",
                    "catchPhrase": rng.choice(phrases),
                    "bs": "harness real-time e-markets",
                },
            }
        )
    return users


def _write_json(path: Path, users: list[dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(users, f, indent=2)


@app.command()
def main(
    count: int = typer.Option(
        1_000,
        "--count",
        "-n",
        help="Number of users to generate.",
    ),
    match_ratio: float = typer.Option(
        0.25,
        "--match-ratio",
        "-m",
        min=0.0,
        max=1.0,
        help="Share of users whose catch phrase mentions task-force.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("users.json"),
        "--output",
        "-o",
        help="JSON output path.",
    ),
) -> None:
    """
    Generate synthetic users and write them as a JSON array.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {count:,} users -> {output} (match_ratio={match_ratio}, seed={seed})")
    users = _generate_users(count, match_ratio=match_ratio, seed=seed)
    _write_json(output, users)
    duration = time.perf_counter() - start
    typer.echo(f"Generation completed in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
