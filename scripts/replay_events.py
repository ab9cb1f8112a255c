#!/usr/bin/env python3
"""Replay a recorded event log through a session store.

Each line of the input is one JSON event, e.g.::

    {"type": "windowOpened", "window": "root", "initialURL": "itch://library"}
    {"type": "openTab", "window": "root", "tab": "t1", "url": "itch://games/3"}

Usage
-----
    python scripts/replay_events.py events.jsonl
    python scripts/replay_events.py events.jsonl --snapshot root
    python scripts/replay_events.py events.jsonl --skip-invalid -v
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pytabstate import EventValidationError, SessionConfig, SessionStore


def _dump_state(store: SessionStore) -> dict[str, Any]:
    return {window: state.model_dump(by_alias=True, mode="json") for window, state in store.state.items()}


def replay(lines: list[str], *, store: SessionStore, skip_invalid: bool) -> int:
    """Apply every event in *lines*; return the number applied."""
    applied = 0
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            store.apply(json.loads(line))
        except (json.JSONDecodeError, EventValidationError) as exc:
            if not skip_invalid:
                raise SystemExit(f"line {lineno}: {exc}") from exc
            print(f"line {lineno}: skipped ({exc})", file=sys.stderr)
            continue
        applied += 1
    return applied


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay a JSON-lines session event log.")
    parser.add_argument("events", help="Event log file (one JSON event per line)")
    parser.add_argument("--snapshot", metavar="WINDOW", help="Print the persistable snapshot of WINDOW instead")
    parser.add_argument("--skip-invalid", action="store_true", help="Skip malformed lines instead of aborting")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    store = SessionStore(SessionConfig.from_env())
    lines = Path(args.events).read_text(encoding="utf-8").splitlines()
    applied = replay(lines, store=store, skip_invalid=args.skip_invalid)

    result: Any = store.snapshot(args.snapshot) if args.snapshot else _dump_state(store)
    text = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)
    print(f"{applied} events applied", file=sys.stderr)


if __name__ == "__main__":
    main()
