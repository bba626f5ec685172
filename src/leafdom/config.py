"""Runtime settings for rendering and logging, built by the CLI from its options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LeafdomConfig:
    indent: str = "  "  # per nesting level in pretty output
    log_level: str = "WARNING"
