"""Orchestration: fingerprint once, then emit one symbol per page."""

from .orchestrator import Orchestrator, emit_set, output_name  # noqa: F401
