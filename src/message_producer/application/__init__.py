"""Application layer: the ports the CLI is written against."""

from __future__ import annotations

from .ports import LoadConfig, ProduceMessage, StartLogging

__all__ = ["LoadConfig", "ProduceMessage", "StartLogging"]
