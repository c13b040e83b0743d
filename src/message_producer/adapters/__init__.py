"""Adapters: rich-click CLI, layered configuration, logging, in-memory fakes."""

from __future__ import annotations
