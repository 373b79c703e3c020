"""Shared cross-cutting helpers: telemetry, logging, id generation."""
