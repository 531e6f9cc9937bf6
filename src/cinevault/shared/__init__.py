"""Shared building blocks: errors, logging, constants and TMDb models."""
