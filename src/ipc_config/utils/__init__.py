"""Shared utilities for ipc_config."""
