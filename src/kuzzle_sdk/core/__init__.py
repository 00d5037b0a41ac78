"""Kuzzle SDK core -- request/response types, errors and configuration."""
