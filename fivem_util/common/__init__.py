"""Shared settings, constants, errors and logging for fivem-utility."""
