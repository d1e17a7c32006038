"""Errors, constants and configuration shared by every waypath module."""
