"""Bundled translation resources.

This package contains JSON translation files named after the language
subtag (e.g., en.json, fr.json) that are accessed via importlib.resources.
Keeping this as a real package ensures the resources are discoverable both
locally and when installed.
"""
