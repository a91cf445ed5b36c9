"""Test fixtures for SPWorlds client tests."""

from .fake_spworlds_api import FakeSPWorldsAPI

__all__ = ["FakeSPWorldsAPI"]
