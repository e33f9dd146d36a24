"""Testing utilities for lazydirtree consumers."""

from .fixtures import FakeVolumeStore, build_sample_store

__all__ = ['FakeVolumeStore', 'build_sample_store']
