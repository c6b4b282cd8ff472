"""Weighted graphs from binary ID-pair files: components, shortest distances and spanning tree costs."""

__version__ = "0.1.0"