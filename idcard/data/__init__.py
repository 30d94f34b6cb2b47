"""Bundled GB/T 2260 division data (sample subset, includes abolished codes)."""
