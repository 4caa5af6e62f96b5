# tests/__init__.py
"""
pyax25_netstat Test Package

Shared fixtures live in conftest.py.

License: LGPLv3.0
Copyright (C) 2025-2026 Kris Kirby, KE4AHR
"""
