#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/utils/__init__.py
"""Utility modules for the docwriters package.

Escaping, list numbering, template loading, output writing and timing
helpers shared by the writers.
"""
