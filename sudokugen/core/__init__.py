# -*- coding: utf-8 -*-
"""Puzzle generation core"""
from sudokugen.utils.registry import Registry

FILL_STRATEGIES: Registry = Registry(
    "fill_strategies",
    default_mapping={
        "recursive": "sudokugen.core.fill.RecursiveFill",
        "iterative": "sudokugen.core.fill.IterativeFill",
    },
)

__all__ = ["FILL_STRATEGIES"]
