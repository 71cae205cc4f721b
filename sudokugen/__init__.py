# -*- coding: utf-8 -*-
"""Terminal Sudoku puzzle generator and guess checker."""

__version__ = "0.1.0"
