"""Puzzle solutions, one module per day."""