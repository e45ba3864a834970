"""Small terminal programs: number guessing, calculator, tic-tac-toe, to-do list and library manager."""

__version__ = "0.1.0"