"""Retro arcade: snake, shooter, bounce and block puzzle simulations."""
