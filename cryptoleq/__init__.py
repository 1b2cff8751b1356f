"""Paillier-style integer encryption with big-number, inversion, factoring, cell and processor helpers."""

__version__ = "0.1.0"