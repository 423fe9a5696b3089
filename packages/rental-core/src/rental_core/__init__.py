"""Rental Hub core - catalog models, settings and service clients."""
