"""Kernel – constraint model and error hierarchy."""
