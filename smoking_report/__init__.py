"""Smoking status and medical insurance charges report."""

__version__ = "0.1.0"
