"""Wheat & Stone: бэкенд сайта."""

__version__ = "1.0.0"
