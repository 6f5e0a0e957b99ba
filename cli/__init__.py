"""CLI package for Bookcase"""
from .main import cli

__all__ = ['cli']
