"""
Domain enumerations
"""
from .intent import Intent

__all__ = ['Intent']
