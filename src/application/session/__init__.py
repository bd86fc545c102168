"""
Session state
"""
from .statement_session import StatementSession

__all__ = ['StatementSession']
