"""
Infrastructure adapters
"""
