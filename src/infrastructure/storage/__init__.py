"""
Statement store adapters
"""
