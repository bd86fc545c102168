"""
Application use cases
"""
