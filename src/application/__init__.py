"""
Application layer: ports, use cases and session state
"""
