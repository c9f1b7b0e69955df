"""HTTP API layer for Adaptogen.

This module provides FastAPI integration for the registry.
It's an optional component that requires the 'http' extra to be installed:

    pip install adaptogen[http]
"""
