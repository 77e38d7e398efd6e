"""
Utilities Package
=================

Various utility functions and helpers.

Modules:
- response_helpers: Response formatting utilities
"""
