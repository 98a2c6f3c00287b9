"""
Core value objects, collection helpers, and contracts.

This module contains small language-extension building blocks that are
independent of any concrete container type or external system.
"""
