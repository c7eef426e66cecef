"""
Core domain types, checked arithmetic, and boundary contracts.

This module contains the fixed-width unsigned arithmetic layer, independent
of any host execution environment.
"""
