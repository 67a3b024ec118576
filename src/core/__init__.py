"""
Core digit engine, Natural numbers, domain models and contracts.

This module contains the foundational building blocks that are independent
of any outer surface (CLI, storage, network).
"""
