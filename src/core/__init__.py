"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the radix converter:
symbol systems, the internal limb arithmetic and configuration contracts.
"""
