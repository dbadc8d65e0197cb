"""
Core domain models, ranking and combinatorics, and error taxonomy.

This module contains the pure ranking-and-selection engine that is
independent of external systems (files, network, console).
"""
