"""
Core domain types for the Theatre Intel system.
"""
