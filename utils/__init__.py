"""
utils/ - Shared helpers (logging, entity lookups).
"""
