"""
services/ - Business Logic Layer
================================
Services sit between callers and the repositories.
"""
