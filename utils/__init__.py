"""
utils/ - Shared Helpers
=======================
Cross-cutting helpers (logging) used by every layer.
"""
