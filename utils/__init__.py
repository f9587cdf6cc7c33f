"""
utils/ - Shared Helpers
=======================
Cross-cutting helpers with no dependencies on the data layer.
"""
