"""
models/ - Domain Models
=======================
Plain dataclasses for the rows the repositories read and write.
Import them from their modules, e.g. `from models.user import User`.
"""
