"""Circulation Desk - Core Application Package

This package contains the core application modules including:
- Data models (book.py, member.py)
- Record stores (catalog.py, directory.py)
- Issue/return logic (lending.py)
- Audit trail (activity_log.py)
- CLI interface (cli.py)
"""

__version__ = "1.0.0"
