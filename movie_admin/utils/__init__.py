"""
Shared utilities package.

This package contains the logging setup used by the admin pages.
"""

from movie_admin.utils.logging_config import setup_logging, configure_ui_logging

__all__ = ['setup_logging', 'configure_ui_logging']
