"""
Database helpers
"""
from zancommon.database.sql import Sql

__all__ = ['Sql']
