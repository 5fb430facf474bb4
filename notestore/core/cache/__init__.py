# -*- coding: utf-8 -*-
"""
__init__

On-device key/value storage backends.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .sqlite_kv import SQLiteKeyValueStore

__all__ = ["SQLiteKeyValueStore"]

# The End
