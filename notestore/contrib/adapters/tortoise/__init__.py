# -*- coding: utf-8 -*-
"""
__init__

Tortoise ORM remote adapter package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .adapter import DATABASE_SCHEMES, TortoiseRemoteAdapter

__all__ = ["DATABASE_SCHEMES", "TortoiseRemoteAdapter"]

# The End
