# -*- coding: utf-8 -*-
"""
__init__

PostgREST remote adapter package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .adapter import RestRemoteAdapter

__all__ = ["RestRemoteAdapter"]

# The End
