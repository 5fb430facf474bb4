# -*- coding: utf-8 -*-
"""
__init__

HTTP surface of the note store.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .items import ItemsAPI

__all__ = ["ItemsAPI"]

# The End
