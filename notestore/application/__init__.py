# -*- coding: utf-8 -*-
"""
__init__

Application factories.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .factory import ApplicationFactory, create_app

__all__ = ["ApplicationFactory", "create_app"]

# The End
