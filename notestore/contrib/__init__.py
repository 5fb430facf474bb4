# -*- coding: utf-8 -*-
"""
__init__

Optional integrations shipped with NoteStore.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
