# -*- coding: utf-8 -*-
"""
__init__

Command line tooling for notestore.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .entrypoint import NoteStoreCLI, cli

__all__ = ["NoteStoreCLI", "cli"]

# The End
