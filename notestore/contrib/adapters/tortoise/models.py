# -*- coding: utf-8 -*-
"""
models

Tortoise ORM model mapping the shared folders-and-notes table.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from tortoise import fields
from tortoise.models import Model


class ItemRecord(Model):
    """Row of the flat ``notes`` table holding both folders and notes."""

    id = fields.CharField(pk=True, max_length=64)
    title = fields.TextField(default="")
    content = fields.TextField(null=True)
    parent_id = fields.CharField(max_length=64, null=True, index=True)
    type = fields.CharField(max_length=16)
    created_at = fields.CharField(max_length=40, index=True)
    updated_at = fields.CharField(max_length=40)
    icon = fields.CharField(max_length=64, null=True)

    class Meta:
        table = "notes"


__all__ = ["ItemRecord"]


# The End
