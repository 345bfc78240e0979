"""Shared data model primitives."""

from content_warnings.data_model.base import StrictBaseModel


__all__ = ["StrictBaseModel"]
