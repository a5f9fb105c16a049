"""Common constants shared across wordflow."""

from __future__ import annotations

from .thresholds import (
    STYLE,
    TEMPLATE,
    PREVIEW,
    StyleThresholds,
    TemplateThresholds,
    PreviewThresholds,
)

__all__ = [
    "STYLE",
    "TEMPLATE",
    "PREVIEW",
    "StyleThresholds",
    "TemplateThresholds",
    "PreviewThresholds",
]
