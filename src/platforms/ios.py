"""iOS project resolution."""

from __future__ import annotations

from typing import Any, Mapping

from platforms.models import IosConfig


def resolve_ios(config: Mapping[str, Any]) -> IosConfig:
    """Pass caller-supplied iOS fields through verbatim."""
    return IosConfig(fields=config)
