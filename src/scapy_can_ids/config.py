"""Capability configuration.

The only option selects whether hex text rendering is compiled into the
package. It is read once from ``SCAPY_CAN_IDS_MODE`` when the package is first
imported; modules that render text consult :data:`SETTINGS` while their class
bodies are being defined, so flipping the variable afterwards has no effect.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .errors import ConfigurationError

__all__ = ["CapabilityMode", "ENV_VAR", "SETTINGS", "Settings", "load_settings"]

ENV_VAR = "SCAPY_CAN_IDS_MODE"


class CapabilityMode(str, Enum):
    """Enumerates the supported capability modes."""

    FULL = "full"
    CONSTRAINED = "constrained"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved capability settings."""

    mode: CapabilityMode = CapabilityMode.FULL

    @property
    def text_rendering(self) -> bool:
        """Return True when numeric values may be rendered as hex text."""

        return self.mode is CapabilityMode.FULL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from the process environment (or ``environ``)."""

    source = os.environ if environ is None else environ
    raw = source.get(ENV_VAR, CapabilityMode.FULL.value).strip().lower()
    try:
        mode = CapabilityMode(raw)
    except ValueError as exc:
        choices = ", ".join(m.value for m in CapabilityMode)
        raise ConfigurationError(f"{ENV_VAR} must be one of {choices}; got {raw!r}") from exc
    return Settings(mode=mode)


SETTINGS = load_settings()
