from __future__ import annotations

from dataclasses import dataclass
import os

_FALSE_VALUES = frozenset({"0", "false", "off", "no", ""})


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a DIS8086_* switch; unset means `default`."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().casefold() not in _FALSE_VALUES


@dataclass(frozen=True)
class DisasmConfig:
    trace: bool
    strict: bool
    header: bool


def load_config() -> DisasmConfig:
    return DisasmConfig(
        trace=_env_flag("DIS8086_TRACE", default=False),
        strict=_env_flag("DIS8086_STRICT", default=True),
        header=_env_flag("DIS8086_HEADER", default=True),
    )


__all__ = ["DisasmConfig", "load_config"]
