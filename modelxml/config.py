from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class WriterConfig:
    preamble: bool = Defaults.PREAMBLE

    def __post_init__(self) -> None:
        if not isinstance(self.preamble, bool):
            raise ValueError(
                f"preamble must be a bool, got {type(self.preamble).__name__}"
            )

    @classmethod
    def from_env(cls) -> WriterConfig:
        raw_preamble = os.getenv(EnvVars.PREAMBLE)
        if raw_preamble is None or not raw_preamble.strip():
            return cls()
        return cls(preamble=_coerce_bool(raw_preamble, key=EnvVars.PREAMBLE))


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> WriterConfig:
        config = WriterConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: WriterConfig) -> WriterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        writer_section = _get_table(data, "writer")
        preamble = base_config.preamble
        if (value := writer_section.get("preamble")) is not None:
            preamble = _coerce_bool(value, key="writer.preamble")
        return WriterConfig(preamble=preamble)


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{key} must be 0 or 1 when given as int, got {value}")
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
        raise ValueError(f"{key} must be a boolean flag, got {value!r}")
    raise ValueError(f"{key} must be a bool or string, got {type(value).__name__}")
