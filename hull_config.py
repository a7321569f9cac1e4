from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

import yaml


class HullAlgorithm(str, Enum):
    GRAHAM_SCAN = 'graham_scan'
    MONOTONE_CHAIN = 'monotone_chain'
    JARVIS_MARCH = 'jarvis_march'
    CHAN = 'chan'

    @classmethod
    def parse(cls, value: HullAlgorithm | str) -> HullAlgorithm:
        try:
            return cls(value)
        except ValueError:
            names = ', '.join(a.value for a in cls)
            raise ValueError(f'Unknown hull algorithm {value!r}, expected one of: {names}') from None


@dataclass(frozen=True)
class HullConfig:
    # Graham scan has the lowest constant factor in practice,
    # even though Chan's algorithm has the better bound.
    algorithm: HullAlgorithm = HullAlgorithm.GRAHAM_SCAN

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> HullConfig:
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f'Hull config must be a mapping, got {type(data).__name__}')
        unknown = set(data) - {'algorithm'}
        if unknown:
            raise ValueError(f'Unknown hull config keys: {sorted(unknown)}')
        return cls(algorithm=HullAlgorithm.parse(data.get('algorithm', cls.algorithm)))


def load_config(path: str | Path | None = None) -> HullConfig:
    """
    Read a YAML hull config, falling back to defaults
    when no path is given or the file does not exist.
    """
    if path is None:
        return HullConfig()
    config_path = Path(path)
    if not config_path.exists():
        return HullConfig()
    return HullConfig.from_mapping(yaml.safe_load(config_path.read_text()))
