"""Configuration knobs shared by the shortest-path algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigError


@dataclass(frozen=True)
class AlgorithmConfig:
    """Options accepted through the ``config=`` keyword of algorithm entry points.

    Attributes:
        check_negative_weights: If ``True``, :func:`~adjgraph.shortest.dijkstra`
            rejects graphs with a negative edge weight up front. If ``False``
            the scan is skipped and results on such graphs are undefined.
        early_exit: If ``True``, Bellman-Ford stops relaxing after a pass that
            changes no distance.
        max_passes: Optional cap on Bellman-Ford relaxation passes. If the
            cap stops relaxation before ``n - 1`` passes and an edge still
            relaxes, Bellman-Ford raises
            :class:`~adjgraph.exceptions.AlgorithmError` instead of reporting
            a negative cycle.
    """

    check_negative_weights: bool = True
    early_exit: bool = True
    max_passes: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_passes is not None:
            if isinstance(self.max_passes, bool) or not isinstance(self.max_passes, int):
                raise ConfigError("max_passes must be an integer or None.")
            if self.max_passes <= 0:
                raise ConfigError("max_passes must be positive.")


DEFAULT_CONFIG = AlgorithmConfig()

__all__ = ["AlgorithmConfig", "DEFAULT_CONFIG"]
