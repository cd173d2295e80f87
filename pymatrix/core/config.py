"""
Compute configuration for the blocked and parallel kernels.

Two knobs matter: the tile edge length used for cache blocking and the
number of worker threads used by the parallel kernels. Defaults come from
the environment (PYMATRIX_BLOCK_SIZE, PYMATRIX_NUM_WORKERS) and can be
replaced process-wide with set_config() or per call with keyword arguments.
"""

import os
from dataclasses import dataclass, replace

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_positive_int

DEFAULT_BLOCK_SIZE = 64

ENV_BLOCK_SIZE = 'PYMATRIX_BLOCK_SIZE'
ENV_NUM_WORKERS = 'PYMATRIX_NUM_WORKERS'


@dataclass(frozen=True)
class ComputeConfig:
    """
    Tuning parameters shared by blocked and parallel kernels.

    Attributes:
        block_size: Tile edge length for cache blocking
        num_workers: Maximum number of concurrent tasks in parallel kernels
    """
    block_size: int = DEFAULT_BLOCK_SIZE
    num_workers: int = os.cpu_count() or 1

    def __post_init__(self):
        check_positive_int(self.block_size, 'block_size')
        check_positive_int(self.num_workers, 'num_workers')


def _env_int(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValidationError(f"{var}: expected integer, got {raw!r}") from e


def config_from_env() -> ComputeConfig:
    """Build a ComputeConfig from environment variables, falling back to defaults."""
    base = ComputeConfig()
    return ComputeConfig(
        block_size=_env_int(ENV_BLOCK_SIZE, base.block_size),
        num_workers=_env_int(ENV_NUM_WORKERS, base.num_workers),
    )


_config: ComputeConfig | None = None


def get_config() -> ComputeConfig:
    """Return the active process-wide configuration."""
    global _config
    if _config is None:
        _config = config_from_env()
    return _config


def set_config(**changes) -> ComputeConfig:
    """
    Replace fields of the active configuration.

    Example:
        >>> set_config(block_size=32, num_workers=4)

    Returns:
        The new active configuration.
    """
    global _config
    _config = replace(get_config(), **changes)
    return _config


def reset_config() -> None:
    """Drop any set_config() overrides; the next get_config() rereads the environment."""
    global _config
    _config = None


def resolve_block_size(block_size: int | None) -> int:
    """Per-call override, or the configured default."""
    if block_size is None:
        return get_config().block_size
    check_positive_int(block_size, 'block_size')
    return block_size


def resolve_num_workers(num_workers: int | None) -> int:
    """Per-call override, or the configured default."""
    if num_workers is None:
        return get_config().num_workers
    check_positive_int(num_workers, 'num_workers')
    return num_workers
