import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Optional

from vecmath.errors import InvalidArgumentError
from vecmath.mathutil import ABS_TOL, REL_TOL, is_close

REL_TOL_ENV_VAR = "VECMATH_REL_TOL"
ABS_TOL_ENV_VAR = "VECMATH_ABS_TOL"
SEED_ENV_VAR = "VECMATH_SEED"


def _reject_unknown_keys(cls: type, data: Dict) -> None:
    known = {f.name for f in fields(cls)}
    for key in data:
        if key not in known:
            raise ValueError(f"Unknown {cls.__name__} key '{key}'")


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be a float, got '{raw}'") from exc


@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerances used for approximate comparisons.

    Environment overrides (``VECMATH_REL_TOL``, ``VECMATH_ABS_TOL``) take
    precedence over values passed in a mapping.
    """

    rel_tol: float = REL_TOL
    abs_tol: float = ABS_TOL

    def __post_init__(self) -> None:
        if self.rel_tol < 0.0 or self.abs_tol < 0.0:
            raise InvalidArgumentError(
                f"Tolerances must be non-negative, got rel_tol={self.rel_tol}, abs_tol={self.abs_tol}"
            )

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "ToleranceConfig":
        data = dict(data or {})
        _reject_unknown_keys(cls, data)
        rel_tol = float(data.get("rel_tol", REL_TOL))
        abs_tol = float(data.get("abs_tol", ABS_TOL))
        env_rel = _env_float(REL_TOL_ENV_VAR)
        if env_rel is not None:
            rel_tol = env_rel
        env_abs = _env_float(ABS_TOL_ENV_VAR)
        if env_abs is not None:
            abs_tol = env_abs
        return cls(rel_tol=rel_tol, abs_tol=abs_tol)

    def is_close(self, a: float, b: float) -> bool:
        return is_close(a, b, rel_tol=self.rel_tol, abs_tol=self.abs_tol)


@dataclass(frozen=True)
class RandomConfig:
    """Seeding for the per-thread random generators. ``seed=None`` means OS entropy."""

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.seed is not None and self.seed < 0:
            raise InvalidArgumentError(f"Random seed must be non-negative, got {self.seed}")

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "RandomConfig":
        data = dict(data or {})
        _reject_unknown_keys(cls, data)
        seed = data.get("seed")
        env_seed = os.getenv(SEED_ENV_VAR)
        if env_seed is not None and env_seed.strip():
            try:
                seed = int(env_seed)
            except ValueError as exc:
                raise ValueError(f"Environment variable {SEED_ENV_VAR} must be an integer, got '{env_seed}'") from exc
        return cls(seed=int(seed) if seed is not None else None)


@dataclass(frozen=True)
class LibraryConfig:
    tolerance: ToleranceConfig = field(default_factory=ToleranceConfig)
    random: RandomConfig = field(default_factory=RandomConfig)
    log_level: str = "INFO"

    @classmethod
    def from_file(cls, path: Path) -> "LibraryConfig":
        """
        Parse a JSON config file.

        Raises:
            ValueError: if the JSON is invalid (the message names the path) or holds invalid values.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid config JSON at {path}: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "LibraryConfig":
        data = dict(data or {})
        _reject_unknown_keys(cls, data)
        log_level = str(data.get("log_level", "INFO")).strip().upper()
        if not log_level:
            raise ValueError("log_level cannot be empty")
        return cls(
            tolerance=ToleranceConfig.from_dict(data.get("tolerance")),
            random=RandomConfig.from_dict(data.get("random")),
            log_level=log_level,
        )
