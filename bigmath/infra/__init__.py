"""bigmath.infra — engine configuration."""

from bigmath.infra.config import DEFAULT_ENGINE_CONFIG as DEFAULT_ENGINE_CONFIG
from bigmath.infra.config import EngineConfig as EngineConfig
