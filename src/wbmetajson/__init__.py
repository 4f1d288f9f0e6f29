"""Meta document generation for build outputs."""

from wbmetajson.core.pipeline.engine import MetaJsonGenerator, run_pipeline
from wbmetajson.domain.asset_models import Asset, Compilation
from wbmetajson.domain.errors import ConfigurationError, GenerationError

__all__ = [
    "Asset",
    "Compilation",
    "ConfigurationError",
    "GenerationError",
    "MetaJsonGenerator",
    "run_pipeline",
]
