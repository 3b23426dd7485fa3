from __future__ import annotations
from calsaka.core.engine import ChronologyRegistry
from calsaka.engines.chronology import INSTANCE as INDIAN

def build_registry() -> ChronologyRegistry:
    registry = ChronologyRegistry()
    registry.register(INDIAN)
    return registry
