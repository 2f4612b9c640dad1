"""Orchestration layer for Sector 471.

Usage:
    from sector471.orchestration import build_flow

    flow = build_flow(clock, text_provider, profile)
    flow.start()
    ...
    flow.pause()
    flow.resume()
"""

from sector471.orchestration.factory import build_flow
from sector471.orchestration.flow import FlowOrchestrator, SceneChangeCallback

__all__ = [
    "FlowOrchestrator",
    "SceneChangeCallback",
    "build_flow",
]
