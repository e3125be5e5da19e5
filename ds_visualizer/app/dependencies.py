"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the VisualizerService (engines + shared stepper).
2. Managing its lifecycle using @lru_cache so that it is created only once
   per application process.

The engines hold the only copy of each structure, so the service must be a
singleton: every request has to see the same queue, tree and heap.
"""


from functools import lru_cache

from ..services.visualizer import VisualizerService


# The Visualizer Service (Singleton Service)
@lru_cache()
def get_visualizer_service() -> VisualizerService:
    return VisualizerService.create()
