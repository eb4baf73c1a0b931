from .router import OcclusionRouter

__all__ = ["OcclusionRouter"]
