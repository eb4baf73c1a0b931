"""Exceptions raised by the audio occlusion core."""


class AudioGraphError(Exception):
    """Base class for all audio occlusion errors."""


class InvalidNodeError(AudioGraphError, ValueError):
    """A node or node id does not belong to the graph it was used with."""


class QueueInvariantError(AudioGraphError, RuntimeError):
    """The priority queue claimed to hold entries but yielded none."""


class MapFormatError(AudioGraphError, ValueError):
    """A map document is missing a required layer or attribute."""
