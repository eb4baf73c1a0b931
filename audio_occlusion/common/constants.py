"""Shared constants for map building and attenuation."""

# Speaking radius in map units; zones are spaced at half of it
DEFAULT_SPEAKING_RADIUS = 100.0

# Listeners closer than this share of the speaking radius hear full volume
AUDIO_FULL_VOLUME_FRACTION = 0.2

# SVG map layout: <g id="..."> layers inside the root <svg>
WALL_LAYER_ID = "polygon_layer"
NODE_LAYER_ID = "node_layer"
