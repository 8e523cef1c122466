"""Audio band analysis, procedural geometry, rendering data and scene-editor models for audio-reactive visuals."""

__version__ = "0.1.0"