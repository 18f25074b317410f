"""Download, cache and parse Minecraft version data: versions, manifests, blocks, entities, protocol and data-generator output."""

__version__ = "0.1.0"