"""Manifest : schéma + parser du format persisté."""
from .schema import ManifestPage, ManifestSection
from .parser import parse_manifest, dump_manifest, to_json, from_json

__all__ = [
    "ManifestPage",
    "ManifestSection",
    "parse_manifest",
    "dump_manifest",
    "to_json",
    "from_json",
]
