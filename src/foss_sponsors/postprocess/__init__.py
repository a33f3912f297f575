"""Optional passes applied to extracted sponsor reports."""

from .idmap import cleanup_with_map, load_id_map
from .subpages import parse_subpages

__all__ = ["cleanup_with_map", "load_id_map", "parse_subpages"]
