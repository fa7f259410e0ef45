from .engine import AnchorPosition, generate_palette, locate_anchor, build_lightness_ramp

__all__ = ["AnchorPosition", "generate_palette", "locate_anchor", "build_lightness_ramp"]
