from .effects import tap, tap_writer, zip_with
from .map import apply_value, bind_value, map_value

__all__ = (
    # Deferred
    "apply_value",
    "bind_value",
    "map_value",
    "tap",
    "zip_with",
    # DeferredWriter
    "tap_writer",
)
