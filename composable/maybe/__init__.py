from .async_map import async_map, async_map_optional

__all__ = (
    "async_map",
    "async_map_optional",
)
