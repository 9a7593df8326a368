"""Domain layer: adjacency store, extension builder, and ESU enumeration."""
