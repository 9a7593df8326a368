"""esuctl — connected induced subgraph enumeration for small graphs."""

__version__ = "0.1.0"
