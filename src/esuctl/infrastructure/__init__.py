"""Infrastructure: graph file I/O, NetworkX adapter, and workspace."""
