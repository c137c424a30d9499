"""cfgtree core: configuration manager, merge engine and supporting utilities."""
