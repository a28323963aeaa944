"""Cache of loaded resources keyed by their normalized path."""

import logging
import os

__all__ = ["ResourceCache"]

log = logging.getLogger(__name__)

UNKNOWN_PATH = "UNDEFINED"


class ResourceCache:
    """Loads each resource once through ``loader(path, *args)`` and keeps it.

    The loader returns the resource, or None (or raises OSError) on failure.
    """

    def __init__(self, loader):
        self._loader = loader
        self._resources = {}

    def get_or_load(self, path, *args):
        """Return the cached resource for ``path``, loading it if needed; None on failure."""
        key = os.path.normpath(os.fspath(path))
        if key in self._resources:
            return self._resources[key]
        try:
            resource = self._loader(key, *args)
        except OSError as exc:
            log.error("Failed to load resource: %s (%s)", key, exc)
            return None
        if resource is None:
            log.error("Failed to load resource: %s", key)
            return None
        self._resources[key] = resource
        return resource

    def path_of(self, resource):
        """Return the path a resource was loaded from, or ``"UNDEFINED"``."""
        for key, value in self._resources.items():
            if value is resource:
                return key
        log.error("Could not find path for a resource")
        return UNKNOWN_PATH

    def clear(self):
        self._resources.clear()

    def __len__(self):
        return len(self._resources)

    def __contains__(self, path):
        return os.path.normpath(os.fspath(path)) in self._resources