"""Feature modules loaded by core.registry.ModuleLoader."""
