"""Hospital staff roster and duty schedule backend."""
