"""Version detection: registry readers, release codes and the runtime query."""
