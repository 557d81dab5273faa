"""Extra-keys and shortcut configuration for terminal sessions."""
