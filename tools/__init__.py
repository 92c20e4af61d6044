"""Engine-specific integrations (one subpackage per analysis engine)."""
