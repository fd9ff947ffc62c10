"""Core scaffolding: exceptions, role registry, probes and authentication."""
