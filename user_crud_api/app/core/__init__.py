"""Configuration, logging, database wiring and domain errors."""
