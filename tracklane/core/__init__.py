"""Cross-cutting infrastructure: config, logging, events, protocols, wiring."""
