"""wavetext - Wave-to-text converter service."""
