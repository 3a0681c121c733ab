"""wavetext - Beat counter service."""
