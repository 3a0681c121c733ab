"""wavetext - WAV sample dump utilities.

Provides:
- Decoding of PCM WAV files into normalized float samples
- One-sample-per-line text serialization written in place
- A companion energy-based beat counter over dumped samples
"""

__version__ = "0.1.0"
