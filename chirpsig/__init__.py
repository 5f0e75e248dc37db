"""ChirpSig: recurrence based tone and linear chirp generation
"""
from chirpsig.signals import (
    FlyingPhasorToneGenerator,
    ChirpingPhasorToneGenerator,
)

__version__ = "0.1.0"

__all__ = [
    "FlyingPhasorToneGenerator",
    "ChirpingPhasorToneGenerator",
]
