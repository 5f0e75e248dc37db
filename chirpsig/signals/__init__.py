""" ChirpSig Signals
"""
from .generator import ToneGenerator
from .generators import (
    FlyingPhasorToneGenerator,
    ChirpingPhasorToneGenerator,
    flying_phasor_modulator,
    chirping_phasor_modulator,
)

__all__ = [
    "ToneGenerator",
    "FlyingPhasorToneGenerator",
    "ChirpingPhasorToneGenerator",
    "flying_phasor_modulator",
    "chirping_phasor_modulator",
]
