from .flying_phasor import FlyingPhasorToneGenerator, flying_phasor_modulator
from .chirping_phasor import ChirpingPhasorToneGenerator, chirping_phasor_modulator

__all__ = [
    "FlyingPhasorToneGenerator",
    "ChirpingPhasorToneGenerator",
    "flying_phasor_modulator",
    "chirping_phasor_modulator",
]
