"""Wave force providers.

This package provides the three wave conditions a simulation can run with:

- NoWave: still water, zero excitation
- RegularWave: closed-form single frequency excitation
- IrregularWaves: spectral sea state with IRF convolution
"""

from .base import WaveBase
from .irregular import IrregularWaves
from .no_wave import NoWave
from .regular import RegularWave

__all__ = [
    "WaveBase",
    "NoWave",
    "RegularWave",
    "IrregularWaves",
]
