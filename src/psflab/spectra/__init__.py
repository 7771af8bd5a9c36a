from .spectrum import Spectrum, SpectrumElement

__all__ = [
    'Spectrum', 'SpectrumElement',
]
