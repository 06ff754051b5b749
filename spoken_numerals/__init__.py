"""
Spoken Numerals — numbers to words, in several languages.

Architecture: Normalize → Decompose (3-digit groups) → Grammar engine → Assemble
Languages:    en, fr (fr_BE, fr_CH), uk
"""

from .exceptions import NumeralError
from .models import ConversionRequest, ConversionResult, OutputMode
from .pipeline import NumberSpeller, num2words

__version__ = "1.0.0"

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "NumberSpeller",
    "NumeralError",
    "OutputMode",
    "num2words",
]
