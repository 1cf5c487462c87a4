"""Attribute calculators for tea-lens."""

from tea_lens.calculators.base import BaseCalculator
from tea_lens.calculators.compound import CompoundCalculator
from tea_lens.calculators.flavor import FlavorCalculator
from tea_lens.calculators.geography import GeographyCalculator
from tea_lens.calculators.processing import ProcessingCalculator
from tea_lens.calculators.tea_type import TeaTypeCalculator

__all__ = [
    "BaseCalculator",
    "CompoundCalculator",
    "FlavorCalculator",
    "GeographyCalculator",
    "ProcessingCalculator",
    "TeaTypeCalculator",
]
