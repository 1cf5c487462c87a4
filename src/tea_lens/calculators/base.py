"""Base calculator interface."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from tea_lens.reference import ReferenceData, load_reference_data
from tea_lens.schema import Tea


class BaseCalculator(ABC):
    """Abstract base class for attribute calculators."""

    def __init__(self, reference: ReferenceData | None = None):
        self.reference = reference or load_reference_data()

    @abstractmethod
    def analyze(self, tea: Tea) -> BaseModel:
        """Derive a structured analysis from one tea record.

        Args:
            tea: Tea record to analyze

        Returns:
            Analysis model; a "no data" variant when the input is missing
        """
        pass
