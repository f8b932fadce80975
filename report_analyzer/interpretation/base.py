from abc import ABC, abstractmethod

from report_analyzer.processor.models import UploadedFile


class BaseInterpreter(ABC):
    """Contract for turning an uploaded blood test into report markdown."""

    @abstractmethod
    def interpret(self, upload: UploadedFile) -> str:
        """Return the markdown interpretation of *upload*.

        Raises:
            InterpretationError: on any failure.
        """
