from report_analyzer.interpretation.base import BaseInterpreter
from report_analyzer.interpretation.factory import InterpreterFactory
from report_analyzer.interpretation.interpreter import Interpreter

__all__ = ["BaseInterpreter", "Interpreter", "InterpreterFactory"]
