"""hbsl - Handlebars to Sline template transpiler.

Rewrites Handlebars tags in place and keeps literal text untouched.
"""

from hbsl.diagnostics import Diagnostic, DiagnosticSink, Level, encode_json
from hbsl.options import Options
from hbsl.transpiler import TranspileResult, Transpiler, transpile

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "Level",
    "Options",
    "TranspileResult",
    "Transpiler",
    "encode_json",
    "transpile",
]
