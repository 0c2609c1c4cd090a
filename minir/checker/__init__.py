# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Well-formedness checker.

Layers (each consumed by the next):
  type_wf:      types, layouts and place types
  expr_checker: value/place expressions against the live locals
  stmt_checker: statements and terminators (threads the live locals)
  verifier:     CFG worklist per function, then whole programs

Every check reports ill-formedness as False/None; nothing is raised for an
ill-formed program.
"""

from .type_wf import check_int_type, check_layout, check_place_type, check_type
from .expr_checker import LiveLocals, check_constant, check_place_expr, check_value_expr
from .stmt_checker import check_statement, check_terminator
from .verifier import LivenessInfo, check_function, check_program

__all__ = [
	"check_int_type",
	"check_layout",
	"check_place_type",
	"check_type",
	"LiveLocals",
	"check_constant",
	"check_place_expr",
	"check_value_expr",
	"check_statement",
	"check_terminator",
	"LivenessInfo",
	"check_function",
	"check_program",
]
