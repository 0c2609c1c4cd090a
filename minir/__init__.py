# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
minir package: static well-formedness checker for a small layout-aware IR.

Layers (leaves first):
  core:    target config, checked size/align arithmetic, type model
  mir:     IR nodes (expressions, statements, terminators, blocks, functions)
  checker: type/layout validation → expressions → statements → CFG verifier

Public entry point: `check_program(program)`; an execution engine may only
run programs for which it returned True.
"""

from minir.checker import check_function, check_program, LivenessInfo
from minir.core import DEFAULT_TARGET, Target, host_target

__all__ = [
	"check_function",
	"check_program",
	"LivenessInfo",
	"DEFAULT_TARGET",
	"Target",
	"host_target",
]
