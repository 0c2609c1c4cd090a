# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Statement / terminator checker.

Threads the live-locals mapping through one statement at a time. Statements
return the mapping that holds *after* them (a fresh dict; the input is never
mutated), terminators return their successor block names. None means
ill-formed.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from minir.core.target import DEFAULT_TARGET, Target
from minir.core.types_core import BoolTy, PlaceType
from minir.checker.expr_checker import LiveLocals, check_place_expr, check_value_expr
from minir.mir.mir_nodes import (
	Assign,
	BbName,
	Call,
	Finalize,
	Function,
	Goto,
	If,
	LocalId,
	MStmt,
	MTerminator,
	Return,
	StorageDead,
	StorageLive,
)


def check_statement(
	stmt: MStmt,
	live: LiveLocals,
	func: Function,
	*,
	target: Target = DEFAULT_TARGET,
) -> Optional[Dict[LocalId, PlaceType]]:
	if isinstance(stmt, Assign):
		left = check_place_expr(stmt.destination, live, target=target)
		if left is None:
			return None
		right = check_value_expr(stmt.source, live, target=target)
		if right is None:
			return None
		# No coercions: the value type must be exactly the place type.
		if left.ty != right:
			return None
		return dict(live)
	if isinstance(stmt, Finalize):
		if check_place_expr(stmt.place, live, target=target) is None:
			return None
		return dict(live)
	if isinstance(stmt, StorageLive):
		ptype = func.locals.get(stmt.local)
		if ptype is None or stmt.local in live:
			return None
		out = dict(live)
		out[stmt.local] = ptype
		return out
	if isinstance(stmt, StorageDead):
		if stmt.local not in live:
			return None
		out = dict(live)
		del out[stmt.local]
		return out
	raise TypeError(f"unknown statement {stmt!r}")


def check_terminator(
	term: MTerminator,
	live: LiveLocals,
	*,
	target: Target = DEFAULT_TARGET,
) -> Optional[List[BbName]]:
	if isinstance(term, Goto):
		return [term.target]
	if isinstance(term, If):
		cond = check_value_expr(term.condition, live, target=target)
		if not isinstance(cond, BoolTy):
			return None
		return [term.then_block, term.else_block]
	if isinstance(term, Call):
		# Arguments only need *a* type; they are not matched against the
		# callee's parameters, and the callee name is not resolved here.
		for arg in term.arguments:
			if check_value_expr(arg, live, target=target) is None:
				return None
		if check_place_expr(term.ret, live, target=target) is None:
			return None
		return [term.next_block]
	if isinstance(term, Return):
		return []
	raise TypeError(f"unknown terminator {term!r}")
