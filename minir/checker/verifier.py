# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Function / program verifier.

Drives the statement checker over a function's CFG until every reachable
block has a recorded entry state (the live locals on entry to that block).

Algorithm (worklist, each block enqueued at most once):
  - initial state: arguments + return local, bound to their declared PlaceTypes
  - entry_states[start] = initial state; worklist = [start]
  - pop a block, thread its entry state through statements and terminator
  - for each successor: if it has a recorded state the new state must equal it
    exactly, otherwise record it and enqueue the successor
  - afterwards every declared block must have a recorded state

States are never merged: every path into a block must bring the same live
locals. A back edge compares against the already-recorded state.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Optional

from minir.core.target import DEFAULT_TARGET, Target
from minir.core.types_core import PlaceType
from minir.checker.stmt_checker import check_statement, check_terminator
from minir.checker.type_wf import check_place_type
from minir.mir.mir_nodes import BbName, Function, LocalId, Program


logger = logging.getLogger(__name__)


@dataclass
class LivenessInfo:
	"""
	Fixed point of a successful function check.

	entry_states[block] = live locals (with their PlaceTypes) on entry to block.
	"""

	entry_states: Dict[BbName, Dict[LocalId, PlaceType]] = field(default_factory=dict)


def _initial_live(func: Function) -> Optional[Dict[LocalId, PlaceType]]:
	live: Dict[LocalId, PlaceType] = {}
	for local in [*func.args, func.ret]:
		ptype = func.locals.get(local)
		if ptype is None:
			logger.debug("local %s is live on entry but not declared", local)
			return None
		if local in live:
			logger.debug("local %s is bound twice on entry", local)
			return None
		live[local] = ptype
	return live


def check_function(func: Function, *, target: Target = DEFAULT_TARGET) -> Optional[LivenessInfo]:
	"""Check one function; returns its LivenessInfo, or None if ill-formed."""
	for local, ptype in func.locals.items():
		if not check_place_type(ptype, target=target):
			logger.debug("local %s has an ill-formed place type", local)
			return None

	start_live = _initial_live(func)
	if start_live is None:
		return None

	entry_states: Dict[BbName, Dict[LocalId, PlaceType]] = {func.start: start_live}
	worklist: Deque[BbName] = deque([func.start])
	while worklist:
		name = worklist.popleft()
		block = func.blocks.get(name)
		if block is None:
			logger.debug("jump to undeclared block %s", name)
			return None

		live: Optional[Dict[LocalId, PlaceType]] = entry_states[name]
		for stmt in block.statements:
			live = check_statement(stmt, live, func, target=target)
			if live is None:
				logger.debug("block %s: ill-formed statement %r", name, stmt)
				return None
		successors = check_terminator(block.terminator, live, target=target)
		if successors is None:
			logger.debug("block %s: ill-formed terminator %r", name, block.terminator)
			return None

		for succ in successors:
			recorded = entry_states.get(succ)
			if recorded is None:
				entry_states[succ] = dict(live)
				worklist.append(succ)
			elif recorded != live:
				logger.debug("block %s reached with divergent live locals (from %s)", succ, name)
				return None

	unreached = [name for name in func.blocks if name not in entry_states]
	if unreached:
		logger.debug("unreachable blocks: %s", ", ".join(unreached))
		return None
	return LivenessInfo(entry_states=entry_states)


def check_program(prog: Program, *, target: Target = DEFAULT_TARGET) -> bool:
	"""A program is well-formed when its start function exists and every function checks."""
	if prog.start not in prog.functions:
		logger.debug("start function %s is not defined", prog.start)
		return False
	for name, func in prog.functions.items():
		if check_function(func, target=target) is None:
			logger.debug("function %s is ill-formed", name)
			return False
	return True
