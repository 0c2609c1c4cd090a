# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Function / program verifier tests.

CFG shapes:
  - straight line: entry -> exit
  - diamond: entry -> then/else -> join (identical vs divergent live sets)
  - loop: entry -> head -> body -> head/exit (balanced vs leaking storage)
  - unreachable and undeclared blocks
Plus entry-state construction (args/ret), program-level entry function and
determinism across repeated runs.
"""

from __future__ import annotations

import logging

from minir.checker import LivenessInfo, check_function, check_program
from minir.core import (
	IntTy,
	IntType,
	Mutability,
	PlaceType,
	RawPtrTy,
	Signedness,
	Target,
	TupleTy,
)
from minir.mir import (
	Assign,
	BasicBlock,
	Call,
	Function,
	Goto,
	If,
	Program,
	Return,
	StorageDead,
	StorageLive,
)
from minir.test_support import (
	BOOL,
	U8,
	U32,
	assign_const,
	const,
	load,
	local,
	make_function,
	make_program,
	ptype,
)


def _scenario(a_ty, value) -> Function:
	entry = BasicBlock(
		statements=[StorageLive("a"), assign_const("a", value, a_ty)],
		terminator=Goto("exit"),
	)
	exit_block = BasicBlock(terminator=Return())
	return make_function({"entry": entry, "exit": exit_block}, {"a": a_ty, "b": BOOL})


def _diamond(else_statements) -> Function:
	entry = BasicBlock(terminator=If(const(True, BOOL), "then", "else"))
	then = BasicBlock(statements=[StorageLive("a")], terminator=Goto("join"))
	else_block = BasicBlock(statements=list(else_statements), terminator=Goto("join"))
	join = BasicBlock(terminator=Return())
	return make_function(
		{"entry": entry, "then": then, "else": else_block, "join": join},
		{"a": U32},
	)


def _loop(body_statements) -> Function:
	entry = BasicBlock(statements=[StorageLive("i")], terminator=Goto("head"))
	head = BasicBlock(terminator=If(const(False, BOOL), "body", "exit"))
	body = BasicBlock(statements=list(body_statements), terminator=Goto("head"))
	exit_block = BasicBlock(statements=[StorageDead("i")], terminator=Return())
	return make_function(
		{"entry": entry, "head": head, "body": body, "exit": exit_block},
		{"i": U32, "t": U8},
	)


def test_end_to_end_scenario_accepted() -> None:
	info = check_function(_scenario(U32, 5))
	assert isinstance(info, LivenessInfo)
	assert check_program(make_program(_scenario(U32, 5)))


def test_end_to_end_out_of_range_constant_rejected() -> None:
	assert check_function(_scenario(U8, 300)) is None
	assert not check_program(make_program(_scenario(U8, 300)))


def test_entry_states_are_recorded_per_block() -> None:
	info = check_function(_scenario(U32, 5))
	assert info is not None
	assert info.entry_states["entry"] == {"ret": ptype(U32)}
	assert info.entry_states["exit"] == {"ret": ptype(U32), "a": ptype(U32)}


def test_diamond_with_identical_live_sets_accepted() -> None:
	assert check_function(_diamond([StorageLive("a")])) is not None


def test_diamond_with_divergent_live_sets_rejected() -> None:
	assert check_function(_diamond([])) is None


def test_loop_with_balanced_storage_accepted() -> None:
	body = [StorageLive("t"), assign_const("t", 1, U8), StorageDead("t")]
	info = check_function(_loop(body))
	assert info is not None
	assert set(info.entry_states) == {"entry", "head", "body", "exit"}
	assert "t" not in info.entry_states["head"]


def test_loop_leaking_storage_across_back_edge_rejected() -> None:
	assert check_function(_loop([StorageLive("t")])) is None


def test_loop_killing_outer_local_rejected() -> None:
	assert check_function(_loop([StorageDead("i")])) is None


def test_self_loop_accepted() -> None:
	entry = BasicBlock(terminator=If(const(True, BOOL), "entry", "exit"))
	func = make_function({"entry": entry, "exit": BasicBlock()})
	assert check_function(func) is not None


def test_unreachable_block_rejected() -> None:
	func = _scenario(U32, 5)
	func.blocks["orphan"] = BasicBlock(terminator=Return())
	assert check_function(func) is None


def test_jump_to_undeclared_block_rejected() -> None:
	func = make_function({"entry": BasicBlock(terminator=Goto("nowhere"))})
	assert check_function(func) is None


def test_missing_start_block_rejected() -> None:
	func = make_function({"entry": BasicBlock()}, start="begin")
	assert check_function(func) is None


def test_failing_statement_rejects_function() -> None:
	entry = BasicBlock(statements=[StorageDead("a")], terminator=Return())
	assert check_function(make_function({"entry": entry}, {"a": U32})) is None


def test_failing_terminator_rejects_function() -> None:
	entry = BasicBlock(terminator=If(const(1, U32), "entry", "entry"))
	assert check_function(make_function({"entry": entry})) is None


def test_arguments_and_return_live_on_entry() -> None:
	entry = BasicBlock(statements=[Assign(local("ret"), load("x"))], terminator=Return())
	func = make_function({"entry": entry}, {"x": U32}, args=["x"])
	info = check_function(func)
	assert info is not None
	assert info.entry_states["entry"] == {"ret": ptype(U32), "x": ptype(U32)}


def test_argument_cannot_be_storage_live_again() -> None:
	entry = BasicBlock(statements=[StorageLive("x")], terminator=Return())
	assert check_function(make_function({"entry": entry}, {"x": U32}, args=["x"])) is None


def test_duplicate_argument_rejected() -> None:
	func = make_function({"entry": BasicBlock()}, {"x": U32}, args=["x", "x"])
	assert check_function(func) is None


def test_return_local_shared_with_argument_rejected() -> None:
	func = make_function({"entry": BasicBlock()}, args=["ret"])
	assert check_function(func) is None


def test_undeclared_argument_or_return_rejected() -> None:
	func = make_function({"entry": BasicBlock()}, args=["ghost"])
	assert check_function(func) is None
	func = make_function({"entry": BasicBlock()})
	del func.locals["ret"]
	assert check_function(func) is None


def test_ill_formed_local_type_rejected() -> None:
	func = make_function({"entry": BasicBlock()})
	func.locals["bad"] = PlaceType(IntTy(IntType(Signedness.UNSIGNED, 3)), 1)
	assert check_function(func) is None
	func.locals["bad"] = PlaceType(U32, 8)
	assert check_function(func) is None


def test_local_types_checked_against_target() -> None:
	pair = TupleTy(fields=[(0, RawPtrTy(Mutability.MUTABLE)), (4, U32)], size=8, align=4)
	func = make_function({"entry": BasicBlock()}, {"p": pair})
	assert check_function(func, target=Target(ptr_size=4)) is not None
	assert check_function(func) is None


def test_program_requires_start_function() -> None:
	func = _scenario(U32, 5)
	assert not check_program(Program(functions={"helper": func}, start="main"))


def test_program_rejects_if_any_function_is_ill_formed() -> None:
	good = _scenario(U32, 5)
	bad = _diamond([])
	assert not check_program(Program(functions={"main": good, "helper": bad}, start="main"))
	assert check_program(Program(functions={"main": good, "helper": _diamond([StorageLive("a")])}, start="main"))


def test_call_to_unknown_function_still_accepted() -> None:
	"""Callee resolution is left to other layers."""
	entry = BasicBlock(terminator=Call(callee="missing", arguments=[const(1, U32)], ret=local("ret"), next_block="done"))
	func = make_function({"entry": entry, "done": BasicBlock()})
	assert check_program(make_program(func))


def test_rechecking_accepted_program_is_deterministic() -> None:
	prog = Program(
		functions={"main": _scenario(U32, 5), "looping": _loop([StorageLive("t"), StorageDead("t")])},
		start="main",
	)
	assert check_program(prog)
	assert check_program(prog)
	first = check_function(prog.functions["looping"])
	second = check_function(prog.functions["looping"])
	assert first == second


def test_rejections_are_logged(caplog) -> None:
	func = _scenario(U32, 5)
	func.blocks["orphan"] = BasicBlock()
	with caplog.at_level(logging.DEBUG, logger="minir.checker.verifier"):
		assert not check_program(make_program(func, name="main"))
	assert "unreachable blocks: orphan" in caplog.text
	assert "function main is ill-formed" in caplog.text


def test_branch_targets_get_independent_entry_states() -> None:
	"""Both arms of an If start from equal but separate live maps."""
	info = check_function(_diamond([StorageLive("a")]))
	assert info is not None
	then_state = info.entry_states["then"]
	else_state = info.entry_states["else"]
	assert then_state == else_state
	assert then_state is not else_state
	then_state["extra"] = ptype(U8)
	assert "extra" not in else_state
