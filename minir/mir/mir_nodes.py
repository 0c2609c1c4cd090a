# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
minir IR nodes.

The IR is explicit about memory:
- Every stack slot is a named local with a declared PlaceType.
- Storage of a local is started/ended by StorageLive/StorageDead statements.
- Places (addressable locations) and values are separate expression families.

Use this file as a reference for what the IR can express. There are **no
semantics** baked in here; it is just a typed tree of expressions, statements,
terminators and blocks. Well-formedness lives in `minir.checker`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Tuple, Union

from minir.core.sizes import Align
from minir.core.types_core import IntType, Mutability, PlaceType, Type


LocalId = str
BbName = str
FnName = str


class MNode:
	"""Base class for IR nodes."""
	pass


class ValueExpr(MNode):
	"""Base class for value-producing expressions."""
	pass


class PlaceExpr(MNode):
	"""Base class for place-producing expressions."""
	pass


class MStmt(MNode):
	"""Base class for statements (non-terminators)."""
	pass


class MTerminator(MNode):
	"""Base class for terminators (end of a basic block)."""
	pass


# Operators

class IntUnOp(Enum):
	NEG = auto()
	CAST = auto()


class IntBinOp(Enum):
	ADD = auto()
	SUB = auto()
	MUL = auto()
	DIV = auto()
	REM = auto()


@dataclass(frozen=True)
class UnOpInt:
	"""Integer unary operator; `result` is the type it produces."""
	op: IntUnOp
	result: IntType


@dataclass(frozen=True)
class BinOpInt:
	"""Integer binary operator; `result` is the type it produces."""
	op: IntBinOp
	result: IntType


@dataclass(frozen=True)
class BinOpPtrOffset:
	"""
	ptr + int (in bytes).

	`inbounds` marks a run-time obligation that the result stays inside the
	same allocation; it does not influence typing.
	"""
	inbounds: bool = True


UnOperator = UnOpInt
BinOperator = Union[BinOpInt, BinOpPtrOffset]


# Value expressions

@dataclass(frozen=True)
class Constant(ValueExpr):
	"""constant `value` (int or bool) of type `ty`"""
	value: object
	ty: Type


@dataclass(frozen=True)
class Load(ValueExpr):
	"""
	load from `source`

	`destructive` means the place is de-initialized by the load; it matters at
	run time only.
	"""
	source: PlaceExpr
	destructive: bool = False


@dataclass(frozen=True)
class AddrOf(ValueExpr):
	"""raw pointer to `target`"""
	target: PlaceExpr
	mutbl: Mutability


@dataclass(frozen=True)
class Ref(ValueExpr):
	"""
	reference to `target` promising alignment `align`

	The promise may exceed what the place guarantees; that is how references
	into packed fields are expressed.
	"""
	target: PlaceExpr
	align: Align
	mutbl: Mutability


@dataclass(frozen=True)
class UnOp(ValueExpr):
	operator: UnOperator
	operand: ValueExpr


@dataclass(frozen=True)
class BinOp(ValueExpr):
	operator: BinOperator
	left: ValueExpr
	right: ValueExpr


# Place expressions

@dataclass(frozen=True)
class PlaceLocal(PlaceExpr):
	"""the storage of local `name`"""
	name: LocalId


@dataclass(frozen=True)
class Deref(PlaceExpr):
	"""*operand, assumed aligned to `align`"""
	operand: ValueExpr
	align: Align


@dataclass(frozen=True)
class Field(PlaceExpr):
	"""root.field for tuples and unions (field is an index into the field list)"""
	root: PlaceExpr
	field: int


@dataclass(frozen=True)
class Index(PlaceExpr):
	"""root[index] for arrays"""
	root: PlaceExpr
	index: ValueExpr


# Statements

@dataclass(frozen=True)
class Assign(MStmt):
	"""destination = source"""
	destination: PlaceExpr
	source: ValueExpr


@dataclass(frozen=True)
class Finalize(MStmt):
	"""mark `place` as holding a fully materialized value (run-time only)"""
	place: PlaceExpr


@dataclass(frozen=True)
class StorageLive(MStmt):
	local: LocalId


@dataclass(frozen=True)
class StorageDead(MStmt):
	local: LocalId


# Terminators

@dataclass(frozen=True)
class Goto(MTerminator):
	target: BbName


@dataclass(frozen=True)
class If(MTerminator):
	"""if condition { goto then_block } else { goto else_block }"""
	condition: ValueExpr
	then_block: BbName
	else_block: BbName


@dataclass(frozen=True)
class Call(MTerminator):
	"""ret = callee(arguments...); goto next_block"""
	callee: FnName
	arguments: Tuple[ValueExpr, ...]
	ret: PlaceExpr
	next_block: BbName

	def __post_init__(self) -> None:
		object.__setattr__(self, "arguments", tuple(self.arguments))


@dataclass(frozen=True)
class Return(MTerminator):
	pass


# Blocks, functions, programs

@dataclass
class BasicBlock:
	"""Straight-line statements plus exactly one terminator."""

	statements: List[MStmt] = field(default_factory=list)
	terminator: MTerminator = field(default_factory=Return)


@dataclass
class Function:
	"""
	A function body.

	locals: every local the function may use, with its declared PlaceType.
	args/ret: locals live on entry (arguments and the return slot).
	blocks/start: the CFG and its entry block.
	"""

	locals: Dict[LocalId, PlaceType]
	args: List[LocalId]
	ret: LocalId
	blocks: Dict[BbName, BasicBlock]
	start: BbName


@dataclass
class Program:
	functions: Dict[FnName, Function]
	start: FnName
