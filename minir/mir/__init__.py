# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
IR node definitions (see mir_nodes for the full list).
"""

from .mir_nodes import (
	AddrOf,
	Assign,
	BasicBlock,
	BbName,
	BinOp,
	BinOpInt,
	BinOpPtrOffset,
	Call,
	Constant,
	Deref,
	Field,
	Finalize,
	FnName,
	Function,
	Goto,
	If,
	Index,
	IntBinOp,
	IntUnOp,
	Load,
	LocalId,
	MStmt,
	MTerminator,
	PlaceExpr,
	PlaceLocal,
	Program,
	Ref,
	Return,
	StorageDead,
	StorageLive,
	UnOp,
	UnOpInt,
	ValueExpr,
)

__all__ = [
	"AddrOf",
	"Assign",
	"BasicBlock",
	"BbName",
	"BinOp",
	"BinOpInt",
	"BinOpPtrOffset",
	"Call",
	"Constant",
	"Deref",
	"Field",
	"Finalize",
	"FnName",
	"Function",
	"Goto",
	"If",
	"Index",
	"IntBinOp",
	"IntUnOp",
	"Load",
	"LocalId",
	"MStmt",
	"MTerminator",
	"PlaceExpr",
	"PlaceLocal",
	"Program",
	"Ref",
	"Return",
	"StorageDead",
	"StorageLive",
	"UnOp",
	"UnOpInt",
	"ValueExpr",
]
