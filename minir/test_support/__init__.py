# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Shared helpers for tests that need checker inputs.

These avoid re-spelling PlaceTypes, locals tables and single-function
programs in every test module.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping

from minir.core.types_core import BoolTy, PlaceType, Type, int_ty, type_align
from minir.mir.mir_nodes import (
	Assign,
	BasicBlock,
	Constant,
	Function,
	Load,
	PlaceLocal,
	Program,
)

U8 = int_ty(1)
U32 = int_ty(4)
I32 = int_ty(4, signed=True)
U64 = int_ty(8)
BOOL = BoolTy()


def ptype(ty: Type, align: int | None = None) -> PlaceType:
	"""PlaceType at the type's natural alignment unless `align` is given."""
	return PlaceType(ty=ty, align=type_align(ty) if align is None else align)


def local(name: str) -> PlaceLocal:
	return PlaceLocal(name)


def load(name: str) -> Load:
	return Load(PlaceLocal(name))


def const(value: object, ty: Type) -> Constant:
	return Constant(value=value, ty=ty)


def assign_const(name: str, value: object, ty: Type) -> Assign:
	return Assign(destination=PlaceLocal(name), source=Constant(value=value, ty=ty))


def make_function(
	blocks: Mapping[str, BasicBlock],
	locals_types: Mapping[str, Type] | None = None,
	*,
	args: Iterable[str] = (),
	ret: str = "ret",
	start: str = "entry",
	ret_type: Type = U32,
) -> Function:
	"""
	Build a Function whose locals use their natural alignment.

	The return local `ret` is declared with `ret_type` unless `locals_types`
	already declares it.
	"""
	table: Dict[str, PlaceType] = {ret: ptype(ret_type)}
	for name, ty in (locals_types or {}).items():
		table[name] = ptype(ty)
	return Function(locals=table, args=list(args), ret=ret, blocks=dict(blocks), start=start)


def make_program(func: Function, name: str = "main") -> Program:
	return Program(functions={name: func}, start=name)


__all__ = [
	"U8",
	"U32",
	"I32",
	"U64",
	"BOOL",
	"ptype",
	"local",
	"load",
	"const",
	"assign_const",
	"make_function",
	"make_program",
]
