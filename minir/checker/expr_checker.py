# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Expression checker.

Computes the Type of a value expression and the PlaceType of a place
expression against the currently-live locals. Returns None when the
expression is ill-formed; callers propagate that immediately.

Layout-sensitive rules:
  - Ref uses the *declared* alignment for the pointee layout, not the
    alignment the place guarantees.
  - Field/Index projections weaken the place alignment to what the projection
    offset still guarantees.
  - Pointer offsetting keeps the pointer type unchanged.
"""

from __future__ import annotations

from typing import Mapping, Optional

from minir.checker.type_wf import check_int_type
from minir.core.sizes import restrict_align_for_offset
from minir.core.target import DEFAULT_TARGET, Target
from minir.core.types_core import (
	ArrayTy,
	BoolTy,
	IntTy,
	Layout,
	PlaceType,
	RawPtrTy,
	RefTy,
	TupleTy,
	Type,
	UnionTy,
	type_size,
)
from minir.mir.mir_nodes import (
	AddrOf,
	BinOp,
	BinOpInt,
	BinOpPtrOffset,
	Constant,
	Deref,
	Field,
	Index,
	Load,
	LocalId,
	PlaceExpr,
	PlaceLocal,
	Ref,
	UnOp,
	UnOpInt,
	ValueExpr,
)


LiveLocals = Mapping[LocalId, PlaceType]


def check_constant(value: object, ty: Type, *, target: Target = DEFAULT_TARGET) -> bool:
	"""Whether `value` is representable in `ty` (only ints and bools have constants)."""
	if isinstance(ty, IntTy):
		# bool is an int subclass in Python; keep the two constant kinds apart.
		if not isinstance(value, int) or isinstance(value, bool):
			return False
		if not check_int_type(ty.int_type, target=target):
			return False
		return ty.int_type.can_represent(value)
	if isinstance(ty, BoolTy):
		return isinstance(value, bool)
	return False


def check_value_expr(expr: ValueExpr, live: LiveLocals, *, target: Target = DEFAULT_TARGET) -> Optional[Type]:
	if isinstance(expr, Constant):
		if not check_constant(expr.value, expr.ty, target=target):
			return None
		return expr.ty
	if isinstance(expr, Load):
		ptype = check_place_expr(expr.source, live, target=target)
		if ptype is None:
			return None
		return ptype.ty
	if isinstance(expr, Ref):
		ptype = check_place_expr(expr.target, live, target=target)
		if ptype is None:
			return None
		pointee = Layout(size=type_size(ptype.ty, target), align=expr.align)
		return RefTy(pointee=pointee, mutbl=expr.mutbl)
	if isinstance(expr, AddrOf):
		if check_place_expr(expr.target, live, target=target) is None:
			return None
		return RawPtrTy(mutbl=expr.mutbl)
	if isinstance(expr, UnOp):
		return _check_unop(expr, live, target)
	if isinstance(expr, BinOp):
		return _check_binop(expr, live, target)
	raise TypeError(f"unknown value expression {expr!r}")


def _check_unop(expr: UnOp, live: LiveLocals, target: Target) -> Optional[Type]:
	operand = check_value_expr(expr.operand, live, target=target)
	if operand is None:
		return None
	if isinstance(expr.operator, UnOpInt):
		if not isinstance(operand, IntTy):
			return None
		return IntTy(expr.operator.result)
	raise TypeError(f"unknown unary operator {expr.operator!r}")


def _check_binop(expr: BinOp, live: LiveLocals, target: Target) -> Optional[Type]:
	left = check_value_expr(expr.left, live, target=target)
	if left is None:
		return None
	right = check_value_expr(expr.right, live, target=target)
	if right is None:
		return None
	if isinstance(expr.operator, BinOpInt):
		if not isinstance(left, IntTy) or not isinstance(right, IntTy):
			return None
		return IntTy(expr.operator.result)
	if isinstance(expr.operator, BinOpPtrOffset):
		if not isinstance(left, (RefTy, RawPtrTy)) or not isinstance(right, IntTy):
			return None
		return left
	raise TypeError(f"unknown binary operator {expr.operator!r}")


def check_place_expr(expr: PlaceExpr, live: LiveLocals, *, target: Target = DEFAULT_TARGET) -> Optional[PlaceType]:
	if isinstance(expr, PlaceLocal):
		return live.get(expr.name)
	if isinstance(expr, Deref):
		# Any operand type is accepted and reused as the place type; no pointee
		# is projected out of Ref/RawPtr/Box here.
		ty = check_value_expr(expr.operand, live, target=target)
		if ty is None:
			return None
		return PlaceType(ty=ty, align=expr.align)
	if isinstance(expr, Field):
		root = check_place_expr(expr.root, live, target=target)
		if root is None:
			return None
		if not isinstance(root.ty, (TupleTy, UnionTy)):
			return None
		if not 0 <= expr.field < len(root.ty.fields):
			return None
		offset, field_ty = root.ty.fields[expr.field]
		return PlaceType(ty=field_ty, align=restrict_align_for_offset(root.align, offset, target))
	if isinstance(expr, Index):
		root = check_place_expr(expr.root, live, target=target)
		if root is None:
			return None
		if not isinstance(root.ty, ArrayTy):
			return None
		index = check_value_expr(expr.index, live, target=target)
		if not isinstance(index, IntTy):
			return None
		# Any index moves by a multiple of the element size.
		elem = root.ty.elem
		return PlaceType(ty=elem, align=restrict_align_for_offset(root.align, type_size(elem, target), target))
	raise TypeError(f"unknown place expression {expr!r}")
