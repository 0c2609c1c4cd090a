# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Layout & type validator.

Decides structural well-formedness of IntTypes, Layouts, Types and PlaceTypes.
Each check returns a plain bool; the first violated rule makes the whole
enclosing type ill-formed, there is no partial result.

Once a type passes `check_type`, `type_size`/`type_align` describe a fixed,
finite layout that fits the target's Size range.
"""

from __future__ import annotations

from minir.core.sizes import align_from_bytes, checked_add, checked_mul, is_power_of_two, size_from_bytes
from minir.core.target import DEFAULT_TARGET, Target
from minir.core.types_core import (
	ArrayTy,
	BoolTy,
	BoxTy,
	EnumTy,
	IntTy,
	IntType,
	Layout,
	PlaceType,
	RawPtrTy,
	RefTy,
	TupleTy,
	Type,
	UnionTy,
	type_size,
)


def check_int_type(int_type: IntType, *, target: Target = DEFAULT_TARGET) -> bool:
	"""Integer sizes must be powers of two."""
	return size_from_bytes(int_type.size, target) is not None and is_power_of_two(int_type.size)


def check_layout(layout: Layout, *, target: Target = DEFAULT_TARGET) -> bool:
	"""Size must be an exact multiple of align."""
	if size_from_bytes(layout.size, target) is None:
		return False
	if align_from_bytes(layout.align, target) is None:
		return False
	return layout.size % layout.align == 0


def check_type(ty: Type, *, target: Target = DEFAULT_TARGET) -> bool:
	if isinstance(ty, IntTy):
		return check_int_type(ty.int_type, target=target)
	if isinstance(ty, (BoolTy, RawPtrTy)):
		return True
	if isinstance(ty, RefTy):
		return check_layout(ty.pointee, target=target)
	if isinstance(ty, BoxTy):
		return check_type(ty.pointee, target=target)
	if isinstance(ty, TupleTy):
		return _check_tuple(ty, target)
	if isinstance(ty, ArrayTy):
		if not check_type(ty.elem, target=target):
			return False
		return checked_mul(type_size(ty.elem, target), ty.count, target) is not None
	if isinstance(ty, UnionTy):
		return _check_union(ty, target)
	if isinstance(ty, EnumTy):
		if size_from_bytes(ty.size, target) is None:
			return False
		for variant in ty.variants:
			if not check_type(variant, target=target):
				return False
			if type_size(variant, target) > ty.size:
				return False
		return True
	raise TypeError(f"unknown type node {ty!r}")


def _check_tuple(ty: TupleTy, target: Target) -> bool:
	if size_from_bytes(ty.size, target) is None or align_from_bytes(ty.align, target) is None:
		return False
	# Scan fields in offset order; each must start at or after the previous end.
	last_end = 0
	for offset, field_ty in sorted(ty.fields, key=lambda f: f[0]):
		if not check_type(field_ty, target=target):
			return False
		if offset < last_end:
			return False
		end = checked_add(offset, type_size(field_ty, target), target)
		if end is None:
			return False
		last_end = end
	return last_end <= ty.size


def _check_union(ty: UnionTy, target: Target) -> bool:
	if size_from_bytes(ty.size, target) is None:
		return False
	for offset, field_ty in ty.fields:
		if not check_type(field_ty, target=target):
			return False
		if size_from_bytes(offset, target) is None:
			return False
		end = checked_add(offset, type_size(field_ty, target), target)
		if end is None or end > ty.size:
			return False
	return True


def check_place_type(ptype: PlaceType, *, target: Target = DEFAULT_TARGET) -> bool:
	"""The type must be well-formed and its size must be a multiple of the place alignment."""
	if not check_type(ptype.ty, target=target):
		return False
	return check_layout(Layout(size=type_size(ptype.ty, target), align=ptype.align), target=target)
