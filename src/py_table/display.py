"""Display, repr and dump logic for PyColumn and PyTable."""

from __future__ import annotations
from typing import List


# How many rows/columns to show before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5


def _needs_quoting(name: str) -> bool:
	"""A name needs quoting if it contains anything outside [A-Za-z0-9_]
	OR has leading/trailing whitespace."""
	if not name:
		return False
	if name != name.strip():
		return True
	return not all(c.isalnum() or c == "_" for c in name)


def _format_value(v, kind) -> str:
	"""Default string form of a scalar of the given kind."""
	if kind is float:
		return repr(v)
	return str(v)


def _preview(values, max_preview: int = MAX_HEAD_ROWS) -> list:
	"""Symmetric head/tail preview with a '...' marker in the middle."""
	if len(values) > max_preview * 2:
		return list(values[:max_preview]) + [...] + list(values[-max_preview:])
	return list(values)


def _format_column(col, max_preview: int = MAX_HEAD_ROWS) -> List[str]:
	"""Returns a list of strings representing that column, truncated for display."""
	kind = col.schema().kind
	out = []
	for v in _preview(col.to_list(), max_preview):
		if v is ...:
			out.append('...')
		elif kind is str:
			out.append(repr(v))
		else:
			out.append(_format_value(v, kind))
	return out


def _is_numeric_name(dtype_name: str) -> bool:
	return dtype_name in ('int', 'float')


def _align_columns(formatted_cols, headers, col_dtypes):
	"""Pad columns and headers to consistent widths. Numbers right, others left."""
	aligned_cols = []
	aligned_headers = []
	for col, header, dtype in zip(formatted_cols, headers, col_dtypes):
		w = max([len(s) for s in col] + [len(header)])
		if _is_numeric_name(dtype):
			aligned_cols.append([s.rjust(w) for s in col])
			aligned_headers.append(header.rjust(w))
		else:
			aligned_cols.append([s.ljust(w) for s in col])
			aligned_headers.append(header.ljust(w))
	return aligned_cols, aligned_headers


def _header_name(name) -> str:
	if name is None:
		return ""
	return repr(name) if _needs_quoting(name) else name


def _footer(pv) -> str:
	"""Generate footer line based on shape and dtypes."""
	if hasattr(pv, 'shape'):
		rows, cols = pv.shape
		if cols == 0:
			return "# 0×0 table"
		d = ", ".join(dt.name for dt in pv.dtypes())
		return f"# {rows}×{cols} table <{d}>"
	return f"# {len(pv)} element column <{pv.schema().name}>"


def _repr_column(v) -> str:
	"""Pretty repr for a PyColumn."""
	formatted = _format_column(v)
	header = _header_name(v.name)
	[formatted], [header] = _align_columns([formatted], [header], [v.schema().name])

	lines = []
	if v.name is not None:
		lines.append(header)
	lines.extend(formatted)
	lines.append("")
	lines.append(_footer(v))
	return "\n".join(lines)


def _repr_table(tbl) -> str:
	"""Pretty repr for a PyTable."""
	cols = tbl.cols()
	num_cols = len(cols)

	if num_cols == 0:
		return _footer(tbl)

	truncated = num_cols > MAX_HEAD_COLS * 2
	if truncated:
		col_indices = list(range(MAX_HEAD_COLS)) + list(range(num_cols - MAX_HEAD_COLS, num_cols))
	else:
		col_indices = list(range(num_cols))

	headers = [_header_name(cols[i].name) for i in col_indices]
	dtypes = [cols[i].schema().name for i in col_indices]
	formatted_cols = [_format_column(cols[i]) for i in col_indices]

	# Leading row-number column
	row_numbers = [('...' if r is ... else str(r)) for r in _preview(range(len(tbl)))]
	formatted_cols.insert(0, row_numbers)
	headers.insert(0, "")
	dtypes.insert(0, "int")

	if truncated:
		ellipsis_col = ["..." for _ in range(len(formatted_cols[0]))]
		formatted_cols.insert(MAX_HEAD_COLS + 1, ellipsis_col)
		headers.insert(MAX_HEAD_COLS + 1, "...")
		dtypes.insert(MAX_HEAD_COLS + 1, "...")

	aligned_cols, aligned_headers = _align_columns(formatted_cols, headers, dtypes)

	lines = ["  ".join(aligned_headers)]
	for r in range(len(aligned_cols[0])):
		lines.append("  ".join(col[r] for col in aligned_cols))
	lines.append("")
	lines.append(_footer(tbl))
	return "\n".join(lines)


def _dump_table(tbl) -> str:
	"""
	Tab-separated grid: a header row of column names, then one line per
	row led by its row index. Not meant to be parsed back.
	"""
	cols = tbl.cols()
	if not cols:
		return ""
	kinds = [col.schema().kind for col in cols]
	lines = ["\t".join([""] + [str(col.name) for col in cols])]
	for i, row in enumerate(tbl.rows()):
		lines.append("\t".join([str(i)] + [_format_value(v, k) for v, k in zip(row, kinds)]))
	return "\n".join(lines)


def _printr(pv) -> str:
	"""Entry point used by PyColumn.__repr__ and PyTable.__repr__."""
	if hasattr(pv, 'shape'):
		return _repr_table(pv)
	return _repr_column(pv)
