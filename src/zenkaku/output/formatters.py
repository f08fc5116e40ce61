"""Pick the output for a ServiceResult from the global output flags.

``--json`` always wins and prints the whole result. Otherwise conversion
results print their lines verbatim, since those lines are the product,
and everything else goes through the Rich renderers (or, with
``--quiet``, a bare minimum).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from zenkaku.output.renderers import error_report, scheme_table

if TYPE_CHECKING:
    from zenkaku.services.result import ServiceResult

# Ops whose ``data["lines"]`` are printed as-is.
TEXT_OPS = frozenset({"encode", "decode"})


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    quiet: bool = False,
    verbose: bool = False,
) -> str:
    if json_output:
        return result.model_dump_json(indent=2)

    if result.error is not None:
        return result.error.message if quiet else error_report(result, verbose=verbose)

    if result.op in TEXT_OPS:
        return "\n".join(result.data["lines"])

    if result.op == "list_schemes":
        items = result.data["items"]
        if quiet:
            return "\n".join(item["name"] for item in items)
        return scheme_table(items)

    msg = f"No output format for op {result.op!r}"
    raise ValueError(msg)
