from typing import Any, Iterable, Mapping

from ..core.exceptions import BadRequestError
from ._models import FieldReference

QUOTES = ("'", '"', "`")


class Helper:
    @staticmethod
    def unquote_text(text: str) -> str:
        """Remove enclosing quotes from an identifier.

        Back-quoted text is returned as is between the quotes. Inside
        single or double quotes a doubled quote stands for one quote.
        """
        if len(text) < 2:
            return text
        quote = text[0]
        if quote != text[-1] or quote not in QUOTES:
            return text
        inner = text[1:-1]
        if quote == "`":
            return inner
        return inner.replace(quote * 2, quote)

    @staticmethod
    def get_field_name(ref: str | FieldReference | Any) -> str:
        if isinstance(ref, FieldReference):
            return ref.attr
        return str(ref)

    @staticmethod
    def dedup_field_names(
        refs: Iterable[str | FieldReference],
    ) -> list[str]:
        return list(dict.fromkeys(Helper.get_field_name(r) for r in refs))

    @staticmethod
    def group_field_names_by_path(
        nested_args: Iterable[Mapping[str, str | FieldReference]],
    ) -> dict[str, list[str]]:
        groups: dict[str, list[str]] = {}
        for arg in nested_args:
            if "path" not in arg or "field" not in arg:
                raise BadRequestError(
                    f"Nested argument must have path and field: {arg!r}"
                )
            path = Helper.get_field_name(arg["path"])
            field = Helper.get_field_name(arg["field"])
            groups.setdefault(path, []).append(field)
        return groups
