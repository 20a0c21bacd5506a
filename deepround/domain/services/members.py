import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel


@dataclass(frozen=True)
class Member:
    """A settable member of a composite value and its raw precision tag."""

    name: str
    tag: Optional[str] = None


def is_settable(name: str) -> bool:
    return not name.startswith("_")


def _render_tag(tag: Any) -> Optional[str]:
    if tag is None:
        return None
    return tag if isinstance(tag, str) else str(tag)


def _dataclass_members(node: Any, tag_key: str) -> list[Member]:
    params = getattr(type(node), "__dataclass_params__", None)
    if params is not None and params.frozen:
        return []

    return [
        Member(name=f.name, tag=_render_tag(f.metadata.get(tag_key)))
        for f in dataclasses.fields(node)
        if is_settable(f.name)
    ]


def _model_members(node: BaseModel, tag_key: str) -> list[Member]:
    if node.model_config.get("frozen"):
        return []

    members = []
    for name, info in type(node).model_fields.items():
        if not is_settable(name) or info.frozen:
            continue

        extra = info.json_schema_extra
        tag = extra.get(tag_key) if isinstance(extra, dict) else None
        members.append(Member(name=name, tag=_render_tag(tag)))

    return members


def composite_members(node: Any, tag_key: str) -> Optional[list[Member]]:
    """
    List the members the walker may rewrite, in declaration order.

    Private members (leading underscore) and every member of a frozen
    dataclass or model are left out.

    :param node: Any value
    :param tag_key: Metadata key holding the precision tag
    :return: The members, or None if ``node`` is not a composite
    """
    if dataclasses.is_dataclass(node) and not isinstance(node, type):
        return _dataclass_members(node, tag_key)

    if isinstance(node, BaseModel):
        return _model_members(node, tag_key)

    return None
