"""Host platform port.

The adapter never talks to a CMS directly. Everything it does goes through
the small registration surface defined here, which a host integration (or
the in-memory reference host) implements.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


REUSABLE_BLOCK_POST_TYPE = "wp_block"


class PostTypeDefinition(BaseModel):
    """Host-owned post type definition.

    Instances handed out by a host are live references: mutating a field is
    immediately visible to everything else holding the same definition.
    Assignments are not validated, values pass through to the host as given.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(description="Post type slug")
    builtin: bool = Field(
        default=False,
        description="Whether the host treats the type as a locked built-in",
    )
    show_in_menu: bool = Field(
        default=True, description="Whether the type appears in the admin menu"
    )
    menu_icon: str | None = Field(default=None, description="Admin menu icon")
    labels: dict[str, Any] = Field(
        default_factory=dict, description="Display labels keyed by label name"
    )
    capability_type: str | list[str] = Field(
        default="post", description="Base capability type used to build caps"
    )
    capabilities: dict[str, Any] = Field(
        default_factory=dict, description="Capability mapping for the type"
    )
    show_in_graphql: bool = Field(
        default=False, description="Expose the type through a GraphQL schema"
    )
    graphql_single_name: str | None = Field(default=None)
    graphql_plural_name: str | None = Field(default=None)


CallKind = Literal["feature_flag", "filter_override", "post_type", "action"]


@dataclass(frozen=True)
class RegistrationCall:
    """One call made through the host port, as recorded by a host."""

    kind: CallKind
    name: str
    options: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "name": self.name, "options": self.options}


@runtime_checkable
class EditorHost(Protocol):
    """Registration API consumed by the feature dispatcher."""

    def register_feature_flag(self, name: str, options: Any = None) -> None:
        """Declare that a feature is supported, optionally with options."""
        ...

    def register_filter_override(
        self, hook_name: str, constant_result: bool, priority: int = 10
    ) -> None:
        """Force a named decision point to always return a fixed value."""
        ...

    def get_post_type_definition(self, type_name: str) -> PostTypeDefinition:
        """Return a live, mutable reference to a post type definition."""
        ...

    def add_action(
        self, hook_name: str, callback: Callable[[], Any], priority: int = 10
    ) -> None:
        """Run ``callback`` when the host fires ``hook_name``."""
        ...
