"""Data models for classloader inventories."""

from enum import Enum

from pydantic import AnyUrl, BaseModel, ConfigDict, Field

from clreport.core.constants import PARENT_DEFINITION_DEFAULT, PARENT_DEFINITION_EXPLICIT


class ParentDefinition(str, Enum):
    """How a classloader's parent was determined."""

    EXPLICIT = PARENT_DEFINITION_EXPLICIT  # Configured directly
    DEFAULT = PARENT_DEFINITION_DEFAULT  # Inherited platform/default parent


class ClassloaderHandle(BaseModel):
    """Identifies a classloader or role by type and optional name."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., min_length=1, description="Classloader type, e.g. 'system'")
    name: str | None = Field(default=None, description="Optional instance name")

    def __str__(self) -> str:
        return f"{self.type}:{self.name}" if self.name is not None else self.type


class ParentLink(BaseModel):
    """A classloader's link to its parent."""

    handle: ClassloaderHandle = Field(..., description="Handle of the parent classloader")
    definition: ParentDefinition = Field(
        default=ParentDefinition.DEFAULT,
        description="Whether the parent was configured or inherited",
    )

    @property
    def is_explicit(self) -> bool:
        return self.definition == ParentDefinition.EXPLICIT


class Attribute(BaseModel):
    """A name/value attribute reported for a classloader."""

    name: str = Field(..., min_length=1)
    value: str = Field(default="")


class Entry(BaseModel):
    """A typed classpath entry such as a file or jar."""

    type: str = Field(..., min_length=1, description="Entry type, used as the attribute name")
    value: str = Field(..., description="Entry location")


class ClassloaderNode(BaseModel):
    """Everything reported about one classloader."""

    handle: ClassloaderHandle
    class_name: str | None = Field(
        default=None,
        description="Fully qualified name of the classloader's implementation class",
    )
    parent: ParentLink | None = None
    roles: list[ClassloaderHandle] = Field(default_factory=list)
    attributes: list[Attribute] = Field(default_factory=list)
    urls: list[AnyUrl] = Field(
        default_factory=list,
        description="URL classpath entries, stored in canonical form",
    )
    entries: list[Entry] = Field(default_factory=list, description="Non-URL classpath entries")
    packages: list[str] = Field(default_factory=list, description="Defined package names")
    errors: list[str] = Field(default_factory=list, description="Errors met while inspecting")
    children: list[ClassloaderHandle] = Field(default_factory=list)

    @property
    def entry_count(self) -> int:
        """Count of URL and typed entries together."""
        return len(self.urls) + len(self.entries)


class ClassloaderInventory(BaseModel):
    """Complete inventory handed to the report writer."""

    classloaders: list[ClassloaderNode] = Field(default_factory=list)
    unassigned_roles: list[ClassloaderHandle] = Field(
        default_factory=list,
        description="Roles no classloader fills",
    )

    def find(self, handle: ClassloaderHandle) -> ClassloaderNode | None:
        """Look up the node for a handle."""
        for node in self.classloaders:
            if node.handle == handle:
                return node
        return None
