# aeplib/api.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Contact:
    name: str = ""
    email: str = ""
    url: str = ""


@dataclass(frozen=True)
class GetMethod:
    pass


@dataclass(frozen=True)
class ListMethod:
    has_unreachable_resources: bool = False
    supports_filter: bool = False
    supports_skip: bool = False


@dataclass(frozen=True)
class CreateMethod:
    # caller may pick the new resource's id (sent as ?id=...)
    supports_user_settable_create: bool = False


@dataclass(frozen=True)
class UpdateMethod:
    pass


@dataclass(frozen=True)
class DeleteMethod:
    pass


@dataclass(frozen=True)
class CustomMethod:
    name: str
    method: str
    request: Optional[Dict[str, Any]] = None
    response: Optional[Dict[str, Any]] = None


@dataclass(frozen=True, eq=False)
class Resource:
    """
    Resolved description of one resource type.

    pattern_elems alternates literal segments (even index) and
    "{param}" placeholders (odd index), e.g.
    ["publishers", "{publisher}", "books", "{book}"].

    parents/children point at other Resource objects of the same API and
    are filled in by whoever builds the graph, so they are kept out of
    equality and repr.
    """
    singular: str
    plural: str
    pattern_elems: List[str] = field(default_factory=list)
    schema: Dict[str, Any] = field(default_factory=dict)
    parents: List["Resource"] = field(default_factory=list, repr=False)
    children: List["Resource"] = field(default_factory=list, repr=False)
    get_method: Optional[GetMethod] = None
    list_method: Optional[ListMethod] = None
    create_method: Optional[CreateMethod] = None
    update_method: Optional[UpdateMethod] = None
    delete_method: Optional[DeleteMethod] = None
    custom_methods: List[CustomMethod] = field(default_factory=list)

    def find_custom_method(self, name: str) -> Optional[CustomMethod]:
        """Return the custom method called `name`, if the resource has one"""
        for custom_method in self.custom_methods:
            if custom_method.name == name:
                return custom_method
        return None


@dataclass(frozen=True)
class PatternInfo:
    is_resource_pattern: bool
    custom_method_name: str = ""


@dataclass(frozen=True)
class API:
    server_url: str
    name: str
    contact: Optional[Contact] = None
    schemas: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    resources: Dict[str, Resource] = field(default_factory=dict)
