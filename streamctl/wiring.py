# streamctl/wiring.py

"""
Helpers for wiring the shared reactive execution environment into
component definitions parsed from XML configuration.

A component element may name the environment to use through its ``env``
attribute; when the attribute is missing or blank the global environment
(``reactorEnv``) is referenced instead.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple
import logging
import xml.etree.ElementTree as ET

from streamctl.errors import ConfigurationError, require_text

logger = logging.getLogger(__name__)

REACTOR_ENV_REF = "reactorEnv"
ENV_ATTRIBUTE = "env"


def resolve_env_ref(explicit: Optional[str], default: str = REACTOR_ENV_REF) -> str:
    """Return explicit if it has text, otherwise the default reference name"""
    if explicit is not None and explicit.strip():
        return explicit
    return require_text(default, "Default environment reference must not be empty", ConfigurationError)


@dataclass(frozen=True)
class RuntimeReference:
    """Reference to another component by name, resolved by the container"""
    name: str


@dataclass(frozen=True)
class ComponentDefinition:
    component_type: Any
    constructor_args: Tuple[Any, ...] = ()

    def references(self) -> List[str]:
        return [arg.name for arg in self.constructor_args if isinstance(arg, RuntimeReference)]


@dataclass
class DefinitionBuilder:
    """Accumulates constructor arguments for a component definition"""
    component_type: Any
    constructor_args: List[Any] = field(default_factory=list)

    @classmethod
    def generic(cls, component_type: Any) -> 'DefinitionBuilder':
        if component_type is None:
            raise ConfigurationError("component_type can not be None")
        return cls(component_type)

    def add_constructor_arg_reference(self, name: str) -> 'DefinitionBuilder':
        self.constructor_args.append(RuntimeReference(require_text(name, "Reference name must not be empty")))
        return self

    def add_constructor_arg_value(self, value: Any) -> 'DefinitionBuilder':
        self.constructor_args.append(value)
        return self

    def build(self) -> ComponentDefinition:
        return ComponentDefinition(self.component_type, tuple(self.constructor_args))


def create_definition_builder(component_type: Any, element: Any) -> DefinitionBuilder:
    """
    Create a builder whose first constructor argument references the
    execution environment named by the element's ``env`` attribute.

    Args:
        component_type: Type of the component the definition is built for
        element: XML element (or any mapping with ``get``) to query for ``env``

    Returns:
        DefinitionBuilder
    """
    env_ref = resolve_env_ref(element.get(ENV_ATTRIBUTE) if element is not None else None)
    logger.debug(f"Wiring {getattr(component_type, '__name__', component_type)} to environment '{env_ref}'")

    builder = DefinitionBuilder.generic(component_type)
    builder.add_constructor_arg_reference(env_ref)
    return builder


def parse_component_element(xml_text: str, component_type: Any) -> ComponentDefinition:
    """Parse a single component element and build its definition"""
    try:
        element = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ConfigurationError(f"Invalid component element: {str(e)}")
    return create_definition_builder(component_type, element).build()
