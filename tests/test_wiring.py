import xml.etree.ElementTree as ET

import pytest

from streamctl.errors import ConfigurationError, ValidationError
from streamctl.wiring import (
    REACTOR_ENV_REF, DefinitionBuilder, RuntimeReference, create_definition_builder,
    parse_component_element, resolve_env_ref
)


class EventDrivenConsumer:
    pass


class TestResolveEnvRef:

    @pytest.mark.parametrize('explicit', [None, '', '   '])
    def test_blank_uses_default(self, explicit):
        assert resolve_env_ref(explicit) == REACTOR_ENV_REF == 'reactorEnv'

    def test_explicit_is_returned_unchanged(self):
        assert resolve_env_ref('customEnv') == 'customEnv'
        assert resolve_env_ref(' spaced ') == ' spaced '

    def test_custom_default(self):
        assert resolve_env_ref('', default='sharedEnv') == 'sharedEnv'

    def test_blank_default(self):
        with pytest.raises(ConfigurationError):
            resolve_env_ref(None, default='')


class TestDefinitionBuilder:

    def test_element_without_env_references_global_environment(self):
        element = ET.fromstring('<reactor-channel id="input"/>')

        definition = create_definition_builder(EventDrivenConsumer, element).build()

        assert definition.component_type is EventDrivenConsumer
        assert definition.constructor_args == (RuntimeReference('reactorEnv'),)

    def test_element_env_attribute(self):
        element = ET.fromstring('<reactor-channel id="input" env="customEnv"/>')

        definition = create_definition_builder(EventDrivenConsumer, element).build()

        assert definition.references() == ['customEnv']

    def test_mapping_element(self):
        builder = create_definition_builder(EventDrivenConsumer, {'env': ''})
        assert builder.build().references() == ['reactorEnv']

    def test_environment_is_first_constructor_argument(self):
        builder = create_definition_builder(EventDrivenConsumer, {'env': 'customEnv'})
        builder.add_constructor_arg_value(42).add_constructor_arg_reference('dispatcher')

        definition = builder.build()

        assert definition.constructor_args == (RuntimeReference('customEnv'), 42, RuntimeReference('dispatcher'))
        assert definition.references() == ['customEnv', 'dispatcher']

    def test_generic_requires_component_type(self):
        with pytest.raises(ConfigurationError):
            DefinitionBuilder.generic(None)

    def test_blank_reference_name(self):
        with pytest.raises(ValidationError):
            DefinitionBuilder.generic(EventDrivenConsumer).add_constructor_arg_reference('')

    def test_parse_component_element(self):
        definition = parse_component_element('<syslog-source env="ioEnv" port="5140"/>', EventDrivenConsumer)
        assert definition.references() == ['ioEnv']

    def test_parse_invalid_xml(self):
        with pytest.raises(ConfigurationError):
            parse_component_element('<unclosed', EventDrivenConsumer)
