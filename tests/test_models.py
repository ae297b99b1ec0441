import pytest

from streamctl.errors import ValidationError
from streamctl.models import PageRequest, StreamDefinition, StreamPage


class TestStreamDefinition:

    def test_from_dict(self):
        stream = StreamDefinition.from_dict({
            'name': 'ticktock',
            'definition': 'time | log',
            'status': 'deployed',
            'links': [{'rel': 'self', 'href': 'http://admin/streams/definitions/ticktock'}]
        })

        assert stream.name == 'ticktock'
        assert stream.deployed is True
        assert stream.links == {'self': 'http://admin/streams/definitions/ticktock'}

    def test_explicit_deployed_flag_wins(self):
        stream = StreamDefinition.from_dict({'name': 'n', 'definition': 'd', 'deployed': True})
        assert stream.deployed is True
        assert stream.status is None

    def test_hal_style_links(self):
        stream = StreamDefinition.from_dict({
            'name': 'n',
            'definition': 'd',
            '_links': {},
            'links': {'self': {'href': 'http://admin/n'}}
        })
        assert stream.links == {'self': 'http://admin/n'}

    def test_missing_fields(self):
        with pytest.raises(ValidationError):
            StreamDefinition.from_dict({'name': 'n'})

    def test_to_dict(self):
        stream = StreamDefinition('n', 'd', True, 'deployed', {'self': 'http://admin/n'})
        assert stream.to_dict() == {
            'name': 'n',
            'definition': 'd',
            'deployed': True,
            'status': 'deployed',
            'links': [{'rel': 'self', 'href': 'http://admin/n'}]
        }

    def test_immutable(self):
        stream = StreamDefinition('n', 'd')
        with pytest.raises(AttributeError):
            stream.name = 'other'


class TestStreamPage:

    def test_from_paged_collection(self):
        page = StreamPage.from_dict({
            'content': [
                {'name': 'a', 'definition': 'time | log', 'status': 'undeployed'},
                {'name': 'b', 'definition': 'http | log', 'status': 'deployed'}
            ],
            'links': [{'rel': 'next', 'href': 'http://admin/streams/definitions?page=1&size=2'}],
            'page': {'size': 2, 'totalElements': 3, 'totalPages': 2, 'number': 0}
        })

        assert page.names() == ['a', 'b']
        assert page.total_elements == 3
        assert page.next_link == 'http://admin/streams/definitions?page=1&size=2'
        assert page.has_next

    def test_embedded_collection(self):
        page = StreamPage.from_dict({
            '_embedded': {'streamDefinitionResourceList': [{'name': 'a', 'definition': 'd'}]},
            '_links': {'self': {'href': 'http://admin/streams/definitions'}}
        })

        assert page.names() == ['a']
        assert page.total_pages == 1
        assert not page.has_next

    def test_empty(self):
        page = StreamPage.from_dict({'content': []})
        assert len(page) == 0
        assert page.total_pages == 0
        assert not page.has_next

    @pytest.mark.parametrize('body', [
        ['not', 'a', 'page'],
        {'content': [{'name': 'a', 'definition': 'd'}], 'page': {'size': 'many'}},
    ])
    def test_malformed_page(self, body):
        with pytest.raises(ValidationError):
            StreamPage.from_dict(body)


class TestPageRequest:

    def test_unset_fields_are_omitted(self):
        assert PageRequest().to_params() == {}
        assert PageRequest(page=2).to_params() == {'page': 2}
        assert PageRequest(page=0, size=10).to_params() == {'page': 0, 'size': 10}

    @pytest.mark.parametrize('page,size', [(-1, None), (None, 0)])
    def test_invalid(self, page, size):
        with pytest.raises(ValidationError):
            PageRequest(page=page, size=size)
