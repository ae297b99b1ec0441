"""
Tests for the admin server stub, exercised through Flask's test client.
"""

import pytest

from streamctl.config import TestingConfig
from streamctl.testing import create_admin_app


@pytest.fixture
def app():
    return create_admin_app(TestingConfig)


@pytest.fixture
def http(app):
    return app.test_client()


class TestStreamDefinitionsApi:

    def test_create_returns_resource(self, http):
        response = http.post('/streams/definitions', data={
            'name': 'ticktock', 'definition': 'time | log', 'deploy': 'false'
        })

        assert response.status_code == 201
        body = response.get_json()
        assert body['name'] == 'ticktock'
        assert body['status'] == 'undeployed'
        assert body['links'][0]['rel'] == 'self'

    def test_create_accepts_json(self, http):
        response = http.post('/streams/definitions', json={'name': 'j', 'definition': 'http | log'})

        assert response.status_code == 201
        assert response.get_json()['status'] == 'deployed'

    def test_conflict(self, http):
        http.post('/streams/definitions', data={'name': 'n', 'definition': 'time | log'})

        response = http.post('/streams/definitions', data={'name': 'n', 'definition': 'time | log'})

        assert response.status_code == 409
        assert response.get_json()[0]['logref'] == 'ConflictError'

    def test_blank_name_is_rejected(self, http):
        response = http.post('/streams/definitions', data={'name': '', 'definition': 'time | log'})

        assert response.status_code == 400

    def test_default_page_size(self, http, app):
        for index in range(app.config['DEFAULT_PAGE_SIZE'] + 1):
            http.post('/streams/definitions', data={'name': f"s{index}", 'definition': 'time | log'})

        body = http.get('/streams/definitions').get_json()

        assert len(body['content']) == app.config['DEFAULT_PAGE_SIZE']
        assert body['page']['totalPages'] == 2
        assert [link['rel'] for link in body['links']] == ['self', 'next']

    def test_invalid_paging(self, http):
        assert http.get('/streams/definitions?page=-1').status_code == 400
        assert http.get('/streams/definitions?size=abc').status_code == 400

    def test_get_unknown(self, http):
        assert http.get('/streams/definitions/missing').status_code == 404
