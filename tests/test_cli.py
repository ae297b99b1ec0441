import pytest
from click.testing import CliRunner

from streamctl.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, admin_server, *args):
    return runner.invoke(cli, ['--url', admin_server.url, '--timeout', '5', *args])


class TestCli:

    def test_create_and_list(self, runner, admin_server):
        result = invoke(runner, admin_server, 'create', 'ticktock', 'time | log', '--no-deploy')
        assert result.exit_code == 0, result.output
        assert "Created stream 'ticktock' (undeployed)" in result.output

        result = invoke(runner, admin_server, 'list')
        assert result.exit_code == 0, result.output
        assert 'ticktock\tundeployed\ttime | log' in result.output
        assert '(1 streams)' in result.output

    def test_duplicate_create_fails(self, runner, admin_server):
        invoke(runner, admin_server, 'create', 'dup', 'time | log')

        result = invoke(runner, admin_server, 'create', 'dup', 'time | log')

        assert result.exit_code == 1
        assert 'already a stream' in result.output

    def test_deploy_undeploy_destroy(self, runner, admin_server):
        invoke(runner, admin_server, 'create', 's', 'time | log', '--no-deploy')

        assert invoke(runner, admin_server, 'deploy', 's', '--property', 'count=2').exit_code == 0
        assert admin_server.repository.get('s')['status'] == 'deployed'

        assert invoke(runner, admin_server, 'undeploy', 's').exit_code == 0
        assert admin_server.repository.get('s')['status'] == 'undeployed'

        assert invoke(runner, admin_server, 'destroy', 's').exit_code == 0
        assert admin_server.repository.page(0, 10) == ([], 0)

    def test_bad_deploy_property(self, runner, admin_server):
        invoke(runner, admin_server, 'create', 's', 'time | log', '--no-deploy')

        result = invoke(runner, admin_server, 'deploy', 's', '--property', 'novalue')

        assert result.exit_code == 2

    def test_destroy_unknown(self, runner, admin_server):
        result = invoke(runner, admin_server, 'destroy', 'missing')

        assert result.exit_code == 1
        assert "no stream definition named 'missing'" in result.output
