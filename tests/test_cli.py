"""
Tests for the command line interface.
"""

import logging

import pytest
from click.testing import CliRunner

from main import cli
from slack_sheets.cli import context
from slack_sheets.components.common.slack_client import SlackClient
from slack_sheets.components.destination.workbook_destination import WorkbookDestination


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv('LOG_DIR', str(tmp_path / 'logs'))
    monkeypatch.setenv('WORKBOOK_PATH', str(tmp_path / 'slack.xlsx'))
    monkeypatch.setenv('SLACK_TOKEN', 'xoxb-test')
    monkeypatch.delenv('SLACK_SHEETS_LOG_LEVEL', raising=False)
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def use_session(monkeypatch, make_session):
    """Route every client the CLI builds through a stub session."""
    def install(responses):
        session = make_session(responses)
        monkeypatch.setattr(
            context,
            'SlackClient',
            lambda token, base_url: SlackClient(token, base_url=base_url, session=session)
        )
        return session
    return install


def test_users_export(tmp_path, use_session, users):
    use_session({'users.list': {'ok': True, 'members': users}})

    result = CliRunner().invoke(cli, ['users', 'Users', '-f', 'id', '-f', 'profile.email'])

    assert result.exit_code == 0, result.output
    assert 'Export complete' in result.output
    assert WorkbookDestination(tmp_path / 'slack.xlsx').read_table('Users') == [
        ['id', 'profile.email'],
        ['U001', 'ana@example.com'],
        ['U002', 'bo@example.com'],
    ]


def test_channels_export_options(tmp_path, use_session, channels):
    session = use_session({'conversations.list': {'ok': True, 'channels': channels}})
    workbook = tmp_path / 'other.xlsx'

    result = CliRunner().invoke(cli, [
        '--workbook', str(workbook),
        'channels', 'Channels', '--include-archived', '--types', 'public_channel', '--limit', '20',
    ])

    assert result.exit_code == 0, result.output
    assert session.calls[0][1] == {'exclude_archived': 'false', 'types': 'public_channel', 'limit': 20}
    assert WorkbookDestination(workbook).read_table('Channels')[0][:2] == ['id', 'name']


def test_api_error_exits_with_code(use_session):
    use_session({'users.list': {'ok': False, 'error': 'invalid_auth'}})

    result = CliRunner().invoke(cli, ['users', 'Users'])

    assert result.exit_code == 1
    assert 'invalid_auth' in result.output


def test_missing_token(monkeypatch):
    monkeypatch.setenv('SLACK_TOKEN', '')

    result = CliRunner().invoke(cli, ['users', 'Users'])

    assert result.exit_code == 1
    assert 'no Slack token' in result.output


def test_create_channel(use_session):
    session = use_session({'conversations.create': {'ok': True, 'channel': {'id': 'C9', 'name': 'launch'}}})

    result = CliRunner().invoke(cli, ['create-channel', 'launch', '--public'])

    assert result.exit_code == 0, result.output
    assert '#launch (C9)' in result.output
    assert session.calls[0][1] == {'name': 'launch', 'is_private': 'false'}


def test_invite(use_session):
    session = use_session({'conversations.invite': {'ok': True, 'channel': {'id': 'C1'}}})

    result = CliRunner().invoke(cli, ['invite', 'C1', 'U1', 'U2'])

    assert result.exit_code == 0, result.output
    assert session.calls[0][1] == {'channel': 'C1', 'users': 'U1,U2'}


def test_invite_error(use_session):
    use_session({'conversations.invite': {'ok': False, 'error': 'channel_not_found'}})

    result = CliRunner().invoke(cli, ['invite', 'C404', 'U1'])

    assert result.exit_code == 1
    assert 'channel_not_found' in result.output


def test_open_dm(use_session):
    use_session({'conversations.open': {'ok': True, 'channel': {'id': 'D1'}}})

    result = CliRunner().invoke(cli, ['open-dm', 'U1', 'U2'])

    assert result.exit_code == 0, result.output
    assert 'D1' in result.output


def test_post(use_session):
    session = use_session({'chat.postMessage': {'ok': True, 'channel': 'C1', 'ts': '1.2'}})

    result = CliRunner().invoke(cli, ['post', '#general', 'hello there'])

    assert result.exit_code == 0, result.output
    assert session.calls[0][1] == {'channel': '#general', 'text': 'hello there'}


def test_workflow(tmp_path, use_session, channels, users):
    use_session({
        'conversations.list': {'ok': True, 'channels': channels},
        'users.list': {'ok': True, 'members': users},
    })
    config = tmp_path / 'workflow.yaml'
    config.write_text(f"""
workbook:
  path: {tmp_path / 'batch.xlsx'}
logging:
  log_dir: {tmp_path / 'logs'}
exports:
  - {{source: channels, sheet: Channels, fields: [id]}}
  - {{source: users, sheet: Users, fields: [id]}}
""", encoding='utf-8')

    result = CliRunner().invoke(cli, ['workflow', str(config)])

    assert result.exit_code == 0, result.output
    assert 'Workflow complete' in result.output
    assert WorkbookDestination(tmp_path / 'batch.xlsx').sheet_names() == ['Channels', 'Users']


def test_workflow_missing_file():
    result = CliRunner().invoke(cli, ['workflow', 'missing.yaml'])

    assert result.exit_code == 1
    assert 'Config file not found' in result.output


def test_workflow_invalid(tmp_path):
    config = tmp_path / 'workflow.yaml'
    config.write_text("exports: []\n", encoding='utf-8')

    result = CliRunner().invoke(cli, ['workflow', str(config)])

    assert result.exit_code == 1
    assert 'Invalid workflow' in result.output


def test_unknown_log_level_override(monkeypatch, use_session, users):
    monkeypatch.setenv('SLACK_SHEETS_LOG_LEVEL', 'verbose')
    session = use_session({'users.list': {'ok': True, 'members': users}})

    result = CliRunner().invoke(cli, ['users', 'Users'])

    assert result.exit_code == 1
    assert 'Invalid configuration' in result.output
    assert 'VERBOSE' in result.output
    assert session.calls == []


def test_workflow_malformed_yaml(tmp_path):
    config = tmp_path / 'workflow.yaml'
    config.write_text("exports: [\n", encoding='utf-8')

    result = CliRunner().invoke(cli, ['workflow', str(config)])

    assert result.exit_code == 1
    assert 'Invalid workflow' in result.output
    assert 'Invalid YAML' in result.output


def test_workflow_without_logging_section_uses_settings(tmp_path, monkeypatch, use_session, users):
    settings_logs = tmp_path / 'settings-logs'
    monkeypatch.setenv('LOG_DIR', str(settings_logs))
    use_session({'users.list': {'ok': True, 'members': users}})
    config = tmp_path / 'workflow.yaml'
    config.write_text("exports:\n  - {source: users, sheet: Users, fields: [id]}\n", encoding='utf-8')

    result = CliRunner().invoke(cli, ['workflow', str(config)])

    assert result.exit_code == 0, result.output
    assert list(settings_logs.glob('slack-sheets-workflow-command_*.log'))
