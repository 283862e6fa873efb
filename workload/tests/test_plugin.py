import json

import pytest

import block_height_plugin
from detector import EvaluationResult, Severity, State
from plugin import Plugin


def test_execute_without_feature_raises():
    with pytest.raises(RuntimeError):
        Plugin("empty").execute()


def test_execute_passes_info_and_option():
    seen = {}

    def feature(info, option):
        seen["info"], seen["option"] = info, option
        return EvaluationResult(message="ok", severity=Severity.INFO, state=State.SUCCESS, func_name=info["execute_method"])

    plugin = Plugin("test")
    plugin.register(feature)
    result = plugin.execute({"execute_method": "m"}, {"k": "v"})
    assert result.func_name == "m"
    assert seen == {"info": {"execute_method": "m"}, "option": {"k": "v"}}


@pytest.fixture
def client():
    args = block_height_plugin.build_parser().parse_args(["--rpc-url", "http://node:8545", "--critical", "1"])
    plugin = block_height_plugin.build_plugin(args)
    return plugin.create_app().test_client()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"plugin": "vatz-plugin-ethereum-block-height", "status": "ok"}


def test_execute_over_http(client, fake_node):
    fake_node.reply_height("0x2")
    fake_node.reply_height("0x2")
    fake_node.reply_height("0x2")

    first = client.post("/execute", json={"info": {"execute_method": "block_height"}}).get_json()
    second = client.post("/execute").get_json()
    third = client.post("/execute", json={}).get_json()

    assert first == {
        "func_name": "block_height",
        "message": "Block height increasing. Current height: 2",
        "severity": "INFO",
        "state": "SUCCESS",
        "success": True,
    }
    assert second["severity"] == "WARNING"
    assert third["severity"] == "CRITICAL"
    assert third["message"] == "Block height stuck more than 1 times. Current height: 2"
    assert fake_node.calls[0]["url"] == "http://node:8545"


def test_execute_reports_node_failure(client, fake_node, connection_refused):
    fake_node.fail(connection_refused)
    body = client.post("/execute").get_json()
    assert body["severity"] == "CRITICAL"
    assert body["state"] == "FAILURE"
    assert body["success"] is False


def test_execute_rejects_non_object_body(client):
    response = client.post("/execute", json=[1, 2])
    assert response.status_code == 400


def test_once_prints_result_and_exits_with_severity(fake_node, capsys):
    fake_node.reply_height("0x0")
    assert block_height_plugin.main(["--once"]) == 1
    out = capsys.readouterr().out.strip().splitlines()
    assert json.loads(out[-1])["message"] == "Block height stuck 1 times. Current height: 0"


def test_once_with_unreachable_node(fake_node, connection_refused):
    fake_node.fail(connection_refused)
    assert block_height_plugin.main(["--once"]) == 2


def test_negative_critical_is_rejected():
    with pytest.raises(SystemExit):
        block_height_plugin.build_parser().parse_args(["--critical", "-1"])


@pytest.mark.parametrize("timeout", ["0", "-1"])
def test_non_positive_timeout_is_rejected(timeout):
    with pytest.raises(SystemExit):
        block_height_plugin.build_parser().parse_args(["--timeout", timeout])


def test_positive_timeout_reaches_the_request(fake_node):
    args = block_height_plugin.build_parser().parse_args(["--timeout", "0.5"])
    fake_node.reply_height("0x1")
    assert block_height_plugin.build_plugin(args).execute({}, {}).success
    assert fake_node.calls[0]["timeout"] == 0.5
